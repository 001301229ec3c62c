"""The state of one run."""

from __future__ import annotations

from immolate.deck import Deck, Decks
from immolate.rng import RandomState
from immolate.voucher import VoucherArray


class State:
    """A run: its random source, deck, vouchers, gold and joker slots."""

    def __init__(self, seed: str, deck_type: Decks) -> None:
        self.random_state = RandomState(seed)
        self.vouchers = VoucherArray()
        self.gold = 4
        self.joker_amount = 5
        self._first_pack = True
        self.deck: Deck = deck_type.setup(self)

    def next_ante(self) -> None:
        """Move on to the next ante."""
        self.random_state.ante += 1

    def take_first_pack(self) -> bool:
        """Return whether this pack is the guaranteed first pack, then flip the flag."""
        value = self._first_pack
        self._first_pack = not self._first_pack
        return value