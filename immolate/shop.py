"""The shop: its packs, voucher and cards, and the command that shows one."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace

from immolate.deck import Decks
from immolate.joker import Rarity
from immolate.pack import WEIGHTED_PACKS, AnyCard, Pack, PackCardType, _roll
from immolate.state import State
from immolate.voucher import Voucher

SHOP_KEY = "sho"
BASE_RATE_TOTAL = 28.0


@dataclass
class Rate:
    """The weight of one card kind in the shop's card roll."""

    rate: float
    card_type: PackCardType


BASE_RATES: tuple[Rate, ...] = (
    Rate(20.0, PackCardType.JOKER),
    Rate(4.0, PackCardType.TAROT),
    Rate(4.0, PackCardType.PLANET),
    Rate(0.0, PackCardType.CARD),
    Rate(0.0, PackCardType.SPECTRAL),
)


class Shop:
    """One shop visit: two packs, a voucher and ``shop_size`` cards."""

    def __init__(self) -> None:
        self.shop_size = 2
        self.voucher = Voucher.from_number(0)
        self.packs: list[Pack] = [WEIGHTED_PACKS[0], WEIGHTED_PACKS[0]]
        self.cards: list[AnyCard] = []
        self.rates: list[Rate] = [replace(rate) for rate in BASE_RATES]
        self.total_rate = BASE_RATE_TOTAL

    def __repr__(self) -> str:
        return (
            f"Shop(shop_size={self.shop_size}, voucher={self.voucher!r}, "
            f"packs={self.packs!r}, cards={self.cards!r}, rates={self.rates!r}, "
            f"total_rate={self.total_rate!r})"
        )

    def random(self, game_state: State) -> None:
        """Roll the packs, the voucher and the cards for this shop."""
        self.packs = [Pack.get_random_pack(game_state) for _ in self.packs]
        self.voucher = game_state.vouchers.random(game_state.random_state, False)
        self.cards = [self._random_card(game_state) for _ in range(self.shop_size)]

    def _random_card(self, game_state: State) -> AnyCard:
        random_state = game_state.random_state
        roll = random_state.random_double(f"cdt{random_state.ante}{random_state.seed}")
        polled = roll * self.total_rate
        accumulated = 0.0
        chosen = self.rates[0].card_type
        for rate in self.rates:
            accumulated += rate.rate
            if accumulated > polled:
                chosen = rate.card_type
                break
        return _roll(chosen, random_state, Rarity.COMMON, SHOP_KEY)

    def set_spectral_rate(self, amount: float) -> None:
        """Set the spectral card weight and add it to the total weight."""
        self.rates[4].rate = amount
        self.total_rate += amount

    def set_card_rate(self, amount: float) -> None:
        """Set the playing card weight and add it to the total weight."""
        self.rates[3].rate = amount
        self.total_rate += amount


def main(argv: list[str] | None = None) -> int:
    """Roll and print the first shop of a run."""
    parser = argparse.ArgumentParser(description="Show the first shop for a seed.")
    parser.add_argument("seed", nargs="?", default="ABC")
    parser.add_argument(
        "--deck", default="RED", choices=[deck.name for deck in Decks], type=str.upper
    )
    args = parser.parse_args(argv)

    game_state = State(args.seed, Decks[args.deck])
    shop = Shop()
    shop.random(game_state)
    print(f"shop: {shop!r}")
    return 0