"""Playing cards."""

from __future__ import annotations

from dataclasses import dataclass

from immolate.rng import RandomState

CARD_CARDS: tuple[str, ...] = tuple(
    f"{suit}_{rank}"
    for suit in "CDHS"
    for rank in ("2", "3", "4", "5", "6", "7", "8", "9", "A", "J", "K", "Q", "T")
)


@dataclass(frozen=True)
class Card:
    """A playing card, named ``<suit>_<rank>``."""

    name: str

    @classmethod
    def from_number(cls, index: int) -> Card:
        """Return the card at ``index`` of the standard card table."""
        if not 0 <= index < len(CARD_CARDS):
            raise IndexError(f"card index out of range: {index}")
        return cls(CARD_CARDS[index])

    @classmethod
    def get_random(cls, random_state: RandomState, key: str) -> Card:
        """Roll a random card for the source identified by ``key``."""
        node_id = f"front{key}{random_state.ante}{random_state.seed}"
        index = random_state.random_index(0.0, float(len(CARD_CARDS) - 1), node_id)
        return cls.from_number(index)