"""Booster packs: their weights, sizes and the cards they hold."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

from immolate.card import Card
from immolate.consumables import Planet, Spectral, Tarot
from immolate.joker import Joker, Rarity
from immolate.rng import RandomState

if TYPE_CHECKING:
    from immolate.state import State

AnyCard = Union[Tarot, Joker, Spectral, Planet, Card]


class PackCardType(Enum):
    """The kind of card a pack or shop slot holds."""

    TAROT = auto()
    JOKER = auto()
    SPECTRAL = auto()
    PLANET = auto()
    CARD = auto()


def _roll(card_type: PackCardType, random_state: RandomState, rarity: Rarity, key: str) -> AnyCard:
    """Roll one card of ``card_type``; ``key`` names the source for jokers and playing cards."""
    if card_type is PackCardType.TAROT:
        return Tarot.get_random(random_state)
    if card_type is PackCardType.JOKER:
        return Joker.get_random(random_state, rarity, key)
    if card_type is PackCardType.SPECTRAL:
        return Spectral.get_random(random_state)
    if card_type is PackCardType.PLANET:
        return Planet.get_random(random_state)
    if card_type is PackCardType.CARD:
        return Card.get_random(random_state, key)
    raise ValueError(f"unknown card type: {card_type!r}")


@dataclass(frozen=True)
class Pack:
    """A booster pack kind."""

    name: str
    weight: float
    size: int
    card_type: PackCardType
    key: str

    @classmethod
    def get_random_pack(cls, game_state: State) -> Pack:
        """Pick the next shop pack; the first pack of a run is always a buffoon pack."""
        if game_state.take_first_pack():
            return WEIGHTED_PACKS[BUFFOON_PACK_INDEX]
        random_state = game_state.random_state
        roll = random_state.random_double(f"shop_pack{random_state.ante}{random_state.seed}")
        roll *= TOTAL_WEIGHT
        accumulated = 0.0
        for pack in WEIGHTED_PACKS:
            accumulated += pack.weight
            if accumulated > roll:
                return pack
        return WEIGHTED_PACKS[0]

    def open(self, random_state: RandomState) -> list[AnyCard]:
        """Roll the cards inside this pack."""
        return [self.get_random_card(random_state, Rarity.COMMON) for _ in range(self.size)]

    def get_random_card(self, random_state: RandomState, rarity: Rarity) -> AnyCard:
        """Roll one card of this pack's kind."""
        return _roll(self.card_type, random_state, rarity, self.key)

    def get_card(self, index: int, rarity: Rarity) -> AnyCard:
        """Return the card at ``index`` of this pack kind's table."""
        if self.card_type is PackCardType.TAROT:
            return Tarot.from_number(index)
        if self.card_type is PackCardType.JOKER:
            return Joker.from_number(index, rarity)
        if self.card_type is PackCardType.SPECTRAL:
            return Spectral.from_number(index)
        if self.card_type is PackCardType.PLANET:
            return Planet.from_number(index)
        if self.card_type is PackCardType.CARD:
            return Card.from_number(index)
        raise ValueError(f"unknown card type: {self.card_type!r}")


WEIGHTED_PACKS: tuple[Pack, ...] = (
    Pack("ARCANA_PACK", 4.0, 3, PackCardType.TAROT, "ar1"),
    Pack("JUMBO_ARCANA_PACK", 2.0, 5, PackCardType.TAROT, "ar1"),
    Pack("MEGA_ARCANA_PACK", 0.5, 5, PackCardType.TAROT, "ar1"),
    Pack("CELESTIAL_PACK", 4.0, 3, PackCardType.PLANET, "pl1"),
    Pack("JUMBO_CELESTIAL_PACK", 2.0, 5, PackCardType.PLANET, "pl1"),
    Pack("MEGA_CELESTIAL_PACK", 0.5, 5, PackCardType.PLANET, "pl1"),
    Pack("STANDARD_PACK", 4.0, 3, PackCardType.CARD, "sta"),
    Pack("JUMBO_STANDARD_PACK", 2.0, 5, PackCardType.CARD, "sta"),
    Pack("MEGA_STANDARD_PACK", 0.5, 5, PackCardType.CARD, "sta"),
    Pack("BUFFOON_PACK", 1.2, 2, PackCardType.JOKER, "buf"),
    Pack("JUMBO_BUFFOON_PACK", 0.6, 4, PackCardType.JOKER, "buf"),
    Pack("MEGA_BUFFOON_PACK", 0.15, 4, PackCardType.JOKER, "buf"),
    Pack("SPECTRAL_PACK", 0.6, 2, PackCardType.SPECTRAL, "spe"),
    Pack("JUMBO_SPECTRAL_PACK", 0.3, 4, PackCardType.SPECTRAL, "spe"),
    Pack("MEGA_SPECTRAL_PACK", 0.07, 4, PackCardType.SPECTRAL, "spe"),
)

BUFFOON_PACK_INDEX = 9
TOTAL_WEIGHT = 22.42