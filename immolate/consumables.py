"""Consumable cards: tarots, planets and spectrals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from immolate.rng import RandomState

TAROT_CARDS: tuple[str, ...] = (
    "FOOL", "MAGICIAN", "HIGH_PRIESTESS", "EMPRESS", "EMPEROR", "HEIROPHANT",
    "LOVERS", "CHARIOT", "JUSTICE", "HERMIT", "WHEEL_OF_FORTUNE", "STRENGTH",
    "HANGED_MAN", "DEATH", "TEMPERANCE", "DEVIL", "TOWER", "STAR", "MOON", "SUN",
    "JUDGEMENT", "WORLD",
)

PLANET_CARDS: tuple[str, ...] = (
    "MERCURY", "VENUS", "EARTH", "MARS", "JUPITER", "SATURN", "URANUS", "NEPTUNE",
    "PLUTO", "PLANET_X", "CERES", "ERIS",
)

SPECTRAL_CARDS: tuple[str, ...] = (
    "FAMILIAR", "GRIM", "INCANTATION", "TALISMAN", "AURA", "WRAITH", "SIGIL", "OUIJA",
    "ECTOPLASM", "IMMOLATE", "ANKH", "DEJA_VU", "HEX", "TRANCE", "MEDIUM", "CRYPTID",
    "SOUL", "BLACK_HOLE",
)

SOUL = SPECTRAL_CARDS[16]
BLACK_HOLE = SPECTRAL_CARDS[17]


@dataclass(frozen=True)
class Consumable:
    """A consumable card drawn from a fixed table, with a chance of rare replacements."""

    name: str

    card_type: ClassVar[str] = "Consumable"
    append_key: ClassVar[str] = ""
    cards: ClassVar[tuple[str, ...]] = ()
    # Rare cards rolled for, in order, before the regular draw.
    soul_rolls: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_number(cls, index: int) -> Consumable:
        """Return the card at ``index`` of this kind's table."""
        if not 0 <= index < len(cls.cards):
            raise IndexError(f"{cls.card_type} index out of range: {index}")
        return cls(cls.cards[index])

    @classmethod
    def get_random(cls, random_state: RandomState) -> Consumable:
        """Roll a card of this kind, possibly replaced by a rare card."""
        for special in cls.soul_rolls:
            if random_state.roll_for_soul(cls.card_type, cls.append_key):
                return cls(special)
        node_id = f"{cls.card_type}{cls.append_key}{random_state.ante}{random_state.seed}"
        index = random_state.random_index(0.0, float(len(cls.cards) - 1), node_id)
        return cls.from_number(index)


class Tarot(Consumable):
    """A tarot card; may be replaced by the soul."""

    card_type = "Tarot"
    append_key = "ar1"
    cards = TAROT_CARDS
    soul_rolls = (SOUL,)


class Planet(Consumable):
    """A planet card; may be replaced by the soul or a black hole."""

    card_type = "Planet"
    append_key = "pl1"
    cards = PLANET_CARDS
    soul_rolls = (SOUL, BLACK_HOLE)


class Spectral(Consumable):
    """A spectral card; may be replaced by the soul or a black hole."""

    card_type = "Spectral"
    append_key = "spe"
    cards = SPECTRAL_CARDS
    soul_rolls = (SOUL, BLACK_HOLE)