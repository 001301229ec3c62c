"""Jokers, their rarities and the rarity roll."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from immolate.rng import RandomState

COMMON_JOKERS: tuple[str, ...] = (
    "JOKER", "GREEDY_JOKER", "LUSTY_JOKER", "WRATHFUL_JOKER", "GLUTTENOUS_JOKER",
    "JOLLY", "ZANY", "MAD", "CRAZY", "DROLL", "SLY", "WILY", "CLEVER", "DEVIOUS",
    "CRAFTY", "HALF", "CREDIT_CARD", "BANNER", "MYSTIC_SUMMIT", "EIGHT_BALL",
    "MISPRINT", "RAISED_FIST", "CHAOS", "SCARY_FACE", "ABSTRACT", "DELAYED_GRAT",
    "GROS_MICHEL", "EVEN_STEVEN", "ODD_TODD", "SCHOLAR", "BUSINESS", "SUPERNOVA",
    "RIDE_THE_BUS", "EGG", "RUNNER", "ICE_CREAM", "SPLASH", "BLUE_JOKER", "FACELESS",
    "GREEN_JOKER", "SUPERPOSITION", "TODO_LIST", "CAVENDISH", "RED_CARD", "SQUARE",
    "RIFF_RAFF", "PHOTOGRAPH", "RESERVED_PARKING", "MAIL", "HALLUCINATION",
    "FORTUNE_TELLER", "JUGGLER", "DRUNKARD", "GOLDEN", "POPCORN", "WALKIE_TALKIE",
    "SMILEY", "TICKET", "SWASHBUCKLER", "HANGING_CHAD", "SHOOT_THE_MOON",
)

UNCOMMON_JOKERS: tuple[str, ...] = (
    "STENCIL", "FOUR_FINGERS", "MIME", "CEREMONIAL", "MARBLE", "LOYALTY_CARD", "DUSK",
    "FIBONACCI", "STEEL_JOKER", "HACK", "PAREIDOLIA", "SPACE", "BURGLAR", "BLACKBOARD",
    "SIXTH_SENSE", "CONSTELLATION", "HIKER", "CARD_SHARP", "MADNESS", "SEANCE",
    "VAMPIRE", "SHORTCUT", "HOLOGRAM", "CLOUD_9", "ROCKET", "MIDAS_MASK", "LUCHADOR",
    "GIFT", "TURTLE_BEAN", "EROSION", "TO_THE_MOON", "STONE", "LUCKY_CAT", "BULL",
    "DIET_COLA", "TRADING", "FLASH", "TROUSERS", "RAMEN", "SELZER", "CASTLE",
    "MR_BONES", "ACROBAT", "SOCK_AND_BUSKIN", "TROUBADOUR", "CERTIFICATE", "SMEARED",
    "THROWBACK", "ROUGH_GEM", "BLOODSTONE", "ARROWHEAD", "ONYX_AGATE", "GLASS",
    "RING_MASTER", "FLOWER_POT", "MERRY_ANDY", "OOPS", "IDOL", "SEEING_DOUBLE",
    "MATADOR", "SATELLITE", "CARTOMANCER", "ASTRONOMER", "BOOTSTRAPS",
)

RARE_JOKERS: tuple[str, ...] = (
    "DNA", "VAGABOND", "BARON", "OBELISK", "BASEBALL", "ANCIENT", "CAMPFIRE",
    "BLUEPRINT", "WEE", "HIT_THE_ROAD", "DUO", "TRIO", "FAMILY", "ORDER", "TRIBE",
    "STUNTMAN", "INVISIBLE", "BRAINSTORM", "DRIVERS_LICENSE", "BURNT",
)

LEGENDARY_JOKERS: tuple[str, ...] = ("CAINO", "TRIBOULET", "YORICK", "CHICOT", "PERKEO")


class Rarity(Enum):
    """Joker rarity; the value is the digit used in pool keys."""

    COMMON = 1
    UNCOMMON = 2
    RARE = 3
    LEGENDARY = 4

    @property
    def key(self) -> str:
        return str(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def pool(self) -> tuple[str, ...]:
        return _POOLS[self]

    def __str__(self) -> str:
        return self.label


_POOLS = {
    Rarity.COMMON: COMMON_JOKERS,
    Rarity.UNCOMMON: UNCOMMON_JOKERS,
    Rarity.RARE: RARE_JOKERS,
    Rarity.LEGENDARY: LEGENDARY_JOKERS,
}


def get_pool(random_state: RandomState, rarity: Rarity, ante: int, key: str) -> tuple[str, Rarity]:
    """Decide the rarity to draw from and return the pool's node id with it.

    ``Rarity.COMMON`` means a normal roll over common, uncommon and rare;
    ``Rarity.RARE`` forces rare; anything else draws a legendary.
    """
    chosen = Rarity.LEGENDARY
    if rarity is Rarity.RARE:
        chosen = Rarity.RARE
    if rarity is Rarity.COMMON:
        roll = random_state.random_double(f"rarity{ante}{key}{random_state.seed}")
        if roll > 0.95:
            chosen = Rarity.RARE
        elif roll > 0.7:
            chosen = Rarity.UNCOMMON
        else:
            chosen = Rarity.COMMON
    pool_key = f"Joker{chosen.key}{key}{ante}{random_state.seed}"
    return pool_key, chosen


@dataclass(frozen=True)
class Joker:
    """A joker card of a given rarity."""

    name: str
    rarity: Rarity

    def __repr__(self) -> str:
        return f'"{self.name}" ({self.rarity.label})'

    @classmethod
    def from_number(cls, index: int, rarity: Rarity) -> Joker:
        """Return the joker at ``index`` of the pool for ``rarity``."""
        pool = rarity.pool
        if not 0 <= index < len(pool):
            raise IndexError(f"joker index out of range for {rarity.label}: {index}")
        return cls(pool[index], rarity)

    @classmethod
    def get_random(cls, random_state: RandomState, rarity: Rarity, key: str) -> Joker:
        """Roll a joker for the source identified by ``key``."""
        pool_key, chosen = get_pool(random_state, rarity, random_state.ante, key)
        index = random_state.random_index(0.0, float(len(chosen.pool) - 1), pool_key)
        return cls.from_number(index, chosen)