"""Vouchers and the per-run set of vouchers with their lock and ownership state."""

from __future__ import annotations

from dataclasses import dataclass, replace

from immolate.rng import RandomState

VOUCHER_CARDS: tuple[str, ...] = (
    "OVERSTOCK_NORM", "OVERSTOCK_PLUS", "CLEARANCE_SALE", "LIQUIDATION", "HONE",
    "GLOW_UP", "REROLL_SURPLUS", "REROLL_GLUT", "CRYSTAL_BALL", "OMEN_GLOBE",
    "TELESCOPE", "OBSERVATORY", "GRABBER", "NACHO_TONG", "WASTEFUL", "RECYCLOMANCY",
    "TAROT_MERCHANT", "TAROT_TYCOON", "PLANET_MERCHANT", "PLANET_TYCOON",
    "SEED_MONEY", "MONEY_TREE", "BLANK", "ANTIMATTER", "MAGIC_TRICK", "ILLUSION",
    "HIEROGLYPH", "PETROGLYPH", "DIRECTORS_CUT", "RETCON", "PAINT_BRUSH", "PALETTE",
)

_TYPE = "Voucher"
_TAG_TYPE = "Voucher_fromtag"


@dataclass
class Voucher:
    """A voucher and whether it is locked or already owned."""

    name: str
    locked: bool = False
    owned: bool = False

    @classmethod
    def from_number(cls, index: int) -> Voucher:
        """Return an unlocked, unowned voucher from the voucher table."""
        if not 0 <= index < len(VOUCHER_CARDS):
            raise IndexError(f"voucher index out of range: {index}")
        return cls(VOUCHER_CARDS[index])


class VoucherArray:
    """All vouchers of a run; each upgrade is locked until its base is bought."""

    def __init__(self) -> None:
        self._vouchers = [
            Voucher(name, locked=index % 2 != 0) for index, name in enumerate(VOUCHER_CARDS)
        ]

    def __getitem__(self, index: int) -> Voucher:
        return self._vouchers[index]

    def __len__(self) -> int:
        return len(self._vouchers)

    def __str__(self) -> str:
        lines = ["VoucherArray ["]
        for voucher in self._vouchers:
            locked = " 🔒" if voucher.locked else ""
            owned = " ✅" if voucher.owned else ""
            lines.append(f"  - {voucher.name}{locked}{owned}")
        lines.append("]")
        return "\n".join(lines)

    def _roll(self, random_state: RandomState, from_tag: bool, resample_key: str) -> int:
        type_str = _TAG_TYPE if from_tag else _TYPE
        node_id = f"{type_str}{random_state.ante}{resample_key}{random_state.seed}"
        return random_state.random_index(0.0, float(len(self._vouchers) - 1), node_id)

    @staticmethod
    def _available(voucher: Voucher) -> bool:
        return not (voucher.owned or voucher.locked)

    def random(self, random_state: RandomState, from_tag: bool = False) -> Voucher:
        """Draw an available voucher, mark it owned and unlock its upgrade.

        Returns the voucher as it was when drawn. Raises ``LookupError`` when
        every voucher is owned or locked.
        """
        if not any(self._available(voucher) for voucher in self._vouchers):
            raise LookupError("no voucher is available")
        index = self._roll(random_state, from_tag, "")
        resample = 1
        while not self._available(self._vouchers[index]):
            index = self._roll(random_state, from_tag, f"_resample{resample}")
            resample += 1

        chosen = self._vouchers[index]
        drawn = replace(chosen)
        chosen.owned = True

        following = index + 1
        if following < len(self._vouchers) and self._vouchers[following].locked:
            self.unlock(following)
        return drawn

    def unlock(self, index: int) -> None:
        """Unlock the voucher at ``index``."""
        self._vouchers[index].locked = False