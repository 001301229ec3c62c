"""Floating-point seed hashing and the xorshift generator used for game rolls."""

from __future__ import annotations

import math
import struct

_MASK64 = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_MANTISSA_MASK = 4503599627370495
_ONE_BITS = 4607182418800017408

# (k, q, s) for each of the four state words.
_STEPS = ((63, 31, 18), (58, 19, 28), (55, 24, 7), (47, 21, 8))


def fract(value: float) -> float:
    """Return the fractional part of ``value`` (always in ``[0, 1)`` for finite input)."""
    return value - math.floor(value)


def round_double(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimal places, with exact halves rounding down."""
    power = float(10**digits)
    scaled = value * power
    if scaled > math.floor(scaled) + 0.5:
        rounded = math.ceil(scaled)
    else:
        rounded = math.floor(scaled)
    return rounded / power


def _to_i64(value: float) -> int:
    """Convert a float to a signed 64-bit integer, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value >= _I64_MAX:
        return _I64_MAX
    if value <= _I64_MIN:
        return _I64_MIN
    return int(value)


def seed_from_string(text: str) -> float:
    """Hash a seed string into a float in ``[0, 1)``; the empty string gives ``1.0``."""
    num = 1.0
    last = len(text.encode("utf-8")) - 1
    for offset, char in enumerate(reversed(text)):
        position = float(last - offset) + 1.0
        code = float(ord(char))
        int_part = _to_i64((1.1239285023 / num) * code * math.pi + math.pi * position)
        fract_part = fract(fract(1.1239285023 / num * code * math.pi) + fract(math.pi * position))
        num = fract(float(int_part) + fract_part)
    return num


def _float_bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _bits_float(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits & _MASK64))[0]


def _rotate_right32(value: int, amount: int) -> int:
    value &= 0xFFFFFFFF
    return ((value >> amount) | (value << (32 - amount))) & 0xFFFFFFFF


class LuaRandom:
    """Four-word xorshift generator seeded from a single float."""

    def __init__(self, seed: float) -> None:
        self._state = self._initial_state(seed)
        for _ in range(10):
            self._advance()

    @staticmethod
    def _initial_state(seed: float) -> list[int]:
        rotor = 0x11090601
        words = []
        for _ in range(4):
            minimum = (1 << (rotor & 255)) & 0xFFFFFFFF
            rotor = _rotate_right32(rotor, 8)
            seed = seed * math.pi + math.e
            bits = _float_bits(seed)
            if bits < minimum:
                bits = (bits + minimum) & _MASK64
            words.append(bits)
        return words

    @property
    def state(self) -> tuple[int, ...]:
        """The current four 64-bit state words."""
        return tuple(self._state)

    def _advance(self) -> int:
        result = 0
        for index, (k, q, s) in enumerate(_STEPS):
            word = self._state[index]
            mixed = (((word << q) & _MASK64) ^ word) >> (k - s)
            high = word & ((-1 << (64 - k)) & _MASK64)
            updated = mixed ^ ((high << s) & _MASK64)
            result ^= updated
            self._state[index] = updated
        return result

    def random_double(self) -> float:
        """Return the next float in ``[0, 1)``."""
        bits = (self._advance() & _MANTISSA_MASK) | _ONE_BITS
        return _bits_float(bits) - 1.0

    def random_int(self, minimum: float, maximum: float) -> int:
        """Return the next integer in ``[minimum, maximum]``."""
        value = self.random_double()
        return _to_i64(value * (maximum - minimum + 1.0) + minimum)