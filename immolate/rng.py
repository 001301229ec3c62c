"""Seeded random nodes: every named roll has its own evolving generator seed."""

from __future__ import annotations

from immolate.lua_random import LuaRandom, fract, round_double, seed_from_string


class NodeMap:
    """Remembers the last value of each named random node."""

    def __init__(self) -> None:
        self._values: dict[str, float] = {}

    def random(self, node_id: str, hashed_seed: float) -> float:
        """Advance node ``node_id`` and return the seed for its next generator."""
        current = self._values.get(node_id)
        if current is None:
            current = seed_from_string(node_id)
        advanced = round_double(fract(current * 1.72431234 + 2.134453429141), 13)
        self._values[node_id] = advanced
        return (advanced + hashed_seed) / 2.0


class RandomState:
    """Random source for one run, keyed by the run seed and the current ante."""

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self.hashed_seed = seed_from_string(seed)
        self.nodes = NodeMap()
        self.ante = 1

    def get_node(self, node_id: str) -> float:
        """Advance the named node and return its generator seed."""
        return self.nodes.random(node_id, self.hashed_seed)

    def _generator(self, node_id: str) -> LuaRandom:
        return LuaRandom(self.get_node(node_id))

    def random_int(self, minimum: float, maximum: float, node_id: str) -> int:
        """Roll an integer in ``[minimum, maximum]`` from the named node."""
        return self._generator(node_id).random_int(minimum, maximum)

    def random_index(self, minimum: float, maximum: float, node_id: str) -> int:
        """Roll an index into a table from the named node."""
        return self.random_int(minimum, maximum, node_id)

    def random_double(self, node_id: str) -> float:
        """Roll a float in ``[0, 1)`` from the named node."""
        return self._generator(node_id).random_double()

    def roll_for_soul(self, card_type: str, key: str) -> bool:
        """Roll the rare chance of a soul card replacing a ``card_type`` card."""
        return self.random_double(f"soul_{card_type}{self.ante}{key}") > 0.997