"""Ready-made tile suppliers.

The engine only ever asks a supplier for its next value; these cover the
common cases of a fixed repeating pattern, a scripted queue and a random draw.
"""
from __future__ import annotations

import random
from collections import deque
from typing import Any, Deque, Iterable, Sequence

from match3.constants import DEFAULT_TILE_TYPES
from match3.errors import SupplierExhaustedError


class CyclicSupplier:
    """Repeats ``sequence`` forever."""

    def __init__(self, sequence: Sequence[Any]) -> None:
        if not sequence:
            raise ValueError("CyclicSupplier needs a non-empty sequence")
        self.sequence = sequence
        self.index = 0

    def __iter__(self) -> CyclicSupplier:
        return self

    def __next__(self) -> Any:
        value = self.sequence[self.index]
        self.index = (self.index + 1) % len(self.sequence)
        return value


class QueueSupplier:
    """Hands out prepared values in order and fails once they run out."""

    def __init__(self, *upcoming: Any) -> None:
        self._upcoming: Deque[Any] = deque(upcoming)

    def prepare(self, *values: Any) -> None:
        self._upcoming.extend(values)

    def remaining(self) -> int:
        return len(self._upcoming)

    def __iter__(self) -> QueueSupplier:
        return self

    def __next__(self) -> Any:
        if not self._upcoming:
            raise SupplierExhaustedError("Empty queue")
        return self._upcoming.popleft()


class RandomSupplier:
    """Draws uniformly from ``choices`` using its own Random instance."""

    def __init__(self, choices: Iterable[Any] | None = None, rng: random.Random | None = None) -> None:
        self.choices = list(choices) if choices is not None else list(DEFAULT_TILE_TYPES)
        if not self.choices:
            raise ValueError("RandomSupplier needs at least one choice")
        self.rng = rng or random.Random()

    def __iter__(self) -> RandomSupplier:
        return self

    def __next__(self) -> Any:
        return self.rng.choice(self.choices)
