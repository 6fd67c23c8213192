from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Tuple, Union

Position = Tuple[int, int]
BoardSnapshot = Tuple[Tuple[Any, ...], ...]


@dataclass(frozen=True, slots=True)
class MatchEffect:
    """A run of equal values that was just cleared from the board."""

    kind: ClassVar[str] = "Match"

    value: Any
    positions: Tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class RefillEffect:
    """Marks one finished gravity-shift and top-up pass.

    ``board`` is the row-major snapshot taken right after the pass. It is left
    out of comparisons so a bare ``RefillEffect()`` equals any refill.
    """

    kind: ClassVar[str] = "Refill"

    board: BoardSnapshot | None = field(default=None, compare=False)


BoardEffect = Union[MatchEffect, RefillEffect]
