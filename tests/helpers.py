from __future__ import annotations

from typing import Any, Sequence, Tuple

from match3.engine import BoardEngine, create
from match3.suppliers import QueueSupplier


def board_from_rows(*rows: str) -> Tuple[BoardEngine, QueueSupplier]:
    """Build a board whose rows are spelled out as strings, one character per tile."""

    if not rows:
        raise ValueError("board_from_rows needs at least one row")
    width = len(rows[0])
    supplier = QueueSupplier(*"".join(rows))
    board = create(supplier, width, len(rows))
    return board, supplier


def require_board(board: BoardEngine, *rows: str) -> None:
    """Assert the board reads exactly as the given row strings."""

    expected: Sequence[Sequence[Any]] = tuple(tuple(row) for row in rows)
    actual = board.rows()
    assert actual == expected, f"Board mismatch:\n{_render(actual)}\n!=\n{_render(expected)}"


def _render(rows: Sequence[Sequence[Any]]) -> str:
    return "\n".join(" ".join(str(value) for value in row) for row in rows)
