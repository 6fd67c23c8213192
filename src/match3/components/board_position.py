from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class BoardPosition:
    """Fixed (row, col) of a tile entity. Only the tile's value ever moves."""
    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return self.row, self.col
