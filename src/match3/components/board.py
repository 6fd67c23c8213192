from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    # (row, col) -> tile entity; every cell appears exactly once.
    cells: Dict[Tuple[int, int], int] = field(default_factory=dict)
