from typing import Any

from esper import World

from match3.components.active_switch import ActiveSwitch
from match3.components.board import Board
from match3.components.board_position import BoardPosition
from match3.components.tile import TileValue
from match3.components.tile_source import TileSource
from match3.constants import DEFAULT_COLS, DEFAULT_ROWS
from match3.errors import BoardConfigurationError
from match3.utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class BoardSystem:
    """Owns board construction: one tile entity per cell, filled row-major."""

    def __init__(self, world: World, supplier: Any, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        self.world = world
        self._validate_dimensions(rows, cols)
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(rows=rows, cols=cols))
        self.world.add_component(self.board_entity, TileSource(supplier=supplier))
        self._init_board()
        logger.debug("Created %dx%d board (rows x cols)", rows, cols)

    @staticmethod
    def _validate_dimensions(rows: Any, cols: Any) -> None:
        for name, value in (("height", rows), ("width", cols)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise BoardConfigurationError(f"Board {name} must be an integer, got {value!r}")
            if value <= 0:
                raise BoardConfigurationError(f"Board {name} must be positive, got {value}")

    def _init_board(self):
        board: Board = self.world.component_for_entity(self.board_entity, Board)
        source: TileSource = self.world.component_for_entity(self.board_entity, TileSource)
        for r in range(board.rows):
            for c in range(board.cols):
                ent = self.world.create_entity(
                    BoardPosition(row=r, col=c),
                    TileValue(value=source.next_value()),
                    ActiveSwitch(active=True),
                )
                board.cells[(r, c)] = ent

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @staticmethod
    def shares_line(a, b) -> bool:
        """True when both positions sit on the same row or the same column."""
        ar, ac = a
        br, bc = b
        return ar == br or ac == bc
