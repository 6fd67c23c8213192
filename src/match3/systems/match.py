from typing import Sequence

from esper import World

from match3.systems.board_ops import is_within_board, swap_tile_values
from match3.systems.board import BoardSystem
from match3.systems.match_finder import has_any_match
from match3.utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class MatchSystem:
    """Decides whether a requested swap is legal.

    A swap is legal when both positions are on the board, differ, share a row
    or a column, and exchanging their values leaves at least one match
    somewhere on the board. Distance along the shared line is not restricted.
    """

    def __init__(self, world: World):
        self.world = world

    def can_move(self, src: Sequence[int], dst: Sequence[int]) -> bool:
        if tuple(src) == tuple(dst):
            return False
        if not BoardSystem.shares_line(src, dst):
            return False
        if not (is_within_board(self.world, src) and is_within_board(self.world, dst)):
            return False
        return self.creates_match(src, dst)

    def creates_match(self, a: Sequence[int], b: Sequence[int]) -> bool:
        # Trial swap, always undone so the board is left exactly as found.
        swap_tile_values(self.world, a, b)
        try:
            return has_any_match(self.world)
        finally:
            swap_tile_values(self.world, b, a)
