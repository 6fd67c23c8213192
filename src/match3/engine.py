"""Public entry points of the match-3 board engine.

``BoardEngine`` wires one board's world, event bus and systems together. The
module-level functions are thin wrappers for callers that prefer passing the
board around explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from match3.effects.board_effects import BoardEffect, BoardSnapshot
from match3.effects.log import EffectLog
from match3.events.bus import EVENT_BOARD_EFFECT, EventBus
from match3.systems.board import BoardSystem
from match3.systems.board_ops import Tile, board_values, tile_at
from match3.systems.cascade_state_utils import get_or_create_cascade_state
from match3.systems.match import MatchSystem
from match3.systems.match_finder import Match, find_all_matches
from match3.systems.match_resolution import MatchResolutionSystem
from match3.utils.logging_config import get_game_logger
from match3.world import create_world

logger = get_game_logger(__name__)

BoardListener = Callable[[BoardEffect], Any]


@dataclass(frozen=True, slots=True)
class MoveResult:
    board: "BoardEngine"
    effects: Tuple[BoardEffect, ...]


class BoardEngine:
    def __init__(self, supplier: Any, width: int, height: int, *, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()
        self.world = create_world()
        self.board_system = BoardSystem(self.world, supplier, rows=height, cols=width)
        self.match_system = MatchSystem(self.world)
        self.resolution_system = MatchResolutionSystem(self.world)
        self._listeners: Dict[BoardListener, Callable[..., None]] = {}

    @property
    def width(self) -> int:
        return self.board_system.board.cols

    @property
    def height(self) -> int:
        return self.board_system.board.rows

    @property
    def last_cascade_depth(self) -> int:
        return get_or_create_cascade_state(self.world).cascade_depth

    def tile_at(self, pos: Sequence[int]) -> Tile | None:
        return tile_at(self.world, pos)

    def tile_value_at(self, pos: Sequence[int]) -> Any:
        tile = tile_at(self.world, pos)
        return tile.value if tile is not None else None

    def rows(self) -> BoardSnapshot:
        return board_values(self.world)

    def matches(self) -> List[Match]:
        return find_all_matches(self.world)

    def can_move(self, src: Sequence[int], dst: Sequence[int]) -> bool:
        return self.match_system.can_move(src, dst)

    def move(self, src: Sequence[int], dst: Sequence[int]) -> MoveResult:
        if not self.match_system.can_move(src, dst):
            logger.debug("Rejected move %s -> %s", tuple(src), tuple(dst))
            return MoveResult(board=self, effects=())
        log = EffectLog(self.event_bus)
        self.resolution_system.resolve(src, dst, log)
        return MoveResult(board=self, effects=log.effects)

    def add_listener(self, listener: BoardListener) -> None:
        if listener in self._listeners:
            return

        def receiver(sender, **payload):
            listener(payload["effect"])

        self._listeners[listener] = receiver
        self.event_bus.subscribe(EVENT_BOARD_EFFECT, receiver)

    def remove_listener(self, listener: BoardListener) -> None:
        receiver = self._listeners.pop(listener, None)
        if receiver is not None:
            self.event_bus.unsubscribe(EVENT_BOARD_EFFECT, receiver)

    def __repr__(self) -> str:
        return f"BoardEngine(width={self.width}, height={self.height})"


def create(supplier: Any, width: int, height: int, *, event_bus: EventBus | None = None) -> BoardEngine:
    return BoardEngine(supplier, width, height, event_bus=event_bus)


def tile_value_at(board: BoardEngine, pos: Sequence[int]) -> Any:
    return board.tile_value_at(pos)


def can_move(board: BoardEngine, src: Sequence[int], dst: Sequence[int]) -> bool:
    return board.can_move(src, dst)


def move(board: BoardEngine, src: Sequence[int], dst: Sequence[int]) -> MoveResult:
    return board.move(src, dst)


def add_listener(board: BoardEngine, listener: BoardListener) -> None:
    board.add_listener(listener)
