from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

from esper import World

from match3.components.active_switch import ActiveSwitch
from match3.components.board import Board
from match3.components.board_position import BoardPosition
from match3.components.tile import TileValue
from match3.components.tile_source import TileSource

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Tile:
    """Read-only view of one board cell."""
    position: Position
    value: Any


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_tile_source(world: World) -> TileSource:
    for _, source in world.get_component(TileSource):
        return source
    raise RuntimeError("TileSource component not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    return None


def is_within_board(world: World, pos: Sequence[int]) -> bool:
    dims = board_dimensions(world)
    if not dims:
        return False
    rows, cols = dims
    row, col = pos
    return 0 <= row < rows and 0 <= col < cols


def get_entity_at(world: World, row: int, col: int) -> int | None:
    board = get_board(world)
    return board.cells.get((row, col))


def tile_value(world: World, entity: int) -> Any:
    """Return the entity's value, or None while the slot is empty."""
    if not world.component_for_entity(entity, ActiveSwitch).active:
        return None
    return world.component_for_entity(entity, TileValue).value


def is_active(world: World, entity: int) -> bool:
    return world.component_for_entity(entity, ActiveSwitch).active


def tile_at(world: World, pos: Sequence[int]) -> Tile | None:
    if not is_within_board(world, pos):
        return None
    row, col = pos
    entity = get_entity_at(world, row, col)
    if entity is None:
        return None
    return Tile(position=(row, col), value=tile_value(world, entity))


def swap_tile_values(world: World, src: Sequence[int], dst: Sequence[int]) -> None:
    """Exchange the contents of two cells; their positions stay put.

    The empty flag travels with the value so gravity can bubble cleared slots upward.
    """
    src_entity = get_entity_at(world, src[0], src[1])
    dst_entity = get_entity_at(world, dst[0], dst[1])
    if src_entity is None or dst_entity is None:
        raise IndexError(f"Cannot swap {tuple(src)} with {tuple(dst)}: outside the board")
    src_tile: TileValue = world.component_for_entity(src_entity, TileValue)
    dst_tile: TileValue = world.component_for_entity(dst_entity, TileValue)
    src_switch: ActiveSwitch = world.component_for_entity(src_entity, ActiveSwitch)
    dst_switch: ActiveSwitch = world.component_for_entity(dst_entity, ActiveSwitch)
    src_tile.value, dst_tile.value = dst_tile.value, src_tile.value
    src_switch.active, dst_switch.active = dst_switch.active, src_switch.active


def tiles_in_row(world: World, row: int) -> List[int]:
    """Tile entities of a row ordered by increasing column; empty when out of range."""
    board = get_board(world)
    if not 0 <= row < board.rows:
        return []
    return [board.cells[(row, col)] for col in range(board.cols)]


def tiles_in_column(world: World, col: int) -> List[int]:
    """Tile entities of a column ordered by increasing row; empty when out of range."""
    board = get_board(world)
    if not 0 <= col < board.cols:
        return []
    return [board.cells[(row, col)] for row in range(board.rows)]


def position_of(world: World, entity: int) -> Position:
    return world.component_for_entity(entity, BoardPosition).as_tuple()


def clear_tiles(world: World, entities: Iterable[int]) -> int:
    """Mark tiles as empty. Clearing an already empty tile is a no-op."""
    cleared = 0
    for entity in entities:
        tile_switch: ActiveSwitch = world.component_for_entity(entity, ActiveSwitch)
        if not tile_switch.active:
            continue
        tile_switch.active = False
        world.component_for_entity(entity, TileValue).value = None
        cleared += 1
    return cleared


def shift_column_down(world: World, from_row: int, col: int) -> None:
    """Walk from ``from_row`` up to row 0 swapping each adjacent pair.

    Everything above ``from_row`` slides down one cell and the slot at
    ``from_row`` surfaces at the top of the column.
    """
    for row in range(from_row, 0, -1):
        swap_tile_values(world, (row, col), (row - 1, col))


def collapse_and_refill(world: World) -> List[Position]:
    """Apply gravity to every empty cell and top the columns up from the supplier.

    Cells are visited row-major. Each empty one is bubbled to row 0 of its
    column and immediately refilled, so the supplier is called once per empty
    cell in scan order. Returns the positions that received fresh values.
    """
    board = get_board(world)
    source = get_tile_source(world)
    spawned: List[Position] = []
    for row in range(board.rows):
        for col in range(board.cols):
            entity = board.cells[(row, col)]
            if is_active(world, entity):
                continue
            shift_column_down(world, row, col)
            top = board.cells[(0, col)]
            world.component_for_entity(top, TileValue).value = source.next_value()
            world.component_for_entity(top, ActiveSwitch).active = True
            spawned.append((0, col))
    return spawned


def board_values(world: World) -> Tuple[Tuple[Any, ...], ...]:
    """Row-major snapshot of the board; empty cells read as None."""
    board = get_board(world)
    return tuple(
        tuple(tile_value(world, board.cells[(row, col)]) for col in range(board.cols))
        for row in range(board.rows)
    )
