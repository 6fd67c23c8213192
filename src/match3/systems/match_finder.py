from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Set, Tuple

from esper import World

from match3.constants import MIN_MATCH_LENGTH
from match3.systems.board_ops import (
    board_dimensions,
    get_entity_at,
    is_active,
    position_of,
    tile_value,
    tiles_in_column,
    tiles_in_row,
)

Position = Tuple[int, int]
Step = Tuple[int, int]

LEFT: Step = (0, -1)
RIGHT: Step = (0, 1)
UP: Step = (-1, 0)
DOWN: Step = (1, 0)


@dataclass(frozen=True, slots=True)
class Match:
    """Collinear, contiguous run of at least three equal values."""

    value: Any
    entities: Tuple[int, ...]
    positions: Tuple[Position, ...]

    def __len__(self) -> int:
        return len(self.entities)


def walk_run(world: World, entity: int, value: Any, step: Step) -> List[int]:
    """Collect neighbours of ``entity`` holding ``value`` in one direction.

    The walk starts at the adjacent cell and stops at the first empty,
    different or out-of-bounds cell. Results are ordered nearest first.
    """
    row, col = position_of(world, entity)
    d_row, d_col = step
    run: List[int] = []
    while True:
        row += d_row
        col += d_col
        neighbour = get_entity_at(world, row, col)
        if neighbour is None or not is_active(world, neighbour):
            return run
        if tile_value(world, neighbour) != value:
            return run
        run.append(neighbour)


def _match_through(world: World, entity: int, backward: Step, forward: Step) -> Match | None:
    value = tile_value(world, entity)
    before = walk_run(world, entity, value, backward)
    after = walk_run(world, entity, value, forward)
    if len(before) + len(after) + 1 < MIN_MATCH_LENGTH:
        return None
    entities = tuple(reversed(before)) + (entity,) + tuple(after)
    return Match(
        value=value,
        entities=entities,
        positions=tuple(position_of(world, ent) for ent in entities),
    )


def _scan_line(
    world: World,
    entities: List[int],
    backward: Step,
    forward: Step,
) -> List[Match]:
    matches: List[Match] = []
    seen: Set[int] = set()
    for entity in entities:
        if entity in seen or not is_active(world, entity):
            continue
        match = _match_through(world, entity, backward, forward)
        if match is None:
            continue
        seen.update(match.entities)
        matches.append(match)
    return matches


def find_row_matches(world: World) -> List[Match]:
    """Horizontal matches, rows top to bottom, each row scanned left to right."""
    dims = board_dimensions(world)
    if not dims:
        return []
    rows, _ = dims
    matches: List[Match] = []
    for row in range(rows):
        matches.extend(_scan_line(world, tiles_in_row(world, row), LEFT, RIGHT))
    return matches


def find_column_matches(world: World) -> List[Match]:
    """Vertical matches, columns scanned from ``cols`` down to 0 inclusive.

    Index ``cols`` lies one past the board; tiles_in_column yields nothing for
    it, so the extra iteration contributes no matches.
    """
    dims = board_dimensions(world)
    if not dims:
        return []
    _, cols = dims
    matches: List[Match] = []
    for col in range(cols, -1, -1):
        matches.extend(_scan_line(world, tiles_in_column(world, col), UP, DOWN))
    return matches


def find_all_matches(world: World) -> List[Match]:
    """Row matches followed by column matches, in discovery order."""
    return find_row_matches(world) + find_column_matches(world)


def has_any_match(world: World) -> bool:
    return bool(find_row_matches(world)) or bool(find_column_matches(world))


def matched_entities(matches: List[Match]) -> List[int]:
    """Distinct entities across matches, first occurrence order."""
    ordered: List[int] = []
    seen: Set[int] = set()
    for match in matches:
        for entity in match.entities:
            if entity in seen:
                continue
            seen.add(entity)
            ordered.append(entity)
    return ordered
