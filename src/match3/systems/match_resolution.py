from typing import List, Sequence

from esper import World

from match3.effects.board_effects import MatchEffect, RefillEffect
from match3.effects.log import EffectLog
from match3.events.bus import EVENT_CASCADE_COMPLETE
from match3.systems.board_ops import board_values, clear_tiles, collapse_and_refill, swap_tile_values
from match3.systems.cascade_state_utils import get_or_create_cascade_state
from match3.systems.match_finder import Match, find_column_matches, find_row_matches, matched_entities
from match3.utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class MatchResolutionSystem:
    """Runs a validated swap to quiescence.

    Each pass finds row and column matches, records one Match effect per run
    (rows first), clears the matched tiles once, collapses the columns,
    refills from the supplier and records a Refill effect. Passes repeat until
    a scan finds nothing.
    """

    def __init__(self, world: World):
        self.world = world

    def resolve(self, src: Sequence[int], dst: Sequence[int], log: EffectLog) -> int:
        """Swap ``src``/``dst`` and cascade. Returns the number of passes that matched."""
        state = get_or_create_cascade_state(self.world)
        swap_tile_values(self.world, src, dst)
        depth = 0
        refilled = 0
        while True:
            row_matches = find_row_matches(self.world)
            column_matches = find_column_matches(self.world)
            if not row_matches and not column_matches:
                break
            depth += 1
            matches: List[Match] = row_matches + column_matches
            for match in matches:
                log.record_match(MatchEffect(value=match.value, positions=match.positions))
            cleared = clear_tiles(self.world, matched_entities(matches))
            new_tiles = collapse_and_refill(self.world)
            refilled += len(new_tiles)
            logger.debug(
                "Cascade pass %d: %d row match(es), %d column match(es), %d tile(s) cleared",
                depth, len(row_matches), len(column_matches), cleared,
            )
            log.record_refill(RefillEffect(board=board_values(self.world)), new_tiles)
        state.moves_resolved += 1
        state.cascade_depth = depth
        state.tiles_refilled = refilled
        logger.debug("Cascade complete after %d pass(es), %d tile(s) refilled", depth, refilled)
        if log.publishing:
            log.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=depth)
        return depth
