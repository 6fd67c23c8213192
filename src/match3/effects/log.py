from __future__ import annotations

from typing import List, Sequence

from match3.effects.board_effects import BoardEffect, MatchEffect, Position, RefillEffect
from match3.events.bus import (
    EVENT_BOARD_EFFECT,
    EVENT_MATCH_FOUND,
    EVENT_REFILL_COMPLETED,
    EventBus,
)


class EffectLog:
    """Ordered record of the effects produced by a single move.

    The log is created per move and threaded through the resolver. When it is
    given an event bus every recorded effect is also published, synchronously
    and in order; without one it only records.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus
        self._effects: List[BoardEffect] = []

    @property
    def publishing(self) -> bool:
        return self.event_bus is not None

    @property
    def effects(self) -> tuple[BoardEffect, ...]:
        return tuple(self._effects)

    def __len__(self) -> int:
        return len(self._effects)

    def record_match(self, effect: MatchEffect) -> None:
        self._effects.append(effect)
        if self.event_bus is None:
            return
        self.event_bus.emit(EVENT_BOARD_EFFECT, effect=effect)
        self.event_bus.emit(
            EVENT_MATCH_FOUND,
            effect=effect,
            value=effect.value,
            positions=list(effect.positions),
        )

    def record_refill(self, effect: RefillEffect, new_tiles: Sequence[Position] = ()) -> None:
        self._effects.append(effect)
        if self.event_bus is None:
            return
        self.event_bus.emit(EVENT_BOARD_EFFECT, effect=effect)
        self.event_bus.emit(EVENT_REFILL_COMPLETED, effect=effect, new_tiles=list(new_tiles))
