from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods and lambdas handed in by callers.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    def has_subscribers(self, name: str) -> bool:
        sig = self._signals.get(name)
        return bool(sig and sig.receivers)


# ============================================================================
# BOARD EFFECTS
# ============================================================================
EVENT_BOARD_EFFECT = "board_effect"              # payload: effect=MatchEffect|RefillEffect
EVENT_MATCH_FOUND = "match_found"                # payload: effect=MatchEffect, value=Any, positions=[(r,c),...]
EVENT_REFILL_COMPLETED = "refill_completed"      # payload: effect=RefillEffect, new_tiles=[(r,c),...]
EVENT_CASCADE_COMPLETE = "cascade_complete"      # payload: depth=int
