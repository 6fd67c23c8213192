from dataclasses import dataclass
from typing import Any

@dataclass(slots=True)
class TileValue:
    """Per-tile value assignment.

    Values are opaque to the engine and only ever compared with ``==``.
    Whether the slot is currently empty is handled by ActiveSwitch.
    """
    value: Any
