from dataclasses import dataclass


@dataclass(slots=True)
class CascadeState:
    """Tracks bookkeeping for the most recent resolution on a board."""

    moves_resolved: int = 0
    cascade_depth: int = 0
    tiles_refilled: int = 0
