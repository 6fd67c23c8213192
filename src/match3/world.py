from esper import World

from match3.systems.cascade_state_utils import get_or_create_cascade_state


def create_world() -> World:
    """Create an empty world for one board, with its cascade bookkeeping in place."""
    world = World()
    get_or_create_cascade_state(world)
    return world
