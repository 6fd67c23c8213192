from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-tile occupancy flag.

    active: True if the cell currently holds a value; False while it is cleared
    during match resolution. Outside of a resolution every tile is active.
    """
    active: bool = True
