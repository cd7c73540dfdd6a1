from enum import Enum


class Direction(Enum):
    """Slide direction requested by the player."""
    RIGHT = "right"
    UP = "up"
    LEFT = "left"
    DOWN = "down"
