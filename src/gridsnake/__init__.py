from .engine import Engine
from .scheduler import RepeatingTask
from .state import DOWN, GAME_OVER, LEFT, NOT_STARTED, RIGHT, RUNNING, UP, Cell, Segment

__all__ = [
    "Engine",
    "RepeatingTask",
    "Cell",
    "Segment",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "NOT_STARTED",
    "RUNNING",
    "GAME_OVER",
]
