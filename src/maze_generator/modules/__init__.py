"""Map primitives.

Rooms, walls and doors, plus the `Maze` that owns the rooms. Builders in
`builder.py` assemble these; nothing here decides construction policy.
"""

from .element import Direction, Element, WallKind
from .walls import Wall, BrickWall, IronWall
from .connectors import DoorWall, WoodenDoor
from .geometry import Room
from .level import Maze, MazeError, RoomNotFoundError

__all__ = [
    'Direction',
    'Element',
    'WallKind',
    'Wall',
    'BrickWall',
    'IronWall',
    'DoorWall',
    'WoodenDoor',
    'Room',
    'Maze',
    'MazeError',
    'RoomNotFoundError',
]
