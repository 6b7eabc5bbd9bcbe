"""Maze construction with interchangeable builders.

A `GameDirector` runs a fixed script (two rooms and a door between them)
against a `MazeBuilder`. `StandardMazeBuilder` and `NewMazeBuilder` differ only
in which walls and doors they place.
"""

from .builder import (
    BuilderKind,
    MazeBuilder,
    NewMazeBuilder,
    StandardMazeBuilder,
    create_builder,
)
from .director import GameDirector
from .modules import (
    BrickWall,
    Direction,
    DoorWall,
    IronWall,
    Maze,
    MazeError,
    Room,
    RoomNotFoundError,
    Wall,
    WallKind,
    WoodenDoor,
)

__all__ = [
    'BuilderKind',
    'MazeBuilder',
    'NewMazeBuilder',
    'StandardMazeBuilder',
    'create_builder',
    'GameDirector',
    'BrickWall',
    'Direction',
    'DoorWall',
    'IronWall',
    'Maze',
    'MazeError',
    'Room',
    'RoomNotFoundError',
    'Wall',
    'WallKind',
    'WoodenDoor',
]
