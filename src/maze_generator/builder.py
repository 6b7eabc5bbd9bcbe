import logging
from abc import ABC, abstractmethod
from enum import Enum

from .modules.element import Direction
from .modules.walls import Wall, BrickWall, IronWall
from .modules.connectors import DoorWall, WoodenDoor
from .modules.geometry import Room
from .modules.level import Maze

logger = logging.getLogger(__name__)


class MazeBuilder(ABC):
    def __init__(self) -> None:
        self.maze = Maze()

    @abstractmethod
    def build_room(self, room_no: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def build_wall(self, direction: Direction) -> None:
        raise NotImplementedError

    @abstractmethod
    def build_door_wall(self, room1_no: int, room2_no: int) -> None:
        raise NotImplementedError

    def get_maze(self) -> Maze:
        return self.maze


class StandardMazeBuilder(MazeBuilder):
    """Rooms come fully walled; a door is one object shared by both rooms.

    The door always goes on the first room's north side and the second room's
    south side, whatever the rooms' actual layout.
    """

    def build_room(self, room_no: int) -> None:
        room = self.maze.add_room(Room(room_no))
        for direction in Direction:
            room.set_side(direction, Wall())
        logger.debug("standard: built room %d with four plain walls", room.room_no)

    def build_wall(self, direction: Direction) -> None:
        # Walls are already placed by build_room.
        pass

    def build_door_wall(self, room1_no: int, room2_no: int) -> None:
        room1 = self.maze.require_room(room1_no)
        room2 = self.maze.require_room(room2_no)

        door = self.maze.add_door(DoorWall(room1, room2))
        room1.set_side(Direction.NORTH, door)
        room2.set_side(Direction.SOUTH, door)
        logger.debug("standard: shared door %d NORTH <-> %d SOUTH", room1_no, room2_no)


class NewMazeBuilder(MazeBuilder):
    """Bare rooms, material-specific walls and a separate door per side.

    `build_wall` always targets room 1.
    """

    WALL_ROOM_NO = 1

    def build_room(self, room_no: int) -> None:
        room = self.maze.add_room(Room(room_no))
        logger.debug("new: built bare room %d", room.room_no)

    def build_wall(self, direction: Direction) -> None:
        room = self.maze.require_room(self.WALL_ROOM_NO)
        if direction == Direction.NORTH:
            wall = BrickWall()
        elif direction == Direction.SOUTH:
            wall = IronWall()
        else:
            wall = Wall()
        room.set_side(direction, wall)
        logger.debug("new: room %d %s -> %s", room.room_no, direction, wall.kind.value)

    def build_door_wall(self, room1_no: int, room2_no: int) -> None:
        room1 = self.maze.require_room(room1_no)
        room2 = self.maze.require_room(room2_no)

        room1.set_side(Direction.EAST, WoodenDoor(room1, room2))
        room2.set_side(Direction.WEST, WoodenDoor(room2, room1))
        logger.debug("new: wooden doors %d EAST / %d WEST", room1_no, room2_no)


class BuilderKind(Enum):
    STANDARD = "standard"
    NEW = "new"

    @classmethod
    def from_name(cls, name: str) -> 'BuilderKind':
        key = str(name).strip().lower()
        for kind in cls:
            if kind.value == key:
                return kind
        valid = ", ".join(k.value for k in cls)
        raise ValueError(f"Unknown builder kind {name!r} (expected one of: {valid})")


_BUILDERS = {
    BuilderKind.STANDARD: StandardMazeBuilder,
    BuilderKind.NEW: NewMazeBuilder,
}


def create_builder(kind: BuilderKind) -> MazeBuilder:
    return _BUILDERS[kind]()
