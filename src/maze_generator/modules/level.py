import sys
from typing import Dict, Iterator, List, Optional, TextIO, TYPE_CHECKING

from .element import Direction

if TYPE_CHECKING:
    from .geometry import Room
    from .connectors import DoorWall


class MazeError(Exception):
    pass


class RoomNotFoundError(MazeError, LookupError):
    def __init__(self, room_no: int) -> None:
        self.room_no = room_no
        super().__init__(f"Room {room_no} does not exist in the maze")


class Maze:
    def __init__(self) -> None:
        # Keyed by room number, kept in insertion order.
        self.rooms: Dict[int, 'Room'] = {}
        # Doors shared between two room sides. Rooms only hold references.
        self.doors: List['DoorWall'] = []

    def add_room(self, room: 'Room') -> 'Room':
        self.rooms[room.room_no] = room
        return room

    def room_no(self, room_no: int) -> Optional['Room']:
        return self.rooms.get(room_no)

    def require_room(self, room_no: int) -> 'Room':
        room = self.rooms.get(room_no)
        if room is None:
            raise RoomNotFoundError(room_no)
        return room

    def add_door(self, door: 'DoorWall') -> 'DoorWall':
        self.doors.append(door)
        return door

    def __len__(self) -> int:
        return len(self.rooms)

    def __contains__(self, room_no: object) -> bool:
        return room_no in self.rooms

    def __iter__(self) -> Iterator['Room']:
        return iter(self.rooms.values())

    def describe(self) -> List[str]:
        lines: List[str] = []
        for room in self.rooms.values():
            lines.append(f"Room: {room.room_no}")
            for direction in Direction:
                lines.append(f"{direction}: {room.side_label(direction)}")
            lines.append("")
        return lines

    def print_maze(self, stream: Optional[TextIO] = None) -> None:
        out = stream if stream is not None else sys.stdout
        for line in self.describe():
            print(line, file=out)
