from typing import TYPE_CHECKING

from .element import WallKind
from .walls import Wall

if TYPE_CHECKING:
    from .geometry import Room


class DoorWall(Wall):
    kind = WallKind.DOOR

    def __init__(self, room1: 'Room', room2: 'Room', is_open: bool = False) -> None:
        # Rooms are back-references; the maze owns them.
        self.room1 = room1
        self.room2 = room2
        self.is_open = bool(is_open)

    def connects(self, room1: 'Room', room2: 'Room') -> bool:
        return self.room1 is room1 and self.room2 is room2

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(room1={self.room1.room_no}, "
            f"room2={self.room2.room_no}, is_open={self.is_open})"
        )


class WoodenDoor(DoorWall):
    kind = WallKind.WOODEN_DOOR
