from typing import Dict, Optional

from .element import Direction, Element


class Room:
    def __init__(self, room_no: int) -> None:
        self.room_no = room_no
        self.sides: Dict[Direction, Element] = {}

    def get_side(self, direction: Direction) -> Optional[Element]:
        return self.sides.get(direction)

    def set_side(self, direction: Direction, wall: Element) -> None:
        # No occupancy check: the last write wins.
        self.sides[direction] = wall

    def side_label(self, direction: Direction) -> str:
        wall = self.get_side(direction)
        if wall is None:
            return "None"
        return wall.label

    def __repr__(self) -> str:
        return f"Room({self.room_no})"
