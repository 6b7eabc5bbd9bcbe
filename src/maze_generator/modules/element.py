from enum import Enum


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def __str__(self) -> str:
        return self.name


class WallKind(Enum):
    """Discriminant carried by every object that can occupy a room side."""
    WALL = "wall"
    BRICK_WALL = "brick_wall"
    IRON_WALL = "iron_wall"
    DOOR = "door"
    WOODEN_DOOR = "wooden_door"

    @property
    def is_door(self) -> bool:
        return self in (WallKind.DOOR, WallKind.WOODEN_DOOR)


class Element:
    kind: WallKind

    @property
    def is_door(self) -> bool:
        return self.kind.is_door

    @property
    def label(self) -> str:
        return "Door" if self.is_door else "Wall"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value})"
