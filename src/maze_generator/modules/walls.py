from .element import Element, WallKind


class Wall(Element):
    kind = WallKind.WALL


class BrickWall(Wall):
    kind = WallKind.BRICK_WALL


class IronWall(Wall):
    kind = WallKind.IRON_WALL
