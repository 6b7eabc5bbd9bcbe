import logging

from .builder import MazeBuilder
from .modules.level import Maze

logger = logging.getLogger(__name__)


class GameDirector:
    """Runs the fixed two-room script against any builder."""

    def __init__(self, builder: MazeBuilder) -> None:
        self.builder = builder

    def construct(self) -> Maze:
        name = type(self.builder).__name__
        logger.info("Constructing maze with %s", name)

        self.builder.build_room(1)
        self.builder.build_room(2)
        self.builder.build_door_wall(1, 2)

        maze = self.builder.get_maze()
        logger.info("%s produced %d rooms", name, len(maze))
        return maze
