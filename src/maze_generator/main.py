import logging
import os
import sys
from typing import List, Optional, TextIO

from .builder import BuilderKind, create_builder
from .director import GameDirector
from .modules.level import Maze

logger = logging.getLogger(__name__)

DEFAULT_BUILDERS = (BuilderKind.STANDARD, BuilderKind.NEW)


def builder_kinds_from_env() -> List[BuilderKind]:
    # MAZE_BUILDERS=standard,new picks which variants run, in order.
    raw = str(os.environ.get('MAZE_BUILDERS', '')).strip()
    if not raw:
        return list(DEFAULT_BUILDERS)
    return [BuilderKind.from_name(part) for part in raw.split(',') if part.strip()]


def log_level_from_env() -> int:
    level_name = str(os.environ.get('MAZE_LOG_LEVEL', 'WARNING')).strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level_from_env(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def create_maze(kind: BuilderKind, stream: Optional[TextIO] = None) -> Maze:
    director = GameDirector(create_builder(kind))
    maze = director.construct()
    maze.print_maze(stream)
    return maze


def main() -> int:
    configure_logging()
    kinds = builder_kinds_from_env()
    logger.info("Running builders: %s", ", ".join(k.value for k in kinds))

    for kind in kinds:
        create_maze(kind)
    return 0


if __name__ == "__main__":
    sys.exit(main())
