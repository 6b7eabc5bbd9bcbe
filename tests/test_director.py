"""End-to-end construction and the entry routine."""

import io
import logging
import os
import unittest
from contextlib import redirect_stdout
from unittest import mock

from maze_generator import (
    BuilderKind,
    Direction,
    GameDirector,
    MazeBuilder,
    NewMazeBuilder,
    RoomNotFoundError,
    StandardMazeBuilder,
    WallKind,
)
from maze_generator.main import (
    builder_kinds_from_env,
    configure_logging,
    create_maze,
    log_level_from_env,
    main,
)


STANDARD_OUTPUT = [
    "Room: 1",
    "NORTH: Door",
    "EAST: Wall",
    "SOUTH: Wall",
    "WEST: Wall",
    "",
    "Room: 2",
    "NORTH: Wall",
    "EAST: Wall",
    "SOUTH: Door",
    "WEST: Wall",
    "",
]

NEW_OUTPUT = [
    "Room: 1",
    "NORTH: None",
    "EAST: Door",
    "SOUTH: None",
    "WEST: None",
    "",
    "Room: 2",
    "NORTH: None",
    "EAST: None",
    "SOUTH: None",
    "WEST: Door",
    "",
]


class _SkipsRoomTwo(StandardMazeBuilder):
    def build_room(self, room_no):
        if room_no != 2:
            super().build_room(room_no)


class TestGameDirector(unittest.TestCase):
    def test_standard_construction(self):
        maze = GameDirector(StandardMazeBuilder()).construct()

        assert list(maze.rooms) == [1, 2]
        r1, r2 = maze.room_no(1), maze.room_no(2)
        assert r1.get_side(Direction.NORTH).is_door
        assert r2.get_side(Direction.SOUTH).is_door
        for room, door_side in ((r1, Direction.NORTH), (r2, Direction.SOUTH)):
            for direction in Direction:
                if direction is not door_side:
                    assert room.get_side(direction).kind is WallKind.WALL

    def test_new_construction(self):
        maze = GameDirector(NewMazeBuilder()).construct()

        assert list(maze.rooms) == [1, 2]
        r1, r2 = maze.room_no(1), maze.room_no(2)
        east = r1.get_side(Direction.EAST)
        west = r2.get_side(Direction.WEST)
        assert east.kind is WallKind.WOODEN_DOOR and east.connects(r1, r2)
        assert west.kind is WallKind.WOODEN_DOOR and west.connects(r2, r1)
        assert set(r1.sides) == {Direction.EAST}
        assert set(r2.sides) == {Direction.WEST}

    def test_returns_builder_maze(self):
        builder = NewMazeBuilder()
        assert GameDirector(builder).construct() is builder.get_maze()

    def test_construction_aborts_on_missing_room(self):
        with self.assertRaises(RoomNotFoundError) as ctx:
            GameDirector(_SkipsRoomTwo()).construct()

        assert ctx.exception.room_no == 2

    def test_builder_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            MazeBuilder()


class TestEntryRoutine(unittest.TestCase):
    def test_create_maze_prints(self):
        out = io.StringIO()
        maze = create_maze(BuilderKind.STANDARD, out)

        assert len(maze) == 2
        assert out.getvalue().splitlines() == STANDARD_OUTPUT

    def test_main_prints_standard_then_new(self):
        out = io.StringIO()
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('MAZE_BUILDERS', None)
            with redirect_stdout(out):
                code = main()

        assert code == 0
        assert out.getvalue().splitlines() == STANDARD_OUTPUT + NEW_OUTPUT

    def test_main_honours_builder_selection(self):
        out = io.StringIO()
        with mock.patch.dict(os.environ, {'MAZE_BUILDERS': 'new'}):
            with redirect_stdout(out):
                main()

        assert out.getvalue().splitlines() == NEW_OUTPUT


class TestBuilderKindsFromEnv(unittest.TestCase):
    def test_default(self):
        with mock.patch.dict(os.environ, {'MAZE_BUILDERS': ''}):
            assert builder_kinds_from_env() == [BuilderKind.STANDARD, BuilderKind.NEW]

    def test_order_is_kept(self):
        with mock.patch.dict(os.environ, {'MAZE_BUILDERS': 'new, standard,'}):
            assert builder_kinds_from_env() == [BuilderKind.NEW, BuilderKind.STANDARD]

    def test_unknown_kind(self):
        with mock.patch.dict(os.environ, {'MAZE_BUILDERS': 'standard,bogus'}):
            with self.assertRaises(ValueError):
                builder_kinds_from_env()


class TestLoggingConfig(unittest.TestCase):
    def test_default_level_is_warning(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('MAZE_LOG_LEVEL', None)
            assert log_level_from_env() == logging.WARNING

    def test_level_name_is_case_insensitive(self):
        with mock.patch.dict(os.environ, {'MAZE_LOG_LEVEL': ' debug '}):
            assert log_level_from_env() == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        for name in ('bogus', 'basic_format'):
            with mock.patch.dict(os.environ, {'MAZE_LOG_LEVEL': name}):
                assert log_level_from_env() == logging.WARNING
                configure_logging()

    def test_debug_logging_leaves_stdout_unchanged(self):
        captures = []
        for level in ('WARNING', 'DEBUG'):
            out = io.StringIO()
            with mock.patch.dict(os.environ, {'MAZE_LOG_LEVEL': level, 'MAZE_BUILDERS': ''}):
                with redirect_stdout(out):
                    assert main() == 0
            captures.append(out.getvalue())

        assert captures[0] == captures[1]
        assert captures[1].splitlines() == STANDARD_OUTPUT + NEW_OUTPUT
