import pytest

from patternbook.maze_game import (
    MagicMazeGame,
    MagicRoom,
    MazeGame,
    OrdinaryMazeGame,
    OrdinaryRoom,
    run,
)


def test_magic_game_plays_rooms_in_order(capsys):
    MagicMazeGame().play()
    assert capsys.readouterr().out == "Magic Room: Infinite Room\nMagic Room: Red Room\n"


def test_ordinary_game_reverses_rooms():
    rooms = OrdinaryMazeGame().rooms()
    assert rooms == [OrdinaryRoom(2), OrdinaryRoom(1)]


def test_ordinary_game_play_output(capsys):
    OrdinaryMazeGame().play()
    assert capsys.readouterr().out == "Ordinary Room: #2\nOrdinary Room: #1\n"


def test_rooms_returns_independent_copy():
    game = MagicMazeGame()
    first = game.rooms()
    first.clear()
    assert game.rooms() == [MagicRoom("Infinite Room"), MagicRoom("Red Room")]


def test_run_loads_before_playing(capsys):
    run(MagicMazeGame())
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["Loading resources...", "Starting the game..."]
    assert lines[2] == "Magic Room: Infinite Room"


def test_maze_game_is_abstract():
    with pytest.raises(TypeError):
        MazeGame()