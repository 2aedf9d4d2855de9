"""Factory method pattern: maze games that produce their own kind of rooms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Room(ABC):
    """A room that can be shown to the player."""

    @abstractmethod
    def render(self) -> str:
        """Print the room and return the printed text."""


@dataclass(frozen=True)
class MagicRoom(Room):
    """A room identified by a title."""

    title: str

    def render(self) -> str:
        text = f"Magic Room: {self.title}"
        print(text)
        return text


@dataclass(frozen=True)
class OrdinaryRoom(Room):
    """A room identified by a number."""

    id: int

    def render(self) -> str:
        text = f"Ordinary Room: #{self.id}"
        print(text)
        return text


class MazeGame(ABC):
    """A game whose rooms come from a factory method."""

    @abstractmethod
    def rooms(self) -> list[Room]:
        """The factory method: the rooms of this game, in playing order."""

    def play(self) -> list[str]:
        """Render every room in order and return the rendered lines."""
        return [room.render() for room in self.rooms()]


class MagicMazeGame(MazeGame):
    def __init__(self) -> None:
        self._rooms = [MagicRoom("Infinite Room"), MagicRoom("Red Room")]

    def rooms(self) -> list[Room]:
        return list(self._rooms)


class OrdinaryMazeGame(MazeGame):
    def __init__(self) -> None:
        self._rooms = [OrdinaryRoom(1), OrdinaryRoom(2)]

    def rooms(self) -> list[Room]:
        return list(reversed(self._rooms))


def run(game: MazeGame) -> None:
    """Load resources, then play the game."""
    print("Loading resources...")
    print("Starting the game...")
    game.play()


def demo() -> None:
    run(MagicMazeGame())
    run(OrdinaryMazeGame())