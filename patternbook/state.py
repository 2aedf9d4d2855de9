"""State pattern: a music player whose buttons act according to its state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Track:
    """A music track with a playback cursor."""

    title: str
    duration: int
    cursor: int = 0


class Player:
    """A music player holding a playlist."""

    def __init__(self) -> None:
        self.playlist = [
            Track("Track 1", 180),
            Track("Track 2", 165),
            Track("Track 3", 197),
            Track("Track 4", 205),
        ]
        self.current_track = 0
        self._volume = 25

    def next_track(self) -> None:
        self.current_track = (self.current_track + 1) % len(self.playlist)

    def prev_track(self) -> None:
        self.current_track = (self.current_track - 1) % len(self.playlist)

    def play(self) -> None:
        self.track().cursor = 10  # Playback imitation.

    def pause(self) -> None:
        self.track().cursor = 43  # Paused at some moment.

    def rewind(self) -> None:
        self.track().cursor = 0

    def track(self) -> Track:
        """The current track."""
        return self.playlist[self.current_track]


class State(ABC):
    """A player state; each action returns the following state."""

    @abstractmethod
    def play(self, player: Player) -> State:
        """React to the Play button."""

    @abstractmethod
    def stop(self, player: Player) -> State:
        """React to the Stop button."""

    def next(self, player: Player) -> State:
        player.next_track()
        return self

    def prev(self, player: Player) -> State:
        player.prev_track()
        return self

    @abstractmethod
    def render(self, player: Player) -> str:
        """Describe the player in this state."""


class StoppedState(State):
    def play(self, player: Player) -> State:
        player.play()
        return PlayingState()

    def stop(self, player: Player) -> State:
        return self

    def render(self, player: Player) -> str:
        return "[Stopped] Press 'Play'"


class PausedState(State):
    def play(self, player: Player) -> State:
        player.pause()
        return PlayingState()

    def stop(self, player: Player) -> State:
        player.pause()
        player.rewind()
        return StoppedState()

    def render(self, player: Player) -> str:
        track = player.track()
        return f"[Paused] {track.title} - {track.duration} sec"


class PlayingState(State):
    def play(self, player: Player) -> State:
        player.pause()
        return PausedState()

    def stop(self, player: Player) -> State:
        player.pause()
        player.rewind()
        return StoppedState()

    def render(self, player: Player) -> str:
        track = player.track()
        return f"[Playing] {track.title} - {track.duration} sec"


class PlayerApplication:
    """A player, its current state and the status text shown to the user."""

    def __init__(self) -> None:
        self.player = Player()
        self.state: State = StoppedState()
        self.status = "Press Play"

    def press(self, button: str) -> str:
        """Press one of Play, Stop, Prev, Next; return the new status text."""
        actions = {
            "Play": self.state.play,
            "Stop": self.state.stop,
            "Prev": self.state.prev,
            "Next": self.state.next,
        }
        try:
            action = actions[button]
        except KeyError:
            raise ValueError(f"unknown button: {button!r}") from None
        self.state = action(self.player)
        self.status = self.state.render(self.player)
        return self.status