"""Memento pattern: saving and restoring an originator's state."""

from __future__ import annotations

import json
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


@dataclass
class Originator:
    """An object whose state can be saved and restored."""

    state: int = 0

    def save(self) -> OriginatorBackup:
        """Capture the state in a backup object."""
        return OriginatorBackup(state=str(self.state))

    def to_json(self) -> str:
        """Serialize the originator to compact JSON."""
        return json.dumps({"state": self.state}, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> Originator:
        """Rebuild an originator from JSON; raise ValueError on bad input."""
        data = json.loads(text)
        if not isinstance(data, dict) or "state" not in data:
            raise ValueError("missing field `state`")
        state = data["state"]
        if isinstance(state, bool) or not isinstance(state, int):
            raise ValueError("field `state` must be an integer")
        if not 0 <= state <= _U32_MAX:
            raise ValueError("field `state` is out of range")
        return cls(state=state)


@dataclass(frozen=True)
class OriginatorBackup:
    """A stored snapshot of an originator's state."""

    state: str

    def restore(self) -> Originator:
        """Build an originator from this snapshot."""
        return Originator(state=int(self.state))

    def __str__(self) -> str:
        return f"Originator backup: '{self.state}'"


def demo() -> None:
    """Save two states as backup objects and restore them in reverse."""
    history: list[OriginatorBackup] = []
    originator = Originator(state=0)

    originator.state = 1
    history.append(originator.save())
    originator.state = 2
    history.append(originator.save())

    for moment in history:
        print(moment)

    while history:
        restored = history.pop().restore()
        print(f"Restored to state: {restored.state}")


def demo_json() -> None:
    """Save two states as JSON strings and restore them in reverse."""
    history: list[str] = []
    originator = Originator(state=0)

    originator.state = 1
    history.append(originator.to_json())
    originator.state = 2
    history.append(originator.to_json())

    for moment in history:
        print(moment)

    while history:
        restored = Originator.from_json(history.pop())
        print(f"Restored to state: {restored.state}")