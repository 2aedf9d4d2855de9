"""Command pattern: editor actions that can be executed and undone."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class AppContext:
    """Editor content, clipboard and the history of undoable commands."""

    editor: str = ""
    clipboard: str = ""
    history: list[Command] = field(default_factory=list)


class Command(ABC):
    """An action on the application that may be undone."""

    @abstractmethod
    def execute(self, app: AppContext) -> bool:
        """Perform the action; return True if it should be kept for undo."""

    @abstractmethod
    def undo(self, app: AppContext) -> None:
        """Revert the action."""


class CopyCommand(Command):
    def execute(self, app: AppContext) -> bool:
        app.clipboard = app.editor
        return False

    def undo(self, app: AppContext) -> None:
        pass


class CutCommand(Command):
    def __init__(self) -> None:
        self.backup = ""

    def execute(self, app: AppContext) -> bool:
        self.backup = app.editor
        app.clipboard = self.backup
        app.editor = ""
        return True

    def undo(self, app: AppContext) -> None:
        app.editor = self.backup


class PasteCommand(Command):
    def __init__(self) -> None:
        self.backup = ""

    def execute(self, app: AppContext) -> bool:
        self.backup = app.editor
        app.editor = app.clipboard
        return True

    def undo(self, app: AppContext) -> None:
        app.editor = self.backup


def run_command(app: AppContext, command: Command) -> None:
    """Execute a command and record it in the history if it can be undone."""
    if command.execute(app):
        app.history.append(command)


def undo_last(app: AppContext) -> None:
    """Undo the most recent recorded command, if there is one."""
    if app.history:
        app.history.pop().undo(app)