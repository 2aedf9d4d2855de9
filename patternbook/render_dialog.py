"""Factory method pattern: dialogs that create their own kind of button."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Button(ABC):
    """A button that draws itself and reacts to a click."""

    markup: str
    click_message: str

    def render(self) -> list[str]:
        """Draw the button, click it, and return the lines shown."""
        print(self.markup)
        return [self.markup, self.on_click()]

    def on_click(self) -> str:
        """Show the click message and return it."""
        message = self.click_message
        print(message)
        return message


class HtmlButton(Button):
    markup = "<button>Test Button</button>"
    click_message = "Click! Button says - 'Hello World!'"


class WindowsButton(Button):
    markup = "Drawing a Windows button"
    click_message = "Click! Hello, Windows!"


class Dialog(ABC):
    """A dialog whose button comes from a factory method."""

    @abstractmethod
    def create_button(self) -> Button:
        """The factory method."""

    def render(self) -> list[str]:
        return self.create_button().render()

    def refresh(self) -> str:
        """Show the refresh message and return it."""
        message = "Dialog - Refresh"
        print(message)
        return message


class HtmlDialog(Dialog):
    def create_button(self) -> Button:
        return HtmlButton()


class WindowsDialog(Dialog):
    def create_button(self) -> Button:
        return WindowsButton()


def make_dialog(windows: bool | None = None) -> Dialog:
    """Pick a dialog; by default a Windows one only on Windows."""
    if windows is None:
        windows = sys.platform == "win32"
    return WindowsDialog() if windows else HtmlDialog()


def demo() -> None:
    dialog = make_dialog()
    dialog.render()
    dialog.refresh()