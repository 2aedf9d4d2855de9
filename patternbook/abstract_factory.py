"""Abstract factory pattern: families of GUI widgets created by one factory."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _announce(message: str) -> str:
    print(message)
    return message


class Button(ABC):
    """A pressable widget."""

    @abstractmethod
    def press(self) -> str:
        """React to a press and return the message shown."""


class Checkbox(ABC):
    """A switchable widget."""

    @abstractmethod
    def switch(self) -> str:
        """React to a switch and return the message shown."""


class MacButton(Button):
    def press(self) -> str:
        return _announce("MacOS button has pressed")


class MacCheckbox(Checkbox):
    def switch(self) -> str:
        return _announce("MacOS checkbox has switched")


class WindowsButton(Button):
    def press(self) -> str:
        return _announce("Windows button has pressed")


class WindowsCheckbox(Checkbox):
    def switch(self) -> str:
        return _announce("Windows checkbox has switched")


class GuiFactory(ABC):
    """Creates widgets that belong to one family."""

    @abstractmethod
    def create_button(self) -> Button:
        """Create a button of this family."""

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        """Create a checkbox of this family."""


class MacFactory(GuiFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class WindowsFactory(GuiFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


def render(factory: GuiFactory) -> None:
    """Create two buttons and two checkboxes with the factory and use them."""
    button1 = factory.create_button()
    button2 = factory.create_button()
    checkbox1 = factory.create_checkbox()
    checkbox2 = factory.create_checkbox()

    button1.press()
    button2.press()
    checkbox1.switch()
    checkbox2.switch()


def demo(windows: bool = True) -> None:
    """Render with the Windows or the macOS widget family."""
    factory: GuiFactory = WindowsFactory() if windows else MacFactory()
    render(factory)