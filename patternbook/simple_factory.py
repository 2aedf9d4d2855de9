"""Simple factory: one function choosing which button to create."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        """Print the button and return the printed text."""


@dataclass
class TitleButton(Button):
    title: str

    def render(self) -> str:
        text = f"'{self.title}'"
        print(text)
        return text


@dataclass
class IdButton(Button):
    id: int

    def render(self) -> str:
        text = f"Button #{self.id}"
        print(text)
        return text


def create_button(random_number: float) -> Button:
    """A title button below 0.5, an id button otherwise."""
    if random_number < 0.5:
        return TitleButton("Button")
    return IdButton(123)


def render_dialog(random_number: float) -> None:
    print("--- Title ---")
    create_button(random_number).render()
    print("-------------")


def demo() -> None:
    render_dialog(0.3)
    render_dialog(0.6)