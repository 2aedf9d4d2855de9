"""Composite pattern: files and folders searched through one interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Component(ABC):
    """A file-system entry that can be searched."""

    @abstractmethod
    def search(self, keyword: str) -> list[str]:
        """Search for a keyword; print and return the lines produced."""


@dataclass
class File(Component):
    """A single file."""

    name: str

    def search(self, keyword: str) -> list[str]:
        line = f"Searching for keyword {keyword} in file {self.name}"
        print(line)
        return [line]


class Folder(Component):
    """A folder holding files and other folders."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.components: list[Component] = []

    def add(self, component: Component) -> None:
        """Put a component into this folder."""
        self.components.append(component)

    def search(self, keyword: str) -> list[str]:
        line = f"Searching recursively for keyword {keyword} in folder {self.name}"
        print(line)
        lines = [line]
        for component in self.components:
            lines.extend(component.search(keyword))
        return lines


def demo() -> None:
    """Search a folder tree for a keyword."""
    folder1 = Folder("Folder 1")
    folder1.add(File("File 1"))

    folder2 = Folder("Folder 2")
    folder2.add(File("File 2"))
    folder2.add(File("File 3"))
    folder2.add(folder1)

    folder2.search("rose")