"""Prototype pattern: making new objects by copying an existing one."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class Circle:
    """A circle with a centre and a radius."""

    x: int
    y: int
    radius: int

    def clone(self) -> Circle:
        """Return an independent copy of this circle."""
        return dataclasses.replace(self)


def demo() -> None:
    """Clone a circle and change the copy's radius."""
    circle1 = Circle(x=10, y=15, radius=10)
    circle2 = circle1.clone()
    circle2.radius = 77

    print(f"Circle 1: {circle1.x}, {circle1.y}, {circle1.radius}")
    print(f"Circle 2: {circle2.x}, {circle2.y}, {circle2.radius}")