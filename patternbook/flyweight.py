"""Flyweight pattern: a forest sharing tree kinds between many trees."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

CANVAS_SIZE = 500
TREES_TO_DRAW = 100000
TREE_TYPES = 2

_SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class TreeColor(Enum):
    """Colours used for trees, valued by their RGB components."""

    COLOR1 = (0x17, 0xD7, 0xA0)
    COLOR2 = (0xD8, 0x21, 0x48)
    TRUNK_COLOR = (0x15, 0x1D, 0x3B)

    def rgb(self) -> tuple[int, int, int]:
        return self.value


@dataclass(frozen=True)
class Drawing:
    """A filled shape placed on a canvas: a rectangle or a circle."""

    x: float
    y: float
    shape: str
    fill: tuple[int, int, int]
    width: int = 0
    height: int = 0
    radius: int = 0


def _svg_element(drawing: Drawing) -> str:
    r, g, b = drawing.fill
    fill = f"rgb({r},{g},{b})"
    if drawing.shape == "rectangle":
        return (
            f'<rect x="{drawing.x:g}" y="{drawing.y:g}" width="{drawing.width}" '
            f'height="{drawing.height}" fill="{fill}"/>'
        )
    if drawing.shape == "circle":
        return f'<circle cx="{drawing.x:g}" cy="{drawing.y:g}" r="{drawing.radius}" fill="{fill}"/>'
    raise ValueError(f"unknown shape: {drawing.shape!r}")


@dataclass
class Canvas:
    """A drawing surface holding a display list."""

    width: int
    height: int
    display_list: list[Drawing] = field(default_factory=list)

    def add(self, drawing: Drawing) -> None:
        self.display_list.append(drawing)

    def to_svg(self) -> str:
        """Render the display list as an SVG document."""
        lines = [
            f'<svg xmlns="{_SVG_NAMESPACE}" width="{self.width}" height="{self.height}" '
            f'viewBox="0 0 {self.width} {self.height}">'
        ]
        lines.extend(_svg_element(drawing) for drawing in self.display_list)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save_svg(self, path: str | Path) -> None:
        Path(path).write_text(self.to_svg(), encoding="utf-8")


@dataclass(frozen=True)
class TreeKind:
    """The shared, cacheable part of a tree."""

    color: TreeColor
    name: str
    data: str

    def draw(self, canvas: Canvas, x: int, y: int) -> None:
        """Draw a trunk and a crown at the given position."""
        canvas.add(
            Drawing(
                x=max(x - 2, 0),
                y=y,
                shape="rectangle",
                fill=TreeColor.TRUNK_COLOR.rgb(),
                width=4,
                height=5,
            )
        )
        canvas.add(
            Drawing(x=x, y=max(y - 5, 0), shape="circle", fill=self.color.rgb(), radius=5)
        )


@dataclass
class Tree:
    """A tree's own position plus a reference to its shared kind."""

    x: int
    y: int
    kind: TreeKind

    def draw(self, canvas: Canvas) -> None:
        self.kind.draw(canvas, self.x, self.y)


class Forest:
    """Plants trees, keeping a single instance of each tree kind."""

    def __init__(self) -> None:
        self._cache: dict[TreeKind, TreeKind] = {}
        self.trees: list[Tree] = []

    def plant_tree(self, x: int, y: int, color: TreeColor, name: str, data: str) -> None:
        kind = self._cache.setdefault(TreeKind(color, name, data), TreeKind(color, name, data))
        self.trees.append(Tree(x, y, kind))

    def draw(self, canvas: Canvas) -> None:
        for tree in self.trees:
            tree.draw(canvas)

    def cache_len(self) -> int:
        return len(self._cache)


def demo(path: str | Path = "res/forest.svg") -> None:
    """Plant a large forest, save it as SVG and report memory savings."""
    forest = Forest()
    for _ in range(TREES_TO_DRAW // TREE_TYPES):
        forest.plant_tree(
            random.randrange(CANVAS_SIZE),
            random.randrange(CANVAS_SIZE),
            TreeColor.COLOR1,
            "Summer Oak",
            "Oak texture stub",
        )
        forest.plant_tree(
            random.randrange(CANVAS_SIZE),
            random.randrange(CANVAS_SIZE),
            TreeColor.COLOR2,
            "Autumn Oak",
            "Autumn Oak texture stub",
        )

    canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
    forest.draw(canvas)
    canvas.save_svg(path)

    print(f"{TREES_TO_DRAW} trees drawn")
    print(f"Cache length: {forest.cache_len()} tree kinds")
    print("-------------------------------")
    print("Memory usage:")
    print(f"Tree size (16 bytes) * {TREES_TO_DRAW}")
    print(f"+ TreeKind size (~30 bytes) * {TREE_TYPES}")
    print("-------------------------------")
    used = (TREES_TO_DRAW * 16 + TREE_TYPES * 30) // 1024 // 1024
    naive = (TREES_TO_DRAW * 46) // 1024 // 1024
    print(f"Total: {used}MB (instead of {naive}MB)")