"""Drawing primitives shared between games and displays."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
YELLOW = Color(255, 255, 0, 255)
CYAN = Color(0, 255, 255, 255)
MAGENTA = Color(255, 0, 255, 255)


@dataclass
class Vec2(Generic[T]):
    """A two-component vector."""

    x: T
    y: T


class DrawableType(enum.Enum):
    """Kinds of shapes a display knows how to draw."""

    SQUARE = enum.auto()


class Drawable(ABC):
    """Something a display can draw."""

    @property
    @abstractmethod
    def drawable_type(self) -> DrawableType:
        """The kind of shape this is."""


@dataclass
class Square(Drawable):
    """An axis-aligned filled rectangle."""

    pos: Vec2[int]
    size: Vec2[int]
    color: Color

    @property
    def drawable_type(self) -> DrawableType:
        return DrawableType.SQUARE


@dataclass
class DisplayBuffer:
    """An ordered collection of drawables."""

    _drawables: list[Drawable] = field(default_factory=list)

    def add(self, drawable: Drawable) -> None:
        """Append a drawable to the buffer."""
        self._drawables.append(drawable)

    @property
    def drawables(self) -> list[Drawable]:
        """A copy of the drawables, in insertion order."""
        return list(self._drawables)