"""Observer-based event channels between the core, games and displays."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar, Union

from arcatek.buffer import Square

T = TypeVar("T")


class Key(enum.Enum):
    """Directional keys a display can report."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


class Observer(Generic[T]):
    """Receives data from a subject through an optional callback."""

    def __init__(self, callback: Optional[Callable[[T], object]] = None) -> None:
        self._callback = callback

    def update(self, data: T) -> None:
        """Handle a notification; does nothing when no callback is set."""
        if self._callback is not None:
            self._callback(data)


class Subject(Generic[T]):
    """Keeps a list of observers and notifies them in attachment order."""

    def __init__(self) -> None:
        self._observers: list[Observer[T]] = []

    def attach(self, observer: Union[Observer[T], Callable[[T], object]]) -> Observer[T]:
        """Register an observer or a plain callback; returns the observer."""
        if isinstance(observer, Observer):
            wrapped = observer
        elif callable(observer):
            wrapped = Observer(observer)
        else:
            raise TypeError(f"cannot attach {observer!r}: not an observer or callable")
        self._observers.append(wrapped)
        return wrapped

    def detach(self, observer: Observer[T]) -> None:
        """Remove every registration of the given observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, data: T) -> None:
        """Pass data to each observer."""
        for observer in list(self._observers):
            observer.update(data)


class CloseAppObserver(Observer[bool]):
    """Observer for application-close requests."""


class CloseAppSubject(Subject[bool]):
    """Channel for requests to close the application."""


class KeyboardSubject(Subject[Key]):
    """Channel for key presses."""


class DrawSquareSubject(Subject[Square]):
    """Channel for squares a game wants drawn."""


@dataclass
class GameEventManager:
    """Events a display sends to the game and core."""

    close_app: CloseAppSubject = field(default_factory=CloseAppSubject)
    key_pressed: KeyboardSubject = field(default_factory=KeyboardSubject)


@dataclass
class DisplayEventManager:
    """Events a game sends to the display."""

    draw_square: DrawSquareSubject = field(default_factory=DrawSquareSubject)