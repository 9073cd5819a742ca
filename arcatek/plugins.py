"""Game and display interfaces, and named plugin libraries that provide them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Optional

from arcatek.events import DisplayEventManager, GameEventManager


class PluginError(Exception):
    """Raised when a plugin library cannot be loaded, unloaded or queried."""


class Game(ABC):
    """A game the core can drive."""

    @abstractmethod
    def init(
        self,
        event_manager: GameEventManager,
        display_event_manager: DisplayEventManager,
    ) -> None:
        """Connect the game to the event channels."""

    @abstractmethod
    def update(self) -> None:
        """Advance the game by one frame and emit what should be drawn."""


class Display(ABC):
    """A display backend the core can drive."""

    @abstractmethod
    def init(
        self,
        game_event_manager: GameEventManager,
        display_event_manager: DisplayEventManager,
    ) -> None:
        """Connect the display to the event channels."""

    @abstractmethod
    def render(self) -> None:
        """Draw everything collected since the last clear."""

    @abstractmethod
    def clear(self) -> None:
        """Forget what was collected and blank the screen."""


Catalog = Mapping[str, Mapping[str, Callable[..., Any]]]


class PluginLibrary:
    """A library of named entry points, looked up by name in a catalog."""

    def __init__(self, name: str, catalog: Catalog) -> None:
        self._name = name
        self._catalog = catalog
        self._symbols: Optional[Mapping[str, Callable[..., Any]]] = None

    @property
    def name(self) -> str:
        """The name the library was created with."""
        return self._name

    @property
    def loaded(self) -> bool:
        """Whether the library is currently loaded."""
        return self._symbols is not None

    def load(self) -> None:
        """Load the library; raises PluginError if the catalog lacks it."""
        try:
            self._symbols = self._catalog[self._name]
        except KeyError:
            raise PluginError(f"{self._name}: cannot open library") from None

    def unload(self) -> None:
        """Unload the library; raises PluginError if it is not loaded."""
        if self._symbols is None:
            raise PluginError("library not loaded")
        self._symbols = None

    def get_symbol(self, symbol: str) -> Callable[..., Any]:
        """Return the entry point with the given name."""
        if self._symbols is None:
            raise PluginError("library not loaded")
        try:
            return self._symbols[symbol]
        except KeyError:
            raise PluginError(f"symbol not found: {symbol}") from None

    def __enter__(self) -> "PluginLibrary":
        if self._symbols is None:
            self.load()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._symbols is not None:
            self.unload()

    def __repr__(self) -> str:
        return f"PluginLibrary(name={self._name!r}, loaded={self.loaded})"