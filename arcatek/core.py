"""The core loop: loads a game and a display, wires their events and runs frames."""

from __future__ import annotations

import sys
from typing import Any, Optional, Sequence

from arcatek.events import DisplayEventManager, GameEventManager
from arcatek.pacman import create_game
from arcatek.plugins import Catalog, Display, Game, PluginError, PluginLibrary
from arcatek.pygame_display import create_display

GAME_SYMBOL = "createGame"
DISPLAY_SYMBOL = "createDisplay"


def default_catalog() -> Catalog:
    """The libraries shipped with the package, keyed by name."""
    return {
        "pacman": {GAME_SYMBOL: create_game},
        "pygame": {DISPLAY_SYMBOL: create_display},
    }


def _instantiate(libraries: Sequence[PluginLibrary], symbol: str, kind: str) -> list[Any]:
    instances = []
    for library in libraries:
        try:
            library.load()
        except PluginError:
            continue
        try:
            factory = library.get_symbol(symbol)
        except PluginError as exc:
            print(f"Failed to load {kind} symbol: {exc}", file=sys.stderr)
            continue
        instances.append(factory())
    return instances


class Core:
    """Drives the first loaded game with the first loaded display."""

    def __init__(
        self,
        games: Sequence[str],
        displays: Sequence[str],
        catalog: Optional[Catalog] = None,
    ) -> None:
        if catalog is None:
            catalog = default_catalog()
        self._game_libraries = [PluginLibrary(name, catalog) for name in games]
        self._display_libraries = [PluginLibrary(name, catalog) for name in displays]
        self._games: list[Game] = _instantiate(self._game_libraries, GAME_SYMBOL, "game")
        self._displays: list[Display] = _instantiate(
            self._display_libraries, DISPLAY_SYMBOL, "display"
        )
        self._current_game = 0
        self._current_display = 0
        self._running = True
        self._game_event_manager: Optional[GameEventManager] = None
        self._display_event_manager: Optional[DisplayEventManager] = None

        print(
            f"Loaded {len(self._games)} game instances and "
            f"{len(self._displays)} display instances."
        )
        if not self._games:
            print("No game instances loaded.", file=sys.stderr)
            return
        if not self._displays:
            print("No display instances loaded.", file=sys.stderr)
            return

        self._game_event_manager = GameEventManager()
        self._display_event_manager = DisplayEventManager()
        self._games[self._current_game].init(
            self._game_event_manager, self._display_event_manager
        )
        self._displays[self._current_display].init(
            self._game_event_manager, self._display_event_manager
        )
        self._game_event_manager.close_app.attach(self._on_close)

    def _on_close(self, close: bool) -> None:
        if close:
            self._running = False

    @property
    def running(self) -> bool:
        """Whether the loop keeps going."""
        return self._running

    def run(self) -> None:
        """Run frames until a close is requested."""
        if self._game_event_manager is None:
            raise RuntimeError("no game and display pair to run")
        game = self._games[self._current_game]
        display = self._displays[self._current_display]
        while self._running:
            display.clear()
            game.update()
            display.render()


def parse_args(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Collect the values of '-g' (games) and '-d' (displays); other arguments are ignored."""
    games: list[str] = []
    displays: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg in ("-g", "-d"):
            value = next(args, None)
            if value is None:
                break
            (games if arg == "-g" else displays).append(value)
    return games, displays


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    if argv is None:
        argv = sys.argv[1:]
    games, displays = parse_args(argv)
    print(f"{len(games)} game libraries loaded.")
    print(f"{len(displays)} display libraries loaded.")
    core = Core(games, displays, default_catalog())
    try:
        core.run()
    except RuntimeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())