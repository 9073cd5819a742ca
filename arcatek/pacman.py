"""A small Pacman game: a tile map read from text and a movable player."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Optional, Union

from arcatek.buffer import RED, YELLOW, Color, Square, Vec2
from arcatek.events import DisplayEventManager, GameEventManager, Key
from arcatek.plugins import Game

DEFAULT_MAP_PATH = "./Lib/Games/Pacman/Map.txt"
TILE_SIZE = 10

_WALL_CHAR = "#"
_PACGUM_CHAR = "."


def _copy_square(square: Square) -> Square:
    return Square(
        Vec2(square.pos.x, square.pos.y),
        Vec2(square.size.x, square.size.y),
        square.color,
    )


@dataclass
class Tile:
    """A coloured cell of the map."""

    position: Vec2[int]
    size: Vec2[int]
    color: Color

    def display(self, display_event_manager: DisplayEventManager) -> None:
        """Ask the display to draw this tile as a square."""
        display_event_manager.draw_square.notify(
            Square(
                Vec2(self.position.x, self.position.y),
                Vec2(self.size.x, self.size.y),
                self.color,
            )
        )


class Wall(Tile):
    """A red, impassable tile."""

    def __init__(self, position: Vec2[int], size: Vec2[int]) -> None:
        super().__init__(position, size, RED)


class PacGum(Tile):
    """A yellow tile holding a gum to eat."""

    def __init__(self, position: Vec2[int], size: Vec2[int]) -> None:
        super().__init__(position, size, YELLOW)


def _tiles_from_lines(lines: Iterable[str]) -> list[Tile]:
    tiles: list[Tile] = []
    for y, line in enumerate(lines):
        for x, char in enumerate(line.rstrip("\n")):
            position = Vec2(x * TILE_SIZE, y * TILE_SIZE)
            size = Vec2(TILE_SIZE, TILE_SIZE)
            if char == _WALL_CHAR:
                tiles.append(Wall(position, size))
            elif char == _PACGUM_CHAR:
                tiles.append(PacGum(position, size))
    return tiles


class Map:
    """An ordered set of tiles."""

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles = list(tiles)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> "Map":
        """Read a map where '#' is a wall and '.' a gum; other characters are empty."""
        with open(path, encoding="utf-8") as handle:
            return cls(_tiles_from_lines(handle))

    @property
    def tiles(self) -> list[Tile]:
        """A copy of the tiles, in reading order."""
        return list(self._tiles)

    def display(self, display_event_manager: DisplayEventManager) -> None:
        """Ask the display to draw every tile."""
        for tile in self._tiles:
            tile.display(display_event_manager)


class Player:
    """The green square the user steers."""

    def __init__(self) -> None:
        self._square = Square(Vec2(20, 20), Vec2(15, 15), Color(0, 255, 0, 255))

    @property
    def square(self) -> Square:
        """A copy of the player's square."""
        return _copy_square(self._square)

    def display(self, display_event_manager: DisplayEventManager) -> None:
        """Ask the display to draw the player."""
        display_event_manager.draw_square.notify(_copy_square(self._square))

    def move_up(self) -> None:
        self._square.pos.y -= 1

    def move_down(self) -> None:
        self._square.pos.y += 1

    def move_left(self) -> None:
        self._square.pos.x -= 1

    def move_right(self) -> None:
        self._square.pos.x += 1


class PacmanGame(Game):
    """The Pacman game: draws the map and the player, moves the player on key presses."""

    def __init__(self, map_path: Union[str, PathLike] = DEFAULT_MAP_PATH) -> None:
        self.player = Player()
        try:
            self.map = Map.from_file(map_path)
        except OSError:
            print("Error: Map file not found", file=sys.stderr)
            self.map = Map()
        self._event_manager: Optional[GameEventManager] = None
        self._display_event_manager: Optional[DisplayEventManager] = None

    def init(
        self,
        event_manager: GameEventManager,
        display_event_manager: DisplayEventManager,
    ) -> None:
        """Connect to the event channels and start listening for keys."""
        self._event_manager = event_manager
        self._display_event_manager = display_event_manager
        event_manager.key_pressed.attach(self._on_key)

    def update(self) -> None:
        """Emit the map, then the player, for drawing."""
        if self._display_event_manager is None:
            raise RuntimeError("game not initialised")
        self.map.display(self._display_event_manager)
        self.player.display(self._display_event_manager)

    def _on_key(self, key: Key) -> None:
        moves = {
            Key.UP: self.player.move_up,
            Key.DOWN: self.player.move_down,
            Key.LEFT: self.player.move_left,
            Key.RIGHT: self.player.move_right,
        }
        move = moves.get(key)
        if move is not None:
            move()


def create_game() -> PacmanGame:
    """Entry point that builds a game with the default map."""
    return PacmanGame()