"""A pygame window that draws what games send and reports keys and quit requests."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional

import pygame

from arcatek.buffer import Drawable, DrawableType, Square
from arcatek.events import DisplayEventManager, GameEventManager, Key
from arcatek.plugins import Display

WINDOW_TITLE = "Arcatek"
WINDOW_SIZE = (800, 600)
FPS = 60
BACKGROUND = (0, 0, 0, 255)

_KEY_BINDINGS: tuple[tuple[Key, tuple[int, ...]], ...] = (
    (Key.UP, (pygame.K_w, pygame.K_z)),
    (Key.DOWN, (pygame.K_s,)),
    (Key.LEFT, (pygame.K_a, pygame.K_q)),
    (Key.RIGHT, (pygame.K_d,)),
)


def pressed_keys(is_pressed: Callable[[int], bool]) -> list[Key]:
    """Directions whose bound keys are held, in the order up, down, left, right.

    Both QWERTY (W/A) and AZERTY (Z/Q) layouts are accepted.
    """
    return [
        key
        for key, codes in _KEY_BINDINGS
        if any(is_pressed(code) for code in codes)
    ]


class PygameDisplay(Display):
    """Collects squares sent by the game and draws them in a window each frame."""

    def __init__(
        self,
        size: tuple[int, int] = WINDOW_SIZE,
        title: str = WINDOW_TITLE,
        fps: int = FPS,
    ) -> None:
        self._size = size
        self._title = title
        self._frame_delay = 1.0 / fps
        self._surface: Optional[pygame.Surface] = None
        self._game_event_manager: Optional[GameEventManager] = None
        self._display_event_manager: Optional[DisplayEventManager] = None
        self._drawables: list[Drawable] = []

    def init(
        self,
        game_event_manager: GameEventManager,
        display_event_manager: DisplayEventManager,
    ) -> None:
        """Open the window and start collecting squares to draw."""
        self._game_event_manager = game_event_manager
        self._display_event_manager = display_event_manager
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode(self._size)
            pygame.display.set_caption(self._title)
        except pygame.error as exc:
            print(f"pygame display error: {exc}", file=sys.stderr)
            self._surface = None
            return
        display_event_manager.draw_square.attach(self._drawables.append)

    @property
    def drawables(self) -> list[Drawable]:
        """A copy of what has been collected since the last clear."""
        return list(self._drawables)

    def clear(self) -> None:
        """Forget collected drawables and paint the background."""
        self._drawables.clear()
        if self._surface is not None:
            self._surface.fill(BACKGROUND)

    def render(self) -> None:
        """Handle window events and keys, draw the frame and hold the frame rate."""
        if self._game_event_manager is None or self._surface is None:
            raise RuntimeError("display not initialised")
        frame_start = time.monotonic()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._game_event_manager.close_app.notify(True)

        state = pygame.key.get_pressed()
        for key in pressed_keys(lambda code: bool(state[code])):
            self._game_event_manager.key_pressed.notify(key)

        for drawable in self._drawables:
            if drawable.drawable_type is DrawableType.SQUARE and isinstance(drawable, Square):
                self._draw_square(drawable)
        pygame.display.flip()

        remaining = self._frame_delay - (time.monotonic() - frame_start)
        if remaining > 0:
            time.sleep(remaining)

    def _draw_square(self, square: Square) -> None:
        color = square.color
        rect = pygame.Rect(square.pos.x, square.pos.y, square.size.x, square.size.y)
        pygame.draw.rect(self._surface, (color.r, color.g, color.b, color.a), rect)

    def close(self) -> None:
        """Close the window."""
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()


def create_display() -> PygameDisplay:
    """Entry point that builds a display with default settings."""
    return PygameDisplay()