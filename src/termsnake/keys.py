# src/termsnake/keys.py
from typing import Optional

import pygame  # type: ignore

from .events import Event, quit_event, turn
from .grid import Direction

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def decode_key(key: int, unicode: str = "") -> Optional[Event]:
    """Arrow keys -> Turn, q/Esc -> Quit, anything else -> None."""
    if key in KEY_DIRECTIONS:
        return turn(KEY_DIRECTIONS[key])
    if key == pygame.K_ESCAPE or key == pygame.K_q or unicode in ("q", "Q"):
        return quit_event()
    return None


def decode_event(event) -> Optional[Event]:
    """Decode a raw pygame event; window close counts as Quit."""
    if event.type == pygame.QUIT:
        return quit_event()
    if event.type == pygame.KEYDOWN:
        return decode_key(event.key, getattr(event, "unicode", ""))
    return None
