# src/termsnake/__init__.py
"""Snake game engine: grid model, food placement, tick engine and game loop."""

from termsnake.grid import Direction, Grid, Position
from termsnake.game import GameState, Phase, Snapshot, advance, new_game_state, set_pending_direction
from termsnake.placement import place_food
from termsnake.scheduler import GameLoop

__all__ = [
    "Direction", "Grid", "Position",
    "GameState", "Phase", "Snapshot", "advance", "new_game_state", "set_pending_direction",
    "place_food",
    "GameLoop",
]
