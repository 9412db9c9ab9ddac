# src/termsnake/placement.py
from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

import numpy as np  # type: ignore

from .grid import Grid, Position

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 64


def occupancy(grid: Grid, snake: Sequence[Position]) -> np.ndarray:
    """Boolean [H, W] mask of cells covered by the snake (off-grid segments are skipped)."""
    mask = np.zeros((grid.height, grid.width), dtype=bool)
    for x, y in snake:
        if 0 <= x < grid.width and 0 <= y < grid.height:
            mask[y, x] = True
    return mask


def place_food(
    grid: Grid,
    snake: Sequence[Position],
    rng: random.Random | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[Position]:
    """
    Pick a uniformly random free cell for the food.

    Rejection-samples up to max_attempts cells first; when the snake covers
    most of the board this falls back to drawing directly from the free cells.
    Returns None when every cell is covered (board full).
    """
    rng = rng or random
    body = set(snake)

    for _ in range(max_attempts):
        cand = Position(rng.randrange(grid.width), rng.randrange(grid.height))
        if cand not in body:
            return cand

    free = np.flatnonzero(~occupancy(grid, snake))
    if free.size == 0:
        logger.debug("No free cell left on %dx%d board", grid.width, grid.height)
        return None

    logger.debug("Rejection sampling exhausted; choosing among %d free cells", free.size)
    idx = int(free[rng.randrange(free.size)])
    y, x = divmod(idx, grid.width)
    return Position(x, y)
