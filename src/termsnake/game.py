# src/termsnake/game.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import random
from typing import List, Optional, Sequence, Tuple

from .config import CFG
from .grid import Direction, Grid, Position, is_opposite, overlaps, step
from .placement import place_food

logger = logging.getLogger(__name__)

# Reasons a run can end
WALL = "wall"
SELF = "self"
BOARD_FULL = "board_full"


class Phase(Enum):
    ACTIVE = "active"
    OVER = "over"


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Immutable view of one frame; the only thing renderers get to see."""
    width: int
    height: int
    snake: Tuple[Position, ...]    # head first
    food: Optional[Position]
    score: int
    phase: Phase
    direction: Direction
    end_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER


# ---------- State ----------
@dataclass
class GameState:
    grid: Grid
    snake: List[Position]          # head at index 0
    direction: Direction
    pending: Direction
    food: Optional[Position]
    score: int = 0
    phase: Phase = Phase.ACTIVE
    end_reason: Optional[str] = None
    reward: int = field(default=CFG.reward)

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER

    def snapshot(self) -> Snapshot:
        return Snapshot(
            width=self.grid.width,
            height=self.grid.height,
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            phase=self.phase,
            direction=self.direction,
            end_reason=self.end_reason,
        )


def new_game_state(
    grid: Grid,
    rng: random.Random | None = None,
    reward: int = CFG.reward,
    snake: Sequence[Tuple[int, int]] | None = None,
    direction: Direction = Direction.RIGHT,
    food: Tuple[int, int] | None = None,
) -> GameState:
    """
    Fresh Active state. By default a one-cell snake two cells left of centre
    heading right, with food placed at random.
    """
    if snake is None:
        cx, cy = grid.center()
        body = [Position(max(cx - 2, 0), cy)]
    else:
        body = [Position(*p) for p in snake]
    assert body, "snake needs at least one segment"

    if food is None:
        placed = place_food(grid, body, rng)
    else:
        placed = Position(*food)

    state = GameState(
        grid=grid,
        snake=body,
        direction=direction,
        pending=direction,
        food=placed,
        reward=reward,
    )
    if placed is None:
        _finish(state, BOARD_FULL)
    return state


# ---------- Input / Update ----------
def set_pending_direction(state: GameState, requested: Direction) -> bool:
    """Queue a heading for the next tick; 180° turns are dropped. Returns True if accepted."""
    if is_opposite(requested, state.direction):
        return False
    state.pending = requested
    return True


def advance(state: GameState, rng: random.Random | None = None) -> GameState:
    """
    Advance the game by one tick, in place.
    - Commit the pending direction and move the head one cell.
    - Eating grows the snake by one and re-places the food.
    - Wall and self collisions are checked against the updated body, so the
      head sits on the lethal cell when the run ends.
    No-op once the phase is OVER.
    """
    if state.over:
        return state
    assert state.snake, "snake lost all segments"

    # Commit direction once per tick
    state.direction = state.pending
    new_head = step(state.head, state.direction)

    # Move / grow
    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += state.reward
        state.food = place_food(state.grid, state.snake, rng)
        logger.debug("Ate food at %s, score=%d, next food at %s", new_head, state.score, state.food)
        if state.food is None:
            _finish(state, BOARD_FULL)
            return state
    else:
        state.snake.pop()

    # Collisions
    if not state.grid.in_bounds(new_head):
        _finish(state, WALL)
    elif overlaps(new_head, state.snake[1:]):
        _finish(state, SELF)

    assert state.score >= 0, "score went negative"
    return state


def _finish(state: GameState, reason: str) -> None:
    state.phase = Phase.OVER
    state.end_reason = reason
    logger.info("Game over (%s): score=%d length=%d", reason, state.score, len(state.snake))
