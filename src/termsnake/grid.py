# src/termsnake/grid.py
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    """Headings as (dx, dy) offsets; y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")

    @property
    def cells(self) -> int:
        return self.width * self.height

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def center(self) -> Position:
        return Position(self.width // 2, self.height // 2)


def overlaps(pos: Position, body: Iterable[Position]) -> bool:
    """True iff pos equals any segment of body."""
    return any(pos == seg for seg in body)


def step(pos: Position, direction: Direction) -> Position:
    """The cell one move away from pos along direction. May be off the grid."""
    return Position(pos[0] + direction.dx, pos[1] + direction.dy)
