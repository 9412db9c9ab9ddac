# src/termsnake/events.py
from dataclasses import dataclass

from .grid import Direction


@dataclass(frozen=True)
class Event:
    type: str


@dataclass(frozen=True)
class Turn(Event):
    direction: Direction


@dataclass(frozen=True)
class Quit(Event):
    pass


@dataclass(frozen=True)
class Closed(Event):
    """Posted by GameLoop.stop() to wake a waiting loop."""
    pass


def turn(direction: Direction) -> Turn:
    return Turn(type="turn", direction=direction)


def quit_event() -> Quit:
    return Quit(type="quit")


def closed() -> Closed:
    return Closed(type="closed")
