# src/termsnake/scheduler.py
from __future__ import annotations

import logging
import random
import threading
import time
from queue import Empty, Full, Queue
from typing import Callable, Optional

from .events import Closed, Event, Quit, Turn, closed
from .game import GameState, Snapshot, advance, set_pending_direction

logger = logging.getLogger(__name__)

Renderer = Callable[[Snapshot], None]

# How often a blocked sender re-checks whether the loop has stopped
_SEND_POLL_S = 0.05


class GameLoop:
    """
    Single owner of the live GameState.

    Ticks from a fixed-period timer and events from the channel are merged in
    run(); each wake-up handles exactly one tick, one event or the stop
    signal, so the state is never mutated from two places at once. Other
    threads talk to the loop only through send() and stop().
    """

    def __init__(
        self,
        state: GameState,
        render: Renderer,
        tick_ms: int = 120,
        rng: Optional[random.Random] = None,
        buffer: int = 1,
    ) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self._state = state
        self._render = render
        self._period = tick_ms / 1000.0
        self._rng = rng or random.Random()
        self.events: Queue[Event] = Queue(maxsize=max(1, buffer))
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.ticks = 0

    @property
    def state(self) -> GameState:
        # Only safe to inspect once the loop has stopped.
        return self._state

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    # ---------- Producer side ----------
    def send(self, event: Event, timeout: Optional[float] = None) -> bool:
        """Queue an event for the loop. Blocks while the channel is full; False if the loop stopped or timed out."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while not self._stop.is_set():
            wait = _SEND_POLL_S
            if deadline is not None:
                wait = min(wait, deadline - time.monotonic())
                if wait <= 0:
                    return False
            try:
                self.events.put(event, timeout=wait)
                return True
            except Full:
                continue
        return False

    def stop(self) -> None:
        """Termination signal: wake the loop and make it return."""
        if self._stop.is_set():
            return
        self._stop.set()
        try:
            self.events.put_nowait(closed())
        except Full:
            # A full channel wakes the loop just the same.
            pass

    # ---------- Loop ----------
    def run(self) -> None:
        logger.info("Game loop started (tick=%.0f ms)", self._period * 1000)
        self._draw()
        next_tick = time.monotonic() + self._period

        while not self._stop.is_set():
            remaining = next_tick - time.monotonic()
            if remaining <= 0:
                self.tick()
                next_tick += self._period
                now = time.monotonic()
                if next_tick <= now:
                    # Fell a whole period behind; skip the missed ticks.
                    next_tick = now + self._period
                continue

            try:
                event = self.events.get(timeout=remaining)
            except Empty:
                continue
            self.handle(event)

        logger.info("Game loop stopped after %d ticks (score=%d)", self.ticks, self._state.score)

    def tick(self) -> None:
        if not self._state.over:
            advance(self._state, self._rng)
        self.ticks += 1
        self._draw()

    def handle(self, event: Event) -> None:
        if isinstance(event, Turn):
            set_pending_direction(self._state, event.direction)
        elif isinstance(event, (Quit, Closed)):
            self._stop.set()
        else:
            logger.debug("Ignoring unknown event %r", event)

    def _draw(self) -> None:
        try:
            self._render(self._state.snapshot())
        except Exception:
            logger.exception("Render failed")

    # ---------- Threading ----------
    def start(self) -> threading.Thread:
        if self._thread and self._thread.is_alive():
            return self._thread
        self._thread = threading.Thread(target=self.run, name="game-loop", daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for a started loop; True once its thread has exited."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()
