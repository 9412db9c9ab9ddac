# src/termsnake/main.py
from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

import pygame  # type: ignore

from .config import Config
from .game import new_game_state
from .grid import Grid
from .keys import decode_event
from .events import Quit
from .render import FrameSlot, board_text, draw_game, draw_game_over, draw_start_screen, window_size
from .scheduler import GameLoop

logger = logging.getLogger(__name__)

# How long the window thread blocks waiting for input before checking for a new frame
WAIT_MS = 16


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic snake: eat, grow, avoid walls and yourself.")
    parser.add_argument("--width", type=int, default=None, help="grid width in cells")
    parser.add_argument("--height", type=int, default=None, help="grid height in cells")
    parser.add_argument("--tick-ms", type=int, default=None, help="milliseconds per move")
    parser.add_argument("--reward", type=int, default=None, help="points per food eaten")
    parser.add_argument("--cell-size", type=int, default=None, help="pixels per grid cell")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Environment (and .env) first, command-line flags on top."""
    return Config.from_env().override(
        width=args.width,
        height=args.height,
        tick_ms=args.tick_ms,
        reward=args.reward,
        cell_size=args.cell_size,
        seed=args.seed,
    )


def wait_for_start(screen: pygame.Surface, font: pygame.font.Font) -> bool:
    """Show the start screen until a key is pressed. False if the window was closed or q/Esc pressed."""
    draw_start_screen(screen, font)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return not isinstance(decode_event(event), Quit)


def pump(loop: GameLoop, frames: FrameSlot, screen: pygame.Surface, font: pygame.font.Font, cfg: Config) -> None:
    """
    Window-thread side of the game: decode keys into loop events and draw
    whichever frame the loop published last. Returns once the loop stops.
    """
    drawn = -1
    while not loop.stopped:
        # 1) input
        pending = [pygame.event.wait(WAIT_MS)]
        pending.extend(pygame.event.get())
        for raw in pending:
            event = decode_event(raw)
            if event is None:
                continue
            if not loop.send(event, timeout=cfg.tick_seconds) and isinstance(event, Quit):
                loop.stop()

        # 2) render
        version, snap = frames.latest()
        if snap is not None and version != drawn:
            draw_game(screen, font, snap, cfg.cell_size)
            if snap.over:
                draw_game_over(screen, font, snap)
            pygame.display.flip()
            drawn = version


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    logger.info("Starting %dx%d game, tick=%d ms, reward=%d", cfg.width, cfg.height, cfg.tick_ms, cfg.reward)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode(window_size(cfg.width, cfg.height, cfg.cell_size))
        pygame.display.set_caption("Snake")

        if not wait_for_start(screen, font):
            return 0

        rng = random.Random(cfg.seed)
        state = new_game_state(Grid(cfg.width, cfg.height), rng, reward=cfg.reward)
        frames = FrameSlot()
        loop = GameLoop(state, frames.publish, tick_ms=cfg.tick_ms, rng=rng, buffer=cfg.input_buffer)
        loop.start()
        try:
            pump(loop, frames, screen, font, cfg)
        finally:
            loop.stop()
            loop.join(timeout=1.0)

        logger.info("Final score: %d", loop.state.score)
        logger.debug("Final board:\n%s", board_text(loop.state.snapshot()))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
