# src/termsnake/render.py
import threading
from typing import List, Optional, Tuple

import pygame  # type: ignore

from .config import BG, BORDER, GREEN, HEAD, RED, STATUS_H, TEXT, YELLOW
from .game import BOARD_FULL, Snapshot

# ---------- Text ----------
def board_text(snap: Snapshot) -> str:
    """
    Plain-text frame:
    # = border, @ = head, o = body, * = food, . = empty
    Segments that left the board (a wall hit) are not drawn.
    """
    board: List[List[str]] = [["." for _ in range(snap.width)] for _ in range(snap.height)]

    if snap.food is not None:
        fx, fy = snap.food
        board[fy][fx] = "*"

    # Draw tail first so the head wins on a self-collision cell
    for idx in range(len(snap.snake) - 1, -1, -1):
        x, y = snap.snake[idx]
        if 0 <= x < snap.width and 0 <= y < snap.height:
            board[y][x] = "@" if idx == 0 else "o"

    edge = "#" * (snap.width + 2)
    lines = [edge]
    lines.extend("#" + "".join(row) + "#" for row in board)
    lines.append(edge)
    lines.append(f"Score: {snap.score}")
    if snap.over:
        lines.append(f"GAME OVER ({snap.end_reason})")
    return "\n".join(lines)


# ---------- Frame hand-off ----------
class FrameSlot:
    """
    Latest-frame mailbox between the game loop thread and the drawing thread.
    publish() is the loop's renderer; the window thread polls latest().
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Optional[Snapshot] = None
        self._version = 0

    def publish(self, snap: Snapshot) -> None:
        with self._lock:
            self._snapshot = snap
            self._version += 1

    __call__ = publish

    def latest(self) -> Tuple[int, Optional[Snapshot]]:
        with self._lock:
            return self._version, self._snapshot


# ---------- pygame ----------
def window_size(width: int, height: int, cell_size: int) -> Tuple[int, int]:
    # one border cell on every side plus the score bar
    return (width + 2) * cell_size, (height + 2) * cell_size + STATUS_H


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell_size: int) -> None:
    # grid (0, 0) sits inside the border
    rect = pygame.Rect((gx + 1) * cell_size, (gy + 1) * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect.inflate(-2, -2))


def draw_border(screen: pygame.Surface, width: int, height: int, cell_size: int) -> None:
    outer = pygame.Rect(0, 0, (width + 2) * cell_size, (height + 2) * cell_size)
    pygame.draw.rect(screen, BORDER, outer, cell_size // 2)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    screen.fill(BG)
    draw_border(screen, snap.width, snap.height, cell_size)
    # food
    if snap.food is not None:
        draw_cell(screen, snap.food[0], snap.food[1], RED, cell_size)
    # snake, head last and brighter
    for x, y in snap.snake[1:]:
        if 0 <= x < snap.width and 0 <= y < snap.height:
            draw_cell(screen, x, y, GREEN, cell_size)
    hx, hy = snap.head
    if 0 <= hx < snap.width and 0 <= hy < snap.height:
        draw_cell(screen, hx, hy, HEAD, cell_size)
    # score bar
    bar_y = (snap.height + 2) * cell_size + 4
    txt = font.render(f"SCORE: {snap.score}", True, TEXT)
    screen.blit(txt, (8, bar_y))
    hint = font.render("PRESS Q TO QUIT", True, YELLOW)
    screen.blit(hint, (screen.get_width() - hint.get_width() - 8, bar_y))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    w, h = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = "BOARD CLEARED" if snap.end_reason == BOARD_FULL else "GAME OVER"
    lines = [
        (title, (240, 240, 250)),
        (f"Final score: {snap.score}", TEXT),
        ("Press Q to quit", TEXT),
    ]
    y = h // 2 - 28
    for text, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(w // 2, y)))
        y += 28


def draw_start_screen(screen: pygame.Surface, font: pygame.font.Font) -> None:
    w, h = screen.get_size()
    screen.fill(BG)
    lines = [
        ("SNAKE", YELLOW),
        ("Use arrow keys to move", YELLOW),
        ("Collect the red cell to grow", RED),
        ("Avoid walls and yourself!", YELLOW),
        ("Press any key to start", TEXT),
    ]
    y = h // 3
    for text, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(w // 2, y)))
        y += 30
