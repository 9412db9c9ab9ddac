"""Tests for the text renderer, the frame hand-off and headless pygame drawing."""

import threading

import pygame
import pytest

from termsnake.game import Phase, Snapshot
from termsnake.grid import Direction, Position
from termsnake.render import FrameSlot, board_text, draw_game, draw_game_over, window_size


def snap(snake, food=(0, 0), phase=Phase.ACTIVE, end_reason=None, score=0, width=4, height=3):
    return Snapshot(
        width=width,
        height=height,
        snake=tuple(Position(*p) for p in snake),
        food=None if food is None else Position(*food),
        score=score,
        phase=phase,
        direction=Direction.RIGHT,
        end_reason=end_reason,
    )


class TestBoardText:
    def test_layout(self):
        text = board_text(snap([(2, 1), (1, 1)], food=(0, 0), score=20))
        assert text.splitlines() == [
            "######",
            "#*...#",
            "#.o@.#",
            "#....#",
            "######",
            "Score: 20",
        ]

    def test_off_grid_head_is_not_drawn(self):
        text = board_text(snap([(-1, 1), (0, 1)], phase=Phase.OVER, end_reason="wall", food=(3, 2)))
        lines = text.splitlines()
        assert lines[2] == "#o...#"
        assert lines[-1] == "GAME OVER (wall)"

    def test_head_wins_on_collision_cell(self):
        text = board_text(snap([(1, 1), (2, 1), (1, 1)], phase=Phase.OVER, end_reason="self"))
        assert text.splitlines()[2] == "#.@o.#"

    def test_board_without_food(self):
        text = board_text(snap([(0, 0)], food=None, width=1, height=1, phase=Phase.OVER, end_reason="board_full"))
        assert text.splitlines()[1] == "#@#"


class TestFrameSlot:
    def test_latest_frame_and_version(self):
        slot = FrameSlot()
        assert slot.latest() == (0, None)
        first, second = snap([(0, 0)]), snap([(1, 0)])
        slot.publish(first)
        slot(second)
        assert slot.latest() == (2, second)

    def test_concurrent_publishers_lose_no_versions(self):
        slot = FrameSlot()
        frame = snap([(0, 0)])

        def publish_many():
            for _ in range(500):
                slot.publish(frame)

        threads = [threading.Thread(target=publish_many) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert slot.latest()[0] == 2000


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode(window_size(4, 3, 10))
    yield surface
    pygame.quit()


def test_window_size():
    assert window_size(25, 20, 24) == (27 * 24, 22 * 24 + 28)


def test_draw_game_paints_head_and_food(screen):
    font = pygame.font.SysFont(None, 18)
    frame = snap([(2, 1), (1, 1)], food=(0, 0))
    draw_game(screen, font, frame, 10)
    # cell (x, y) is drawn at ((x + 1) * 10, (y + 1) * 10) inside the border
    head_px = screen.get_at((3 * 10 + 5, 2 * 10 + 5))[:3]
    food_px = screen.get_at((1 * 10 + 5, 1 * 10 + 5))[:3]
    empty_px = screen.get_at((4 * 10 + 5, 3 * 10 + 5))[:3]
    assert head_px != empty_px
    assert food_px != empty_px
    assert head_px != food_px


def test_draw_game_over_dims_the_frame(screen):
    font = pygame.font.SysFont(None, 18)
    frame = snap([(-1, 1), (0, 1)], phase=Phase.OVER, end_reason="wall")
    draw_game(screen, font, frame, 10)
    before = screen.get_at((1, 1))[:3]
    draw_game_over(screen, font, frame)
    after = screen.get_at((1, 1))[:3]
    assert sum(after) < sum(before)
