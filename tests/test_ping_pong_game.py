"""
Pygame Front End Tests

Drives the headless game with synthetic pygame events.

Run with: pytest tests/test_ping_pong_game.py -v
"""

import pygame
import pytest

from src.models.pingpong import FrameResult, GameState, Rect, Viewport
from src.pingpong.ping_pong_game import PingPongGame, to_pygame_rect


@pytest.fixture
def game():
    return PingPongGame(headless=True, viewport=Viewport(width=960, height=600))


def test_headless_game_starts_idle(game):
    assert game.session.state == GameState.IDLE
    assert game.screen.get_size() == (960, 600)


def test_mouse_motion_moves_player_paddle(game):
    assert game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 150)))
    assert game.session.player_paddle.position == 25.0


def test_touch_moves_player_paddle(game):
    game.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.1, y=0.5))
    assert game.session.player_paddle.position == 50.0
    game.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.1, y=0.75))
    assert game.session.player_paddle.position == 75.0
    assert game.touch_y == 450.0


def test_touch_end_clears_touch_position(game):
    game.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.1, y=0.75))
    game.handle_event(pygame.event.Event(pygame.FINGERUP, x=0.1, y=0.75))
    assert game.touch_y == 0.0
    assert game.session.player_paddle.position == 75.0


def test_click_on_button_starts_game(game):
    game.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=game.button_rect().center, button=1)
    )
    assert game.session.state == GameState.PLAYING


def test_click_elsewhere_does_not_start_game(game):
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=1))
    assert game.session.state == GameState.IDLE


@pytest.mark.parametrize("key", [pygame.K_RETURN, pygame.K_SPACE])
def test_keys_start_game(game, key):
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))
    assert game.session.state == GameState.PLAYING


def test_quit_events_stop_the_loop(game):
    assert not game.handle_event(pygame.event.Event(pygame.QUIT))
    assert not game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))


def test_update_feeds_session_clock(game):
    game.session.start()
    assert isinstance(game.update(100), FrameResult)
    assert game.session.last_time == 100


def test_headless_render_is_noop(game):
    game.render()


def test_to_pygame_rect_rounds():
    rect = to_pygame_rect(Rect(left=1.4, top=2.6, width=9.5, height=10.2))
    assert (rect.left, rect.top, rect.width, rect.height) == (1, 3, 10, 10)
