"""
Shared fixtures. pygame is pointed at the dummy video driver so that no
window is ever opened while testing.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from src.models.pingpong import Viewport
from src.pingpong.session import GameSession


@pytest.fixture
def viewport():
    """Square viewport so pixel and playfield coordinates are easy to relate."""
    return Viewport(width=1000, height=1000)


@pytest.fixture
def session(viewport):
    return GameSession(viewport)


@pytest.fixture
def playing_session(session):
    session.start()
    return session
