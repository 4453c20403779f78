"""
Interface implemented by the front ends that drive a game session
"""

from abc import ABC, abstractmethod
from src.models.pingpong import FrameResult


class BasePingPongGame(ABC):
    """
    Interface implemented by all Ping Pong front ends
    """

    @abstractmethod
    def handle_event(self, event) -> bool:
        """Apply an input event. Returns False when the game should quit."""

    @abstractmethod
    def update(self, time: float) -> FrameResult:
        """Advance the game to the given frame timestamp in milliseconds."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def close(self):
        """Close the game window."""

    @abstractmethod
    def run(self):
        """Main game loop for human play"""
