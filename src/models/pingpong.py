# pylint: disable=missing-class-docstring
"""
Models related to the Ping Pong game
"""
from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, NonNegativeInt, PositiveInt


class Direction(BaseModel):

    x: float
    y: float


class Rect(BaseModel):
    """
    Axis-aligned rectangle in pixels. Unlike pygame.Rect, the coordinates
    are floats so sub-pixel movement is not truncated away.
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def centery(self) -> float:
        return self.top + self.height / 2

    @staticmethod
    def centered(centerx: float, centery: float, width: float, height: float) -> "Rect":
        """
        Create a rectangle around the given center
        """
        return Rect(
            left=centerx - width / 2,
            top=centery - height / 2,
            width=width,
            height=height,
        )


class Viewport(BaseModel):

    width: PositiveInt
    height: PositiveInt


class Score(BaseModel):

    player: NonNegativeInt = 0
    computer: NonNegativeInt = 0

    def reset(self):
        self.player = 0
        self.computer = 0


class GameState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Side(Enum):
    PLAYER = "player"
    COMPUTER = "computer"


class Collision(Enum):
    WALL = "wall"
    PADDLE = "paddle"


class FrameResult(BaseModel):
    """
    What a single tick of the game loop produced
    """

    collisions: List[Collision] = []
    scored: Optional[Side] = None
    game_over: bool = False


Color = Tuple[int, int, int]
