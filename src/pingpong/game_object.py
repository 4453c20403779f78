"""
Functionality related to the game objects: the ball and the two paddles.
Positions are kept in normalized playfield units (0-100 of the viewport)
and only turned into pixel rectangles when collisions have to be checked
or the objects drawn.
"""

import math
from typing import Callable, List, Optional
from abc import ABC, abstractmethod
from src.pingpong import constants
from src.pingpong.collision import overlaps
from src.models.pingpong import Collision, Direction, Rect, Side, Viewport
from src.utils.utils import clamp, random_number_between
from src.logger.logger import logger


def _check_delta(delta: float):
    if delta < 0:
        raise ValueError(f"Frame delta must not be negative: {delta}")


class GameObject(ABC):
    """
    Abstract class with methods to be implemented by various game objects.
    """

    @abstractmethod
    def reset(self):
        """
        Put the game object back at its starting position
        """

    @abstractmethod
    def rect(self, viewport: Viewport) -> Rect:
        """
        Bounding rectangle of the game object in pixels
        """


class Ball(GameObject):
    """
    Represents the ball. It travels along a unit direction vector with a
    scalar velocity that keeps growing for as long as the rally lasts.
    While the ball is drawn as a circle, collisions use its bounding square.
    """

    def __init__(self, on_bounce: Optional[Callable[[], object]] = None):
        self.on_bounce = on_bounce
        self.x = float(constants.PLAYFIELD_CENTER)
        self.y = float(constants.PLAYFIELD_CENTER)
        self.direction = Direction(x=0, y=0)
        self.velocity = constants.INITIAL_VELOCITY
        self.reset()

    def reset(self):
        """
        Serve again from the center with a random heading. Headings that are
        too flat or too steep are drawn again.
        """
        self.x = float(constants.PLAYFIELD_CENTER)
        self.y = float(constants.PLAYFIELD_CENTER)
        self.direction = Direction(x=0, y=0)
        while not (
            constants.DIRECTION_X_MIN
            < abs(self.direction.x)
            < constants.DIRECTION_X_MAX
        ):
            heading = random_number_between(0, 2 * math.pi)
            self.direction = Direction(x=math.cos(heading), y=math.sin(heading))
        self.velocity = constants.INITIAL_VELOCITY
        logger.debug(
            f"Ball served with direction ({self.direction.x:.3f}, {self.direction.y:.3f})"
        )

    def rect(self, viewport: Viewport) -> Rect:
        size = viewport.height * constants.BALL_SIZE_RATIO
        return Rect.centered(
            self.x / constants.PLAYFIELD_SCALE * viewport.width,
            self.y / constants.PLAYFIELD_SCALE * viewport.height,
            size,
            size,
        )

    def update(
        self, delta: float, paddle_rects: List[Rect], viewport: Viewport
    ) -> List[Collision]:
        """
        Moves the ball by delta milliseconds, speeds it up and reflects it off
        the top/bottom walls and the paddles. Collisions are checked after the
        move, so the ball may sit inside a paddle for one frame.
        Returns the collisions that happened, wall before paddle.
        """
        _check_delta(delta)
        self.x += self.direction.x * self.velocity * delta
        self.y += self.direction.y * self.velocity * delta
        self.velocity += constants.VELOCITY_INCREASE * delta

        collisions = []
        rect = self.rect(viewport)

        if rect.bottom >= viewport.height or rect.top <= 0:
            self.direction.y *= -1
            collisions.append(Collision.WALL)
            self._bounce()

        if any(overlaps(paddle_rect, rect) for paddle_rect in paddle_rects):
            self.direction.x *= -1
            collisions.append(Collision.PADDLE)
            self._bounce()

        return collisions

    def _bounce(self):
        if self.on_bounce:
            self.on_bounce()


class Paddle(GameObject):
    """
    Represents a paddle that moves vertically along its side of the screen.
    The player's paddle is placed directly from input, the computer's paddle
    chases the ball at a limited speed.
    """

    def __init__(self, side: Side):
        if not isinstance(side, Side):
            raise ValueError(f"Invalid paddle side: {side}")
        self.side = side
        self.position = float(constants.PLAYFIELD_CENTER)

    def reset(self):
        """
        Puts the paddle back in the vertical center
        """
        self.position = float(constants.PLAYFIELD_CENTER)

    def move_to(self, position: float):
        """
        Places the paddle at the given position without any smoothing
        """
        self.position = position

    def update(self, delta: float, ball_y: float):
        """
        Moves the paddle towards the ball, by at most
        PADDLE_TRACKING_RATE * delta units
        """
        _check_delta(delta)
        max_step = constants.PADDLE_TRACKING_RATE * delta
        diff = ball_y - self.position
        self.position += clamp(diff, -max_step, max_step)

    def rect(self, viewport: Viewport) -> Rect:
        width = viewport.width * constants.PADDLE_WIDTH_RATIO
        height = viewport.height * constants.PADDLE_HEIGHT_RATIO
        margin = viewport.width * constants.PADDLE_MARGIN_RATIO
        if self.side == Side.PLAYER:
            left = margin
        else:
            left = viewport.width - margin - width
        return Rect(
            left=left,
            top=self.position / constants.PLAYFIELD_SCALE * viewport.height
            - height / 2,
            width=width,
            height=height,
        )
