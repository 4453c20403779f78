"""
The game session: ties the ball, paddles, score and frame clock together
and runs the Idle -> Playing -> GameOver state machine.
Nothing in here draws or reads input devices; the pygame front end feeds
timestamps and pointer positions in and reads the state back out.
"""

from typing import Optional
from src.pingpong import constants
from src.pingpong.game_object import Ball, Paddle
from src.pingpong.theme import ColorTheme
from src.models.pingpong import FrameResult, GameState, Score, Side, Viewport
from src.logger.logger import logger


class GameSession:
    """
    State of one run of the game
    """

    def __init__(self, viewport: Viewport = constants.DEFAULT_VIEWPORT):
        self.viewport = viewport
        self.theme = ColorTheme()
        self.ball = Ball(on_bounce=self.theme.shift)
        self.player_paddle = Paddle(Side.PLAYER)
        self.computer_paddle = Paddle(Side.COMPUTER)
        self.score = Score()
        self.state = GameState.IDLE
        self.last_time: Optional[float] = None

    @property
    def is_game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def start(self):
        """
        Zero the score, serve a new ball and start playing
        """
        self.score.reset()
        self.ball.reset()
        self.computer_paddle.reset()
        self.last_time = None
        self.state = GameState.PLAYING

    def restart(self):
        """Start over after the game has ended."""
        logger.info("Restarting game")
        self.start()

    def resume(self):
        """
        What the overlay button does: start from the welcome screen,
        restart from the game over screen, nothing while playing.
        """
        match (self.state):
            case GameState.IDLE:
                logger.info("Starting game")
                self.start()
            case GameState.GAME_OVER:
                self.restart()
            case _:
                logger.debug("Ignoring resume request while playing")

    def tick(self, time: float) -> FrameResult:
        """
        Advance the game to the given frame timestamp (milliseconds).
        The first frame of a session only records its timestamp.
        """
        if self.state != GameState.PLAYING:
            logger.debug(f"Skipping frame at {time}, game is {self.state.value}")
            return FrameResult(game_over=self.is_game_over)

        result = FrameResult()
        if self.last_time is not None:
            delta = time - self.last_time
            result.collisions = self.ball.update(
                delta,
                [
                    self.player_paddle.rect(self.viewport),
                    self.computer_paddle.rect(self.viewport),
                ],
                self.viewport,
            )
            self.computer_paddle.update(delta, self.ball.y)

            side = self.scored_side()
            if side:
                self.handle_point(side)
                result.scored = side
                result.game_over = self.is_game_over

        self.last_time = time
        return result

    def scored_side(self) -> Optional[Side]:
        """
        Which side won the point, if the ball has reached the left or right edge
        """
        rect = self.ball.rect(self.viewport)
        if rect.right >= self.viewport.width:
            return Side.PLAYER
        if rect.left <= 0:
            return Side.COMPUTER
        return None

    def handle_point(self, side: Side):
        """
        Award the point and either serve again or end the game
        """
        if side == Side.PLAYER:
            self.score.player += 1
        else:
            self.score.computer += 1
        logger.info(
            f"Point to {side.value}, "
            f"player: {self.score.player}, computer: {self.score.computer}"
        )

        if max(self.score.player, self.score.computer) >= constants.MAX_SCORE:
            self.state = GameState.GAME_OVER
            logger.info(self.overlay_message)
        else:
            self.ball.reset()
            self.computer_paddle.reset()

    def set_player_position(self, client_y: float):
        """
        Move the player's paddle to a raw pointer coordinate in pixels
        """
        if self.is_game_over:
            return
        self.player_paddle.move_to(
            client_y / self.viewport.height * constants.PLAYFIELD_SCALE
        )

    @property
    def overlay_visible(self) -> bool:
        return self.state != GameState.PLAYING

    @property
    def overlay_message(self) -> str:
        if self.is_game_over:
            return constants.GAME_OVER_MESSAGE.format(
                player=self.score.player, computer=self.score.computer
            )
        return constants.WELCOME_MESSAGE

    @property
    def button_label(self) -> str:
        if self.is_game_over:
            return constants.BUTTON_LABEL_RESTART
        return constants.BUTTON_LABEL_START
