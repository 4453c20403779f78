# pylint: disable=no-member
"""
Pygame front end of the Ping Pong game: turns mouse/touch input into paddle
positions, feeds the frame clock to the session and draws the result
"""
import pygame
from src.pingpong import constants
from src.pingpong.base_game import BasePingPongGame
from src.pingpong.session import GameSession
from src.models.pingpong import FrameResult, Rect, Viewport


def to_pygame_rect(rect: Rect) -> pygame.Rect:
    """
    Round a float rectangle to the pixel grid for drawing
    """
    return pygame.Rect(
        round(rect.left), round(rect.top), round(rect.width), round(rect.height)
    )


class PingPongGame(BasePingPongGame):
    """
    Ping Pong game played with the mouse or a finger against the computer
    """

    def __init__(
        self,
        headless: bool = False,
        viewport: Viewport = constants.DEFAULT_VIEWPORT,
        fps: int = constants.FPS,
    ):
        self.headless = headless
        self.viewport = viewport
        self.fps = fps
        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode((viewport.width, viewport.height))
            pygame.display.set_caption(constants.SCREEN_CAPTION)
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, constants.GAME_FONT_SIZE)
            self.score_font = pygame.font.Font(None, constants.SCORE_FONT_SIZE)
        else:
            # Off-screen surface, nothing is ever shown
            self.screen = pygame.Surface((viewport.width, viewport.height))

        self.session = GameSession(viewport)
        self.touch_y = 0.0

    def handle_event(self, event) -> bool:
        """
        Apply a pygame event to the game. Returns False if the player asked to quit.
        """
        match (event.type):
            case pygame.QUIT:
                return False
            case pygame.MOUSEMOTION:
                self.session.set_player_position(event.pos[1])
            case pygame.FINGERDOWN | pygame.FINGERMOTION:
                # Touch coordinates are normalized to 0-1
                self.touch_y = event.y * self.viewport.height
                self.session.set_player_position(self.touch_y)
            case pygame.FINGERUP:
                self.touch_y = 0.0
            case pygame.MOUSEBUTTONDOWN:
                if self.session.overlay_visible and self.button_rect().collidepoint(
                    event.pos
                ):
                    self.session.resume()
            case pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if self.session.overlay_visible and event.key in (
                    pygame.K_RETURN,
                    pygame.K_SPACE,
                ):
                    self.session.resume()
        return True

    def update(self, time: float) -> FrameResult:
        """Advance the game to the given frame timestamp in milliseconds."""
        return self.session.tick(time)

    def button_rect(self) -> pygame.Rect:
        """
        Where the start/restart button of the overlay sits
        """
        rect = pygame.Rect(0, 0, constants.BUTTON_WIDTH, constants.BUTTON_HEIGHT)
        rect.center = (
            self.viewport.width // 2,
            self.viewport.height // 2 + constants.BUTTON_HEIGHT,
        )
        return rect

    def render(self):
        """Render the current game state."""
        if self.headless:
            return
        theme = self.session.theme
        foreground = theme.foreground()
        self.screen.fill(theme.background())

        for paddle in (self.session.player_paddle, self.session.computer_paddle):
            pygame.draw.rect(
                self.screen, foreground, to_pygame_rect(paddle.rect(self.viewport))
            )
        pygame.draw.ellipse(
            self.screen,
            foreground,
            to_pygame_rect(self.session.ball.rect(self.viewport)),
        )
        self._render_scores(foreground)

        if self.session.overlay_visible:
            self._render_overlay()

        pygame.display.flip()

    def _render_scores(self, color):
        scores = (self.session.score.player, self.session.score.computer)
        for i, score in enumerate(scores):
            surface = self.score_font.render(str(score), True, color)
            rect = surface.get_rect(
                midtop=((2 * i + 1) * self.viewport.width // 4, 10)
            )
            self.screen.blit(surface, rect)

    def _render_overlay(self):
        shade = pygame.Surface(
            (self.viewport.width, self.viewport.height), pygame.SRCALPHA
        )
        shade.fill((*constants.BLACK, constants.OVERLAY_ALPHA))
        self.screen.blit(shade, (0, 0))

        message = self.font.render(
            self.session.overlay_message, True, constants.WHITE
        )
        self.screen.blit(
            message,
            message.get_rect(
                center=(self.viewport.width // 2, self.viewport.height // 2)
            ),
        )

        button = self.button_rect()
        pygame.draw.rect(self.screen, self.session.theme.foreground(), button)
        label = self.font.render(self.session.button_label, True, constants.BLACK)
        self.screen.blit(label, label.get_rect(center=button.center))

    def close(self):
        """Close the Pygame window."""
        pygame.quit()

    def run(self):
        """Main game loop for human play."""
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break

            self.update(pygame.time.get_ticks())
            self.render()
            self.clock.tick(self.fps)

        self.close()
