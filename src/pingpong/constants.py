"""
Constants used by the Ping Pong game
"""

from src.models.pingpong import Viewport

# Window
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 600
SCREEN_CAPTION = "Ping Pong"
FPS = 60
DEFAULT_VIEWPORT = Viewport(width=SCREEN_WIDTH, height=SCREEN_HEIGHT)

# Playfield, in normalized units (0-100 of the viewport)
PLAYFIELD_SCALE = 100
PLAYFIELD_CENTER = 50

# Ball
INITIAL_VELOCITY = 0.015  # playfield units per millisecond
VELOCITY_INCREASE = 0.000005  # added to the velocity every millisecond
DIRECTION_X_MIN = 0.2  # launches with |x| outside (min, max) are resampled
DIRECTION_X_MAX = 0.9
BALL_SIZE_RATIO = 0.025  # of the viewport height

# Paddles
PADDLE_TRACKING_RATE = 0.1  # max computer paddle movement per millisecond
PADDLE_WIDTH_RATIO = 0.01  # of the viewport width
PADDLE_HEIGHT_RATIO = 0.1  # of the viewport height
PADDLE_MARGIN_RATIO = 0.01  # gap between paddle and the side edge

# Rules
MAX_SCORE = 10

# Theme
HUE_STEP = 40
HUE_WRAP = 360
INITIAL_HUE = 200
BACKGROUND_LIGHTNESS = 20
FOREGROUND_LIGHTNESS = 75
SATURATION = 20

# Overlay
WELCOME_MESSAGE = "Welcome to Ping Pong Game!"
GAME_OVER_MESSAGE = "Game Over! Player: {player}, Computer: {computer}"
BUTTON_LABEL_START = "Start"
BUTTON_LABEL_RESTART = "Restart"
GAME_FONT_SIZE = 36
SCORE_FONT_SIZE = 72
BUTTON_WIDTH = 160
BUTTON_HEIGHT = 50

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
OVERLAY_ALPHA = 180

# Command line
ARG_WIDTH = "width"
ARG_HEIGHT = "height"
ARG_FPS = "fps"
ARG_LOG_LEVEL = "log_level"
