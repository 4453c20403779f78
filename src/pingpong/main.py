"""
Starting point of the Ping Pong game
"""

import argparse
from src.pingpong.ping_pong_game import PingPongGame
from src.pingpong import constants
from src.models.pingpong import Viewport
from src.logger.logger import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse the command line arguments of the game
    """
    parser = argparse.ArgumentParser(description="Play Ping Pong against the computer")

    parser.add_argument(
        f"--{constants.ARG_WIDTH}",
        type=int,
        default=constants.SCREEN_WIDTH,
        help="Window width in pixels",
    )
    parser.add_argument(
        f"--{constants.ARG_HEIGHT}",
        type=int,
        default=constants.SCREEN_HEIGHT,
        help="Window height in pixels",
    )
    parser.add_argument(
        f"--{constants.ARG_FPS}",
        type=int,
        default=constants.FPS,
        help="Frames per second",
    )
    parser.add_argument(
        f"--{constants.ARG_LOG_LEVEL}",
        type=str,
        default="INFO",
        help="Logging level, e.g. DEBUG",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Starting point of Ping Pong game
    """
    args = parse_args(argv)
    configure_logging(args.log_level)
    game = PingPongGame(
        viewport=Viewport(width=args.width, height=args.height), fps=args.fps
    )
    game.run()


if __name__ == "__main__":
    main()
