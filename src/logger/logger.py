"""
Logging module for the project
"""

import logging

# Set up logging
# Pass --log_level DEBUG to the game for more detailed logging
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("pingpong")


def configure_logging(level: str):
    """
    Change the level of the project logger, e.g. "DEBUG" or "INFO"
    """
    logger.setLevel(level.upper())
