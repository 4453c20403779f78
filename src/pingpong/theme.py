"""
Colour theme of the game. Every bounce rotates the hue of the whole
playfield, which is the only visual feedback the game gives on a hit.
"""

import math
from typing import Optional
import pygame
from src.pingpong import constants
from src.models.pingpong import Color


class ColorTheme:
    """
    Holds the current hue (0-359) and derives the colours drawn with it
    """

    def __init__(self, hue: Optional[float] = constants.INITIAL_HUE):
        self.hue = hue

    def shift(self) -> float:
        """
        Rotate the hue by a fixed step, wrapping at 360.
        A hue that was never set (or is not a number) counts as 0.
        """
        hue = self.hue
        if hue is None or math.isnan(hue):
            hue = 0
        self.hue = (hue + constants.HUE_STEP) % constants.HUE_WRAP
        return self.hue

    def color(self, lightness: float) -> Color:
        """
        Colour with the current hue at the given lightness (0-100)
        """
        hue = self.hue if self.hue is not None and not math.isnan(self.hue) else 0
        color = pygame.Color(0, 0, 0)
        color.hsla = (hue, constants.SATURATION, lightness, 100)
        return (color.r, color.g, color.b)

    def background(self) -> Color:
        return self.color(constants.BACKGROUND_LIGHTNESS)

    def foreground(self) -> Color:
        return self.color(constants.FOREGROUND_LIGHTNESS)
