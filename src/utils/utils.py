"""
Common utility functions used by various packages
"""

import random


def random_number_between(low: float, high: float) -> float:
    """
    Uniformly distributed float in [low, high)
    """
    return random.random() * (high - low) + low


def clamp(value: float, low: float, high: float) -> float:
    """
    Restrict value to the closed range [low, high]
    """
    return min(high, max(low, value))
