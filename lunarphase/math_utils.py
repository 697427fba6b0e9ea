import math


def normalize(value: float) -> float:
    """Fractional part of value, always in [0, 1) even for negative input."""
    return value - math.floor(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending .5 towards positive infinity."""
    return math.floor(value + 0.5)
