"""Number rounding and display helpers.

Pure functions with no external dependencies. Rounding is half up, so
scores and percentages match what the assessment front end shows.
"""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to `digits` decimals with ties going up (2.5 -> 3, 0.85 -> 0.9)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def format_number(value: int | float) -> str:
    """Display a bound without a trailing .0 when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
