from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; ATS percentages round .5 upward.
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def to_percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(clamp(round_half_up(part / total * 100), 0, 100))
