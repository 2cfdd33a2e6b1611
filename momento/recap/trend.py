"""Mood trend calculations for the chart view.

The moving average here is validated against pandas' rolling mean in the
test suite.
"""

import math
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from momento.models import MoodRecord


class TrendPoint(BaseModel):
    """A single point on the mood trend chart."""

    day: date = Field(..., description="Calendar day")
    rating: int = Field(..., description="Rating recorded that day")
    average: float = Field(..., description="Trailing moving average (NaN until warmed up)")

    model_config = {"frozen": True}


def moving_average(values: list[float], period: int) -> list[float]:
    """Calculate a trailing Simple Moving Average.

    Args:
        values: Series of values.
        period: Window length.

    Returns:
        List of averages. First (period-1) values will be NaN.
    """
    if period < 1 or len(values) < period:
        return [float('nan')] * len(values)

    result = [float('nan')] * (period - 1)
    window_sum = sum(values[:period])
    result.append(window_sum / period)

    for i in range(period, len(values)):
        window_sum += values[i] - values[i - period]
        result.append(window_sum / period)

    return result


def mood_trend(records: list[MoodRecord], period: int = 7) -> list[TrendPoint]:
    """Build chart points from mood records.

    Args:
        records: Mood records, in any order.
        period: Moving average window, counted in records.

    Returns:
        Trend points ordered ascending by day.
    """
    ordered = sorted(records, key=lambda r: r.day)
    averages = moving_average([float(r.rating) for r in ordered], period)
    return [
        TrendPoint(day=record.day, rating=record.rating, average=avg)
        for record, avg in zip(ordered, averages)
    ]


def summarize_moods(records: list[MoodRecord]) -> dict:
    """Summarize a set of mood records.

    Args:
        records: Mood records.

    Returns:
        Dictionary with count, mean, min, max and latest rating.
    """
    if not records:
        return {
            "count": 0,
            "mean": float('nan'),
            "min": None,
            "max": None,
            "latest": None,
        }

    ratings = [r.rating for r in records]
    latest: Optional[MoodRecord] = max(records, key=lambda r: r.day)
    return {
        "count": len(ratings),
        "mean": sum(ratings) / len(ratings),
        "min": min(ratings),
        "max": max(ratings),
        "latest": latest.rating,
    }


def is_nan(value: float) -> bool:
    """Check whether a trend value is NaN."""
    return isinstance(value, float) and math.isnan(value)
