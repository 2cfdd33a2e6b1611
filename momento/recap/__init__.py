"""Recap and trend calculations for Momento."""

from momento.recap.grouping import (
    RecapGrouper,
    current_month,
    month_label,
    parse_month_label,
    sort_labels,
)
from momento.recap.trend import (
    TrendPoint,
    mood_trend,
    moving_average,
    summarize_moods,
)

__all__ = [
    "RecapGrouper",
    "current_month",
    "month_label",
    "parse_month_label",
    "sort_labels",
    "TrendPoint",
    "mood_trend",
    "moving_average",
    "summarize_moods",
]
