"""
Analytics package exports.
"""

from core.analytics.constants import WEEKDAY_LABELS
from core.analytics.service import build_owner_statistics, build_statistics
from core.analytics.types import Achievement, HistoryStatistics, RecentGame

__all__ = [
    "WEEKDAY_LABELS",
    "build_owner_statistics",
    "build_statistics",
    "Achievement",
    "HistoryStatistics",
    "RecentGame",
]
