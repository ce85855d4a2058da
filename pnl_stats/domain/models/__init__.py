"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums / keys
    Weekday,
    YearMonth,

    # Entities
    CreatorProfile,
    DayAggregate,
    HistoryRecord,
    PnlHistory,
    TwitterProfile,
)
from .summary import (
    DayOfMonthExtremes,
    DayOfMonthTotal,
    GrandSummary,
    MonthBucket,
    SummaryStatistics,
    YearSummary,
)

__all__ = [
    # Enums / keys
    "Weekday",
    "YearMonth",

    # Entities
    "CreatorProfile",
    "DayAggregate",
    "HistoryRecord",
    "PnlHistory",
    "TwitterProfile",

    # Summaries
    "DayOfMonthExtremes",
    "DayOfMonthTotal",
    "GrandSummary",
    "MonthBucket",
    "SummaryStatistics",
    "YearSummary",
]
