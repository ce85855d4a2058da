"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Weekday(str, Enum):
    """Day of week, in ISO order"""
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, value: date) -> "Weekday":
        return list(cls)[value.weekday()]


class YearMonth(NamedTuple):
    """Composite (year, month) grouping key; tuple ordering is chronological"""
    year: int
    month: int

    @classmethod
    def of(cls, value: date) -> "YearMonth":
        return cls(value.year, value.month)


@dataclass(frozen=True)
class HistoryRecord:
    """
    One P&L snapshot as published by the data source.

    A record without a timestamp or profit is kept as fetched but is not
    usable for statistics.
    """
    short_id: Optional[str]
    timestamp: Optional[datetime]
    total_profit: Optional[Decimal]
    is_no_trade_day: bool = False

    @property
    def is_usable(self) -> bool:
        return self.timestamp is not None and self.total_profit is not None

    @property
    def date(self) -> Optional[date]:
        """Calendar date in the timestamp's own offset"""
        if self.timestamp is None:
            return None
        return self.timestamp.date()


@dataclass(frozen=True)
class DayAggregate:
    """
    Authoritative profit for one calendar date.
    """
    date: date
    profit: Decimal

    @property
    def is_profitable(self) -> bool:
        return self.profit > 0


@dataclass(frozen=True)
class TwitterProfile:
    id: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    profile_image_url: Optional[str] = None


@dataclass(frozen=True)
class CreatorProfile:
    """
    Public profile metadata published next to the history.
    Display only; never used in statistics.
    """
    name: Optional[str] = None
    broker_id: Optional[int] = None
    followers_count: Optional[int] = None
    total_snapshots_count: Optional[int] = None
    live_share_mode: Optional[str] = None
    live_since: Optional[datetime] = None
    twitter: Optional[TwitterProfile] = None


@dataclass(frozen=True)
class PnlHistory:
    """
    Everything the data source returns for one user.
    """
    username: str
    records: Tuple[HistoryRecord, ...] = ()
    profile: Optional[CreatorProfile] = None
