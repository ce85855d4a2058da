"""
DOMAIN MODELS — SUMMARY STATISTICS & ROLLUPS

Immutable structures derived from history records.
Empty collections report count=0, total=0 and no average/min/max.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from .entities import DayAggregate, YearMonth

ZERO = Decimal("0")


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Count, sum, min and max over a collection of decimal values.
    """
    count: int = 0
    total: Decimal = ZERO
    minimum: Optional[Decimal] = None
    maximum: Optional[Decimal] = None

    @classmethod
    def of(cls, values: Iterable[Decimal]) -> "SummaryStatistics":
        stats = cls()
        for value in values:
            stats = stats.accept(value)
        return stats

    def accept(self, value: Decimal) -> "SummaryStatistics":
        return SummaryStatistics(
            count=self.count + 1,
            total=self.total + value,
            minimum=value if self.minimum is None else min(self.minimum, value),
            maximum=value if self.maximum is None else max(self.maximum, value),
        )

    def combine(self, other: "SummaryStatistics") -> "SummaryStatistics":
        if other.count == 0:
            return self
        if self.count == 0:
            return other
        return SummaryStatistics(
            count=self.count + other.count,
            total=self.total + other.total,
            minimum=min(self.minimum, other.minimum),
            maximum=max(self.maximum, other.maximum),
        )

    @property
    def average(self) -> Optional[Decimal]:
        if self.count == 0:
            return None
        return self.total / self.count

    @property
    def is_empty(self) -> bool:
        return self.count == 0


@dataclass(frozen=True)
class MonthBucket:
    """
    Day aggregates of one calendar month, ordered by date.
    """
    key: YearMonth
    days: Tuple[DayAggregate, ...]

    @property
    def month(self) -> int:
        return self.key.month

    @property
    def stats(self) -> SummaryStatistics:
        return SummaryStatistics.of(day.profit for day in self.days)

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def profitable_days(self) -> int:
        return sum(1 for day in self.days if day.is_profitable)

    @property
    def loss_days(self) -> int:
        # zero-profit days count as losses
        return self.day_count - self.profitable_days


@dataclass(frozen=True)
class YearSummary:
    """
    Monthly buckets of one year.

    `stats` is taken over the monthly sums, so `stats.average` is the
    average month, not the average day.
    """
    year: int
    months: Tuple[MonthBucket, ...]

    @property
    def stats(self) -> SummaryStatistics:
        return SummaryStatistics.of(bucket.stats.total for bucket in self.months)

    @property
    def day_count(self) -> int:
        return sum(bucket.day_count for bucket in self.months)

    @property
    def profitable_days(self) -> int:
        return sum(bucket.profitable_days for bucket in self.months)

    @property
    def loss_days(self) -> int:
        return sum(bucket.loss_days for bucket in self.months)


@dataclass(frozen=True)
class GrandSummary:
    years: Tuple[YearSummary, ...] = ()

    @property
    def stats(self) -> SummaryStatistics:
        combined = SummaryStatistics()
        for year in self.years:
            combined = combined.combine(year.stats)
        return combined

    @property
    def total_profit(self) -> Decimal:
        return self.stats.total

    @property
    def day_count(self) -> int:
        return sum(year.day_count for year in self.years)

    @property
    def profitable_days(self) -> int:
        return sum(year.profitable_days for year in self.years)

    @property
    def loss_days(self) -> int:
        return sum(year.loss_days for year in self.years)


@dataclass(frozen=True)
class DayOfMonthTotal:
    day: int
    stats: SummaryStatistics


@dataclass(frozen=True)
class DayOfMonthExtremes:
    most_profit: Optional[DayOfMonthTotal] = None
    most_loss: Optional[DayOfMonthTotal] = None
