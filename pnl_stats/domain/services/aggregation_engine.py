"""
P&L AGGREGATION ENGINE
Derives every statistic of the report from raw history records

RESPONSIBILITIES:
- Collapse intraday snapshots into one authoritative value per day
- Roll days up into months, months into years, years into a grand total
- Aggregate raw snapshots by weekday and by day of month
- NO FETCHING, NO FORMATTING

RULES:
- The latest timestamp of a date wins, never the sum of its snapshots
- A day with profit exactly zero is a loss day
- Yearly average is the average of monthly sums
- Weekday and day-of-month views use raw snapshots, not day aggregates
- Empty input yields empty statistics, never an exception
"""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from pnl_stats.domain.models import (
    DayAggregate,
    DayOfMonthExtremes,
    DayOfMonthTotal,
    GrandSummary,
    HistoryRecord,
    MonthBucket,
    SummaryStatistics,
    Weekday,
    YearMonth,
    YearSummary,
)

logger = logging.getLogger(__name__)


def _recency_key(record: HistoryRecord) -> Tuple:
    """
    Ordering used to pick the authoritative snapshot of a day.

    Timestamps are compared as instants; exact ties fall back to the
    snapshot id and then to the profit so the choice never depends on
    input order.
    """
    return (record.timestamp, record.short_id or "", record.total_profit)


class PnlAggregationEngine:
    """
    Aggregation over one user's snapshot history.

    Unusable records (no timestamp or no profit) are dropped once at
    construction; every view below works on the remaining ones.
    """

    def __init__(self, records: Iterable[HistoryRecord]):
        records = list(records)
        self._records: List[HistoryRecord] = [r for r in records if r.is_usable]

        skipped = len(records) - len(self._records)
        if skipped:
            logger.warning("Skipping %d history records without timestamp or profit", skipped)

    @property
    def records(self) -> Tuple[HistoryRecord, ...]:
        return tuple(self._records)

    # ------------------------------------------------------------------
    # DEDUPLICATION BY DAY
    # ------------------------------------------------------------------

    def latest_per_day(self) -> List[DayAggregate]:
        latest: Dict[date, HistoryRecord] = {}
        for record in self._records:
            current = latest.get(record.date)
            if current is None or _recency_key(record) > _recency_key(current):
                latest[record.date] = record

        return [
            DayAggregate(date=day, profit=record.total_profit)
            for day, record in sorted(latest.items())
        ]

    # ------------------------------------------------------------------
    # MONTHLY / YEARLY ROLLUP
    # ------------------------------------------------------------------

    def monthly_buckets(self) -> Dict[YearMonth, MonthBucket]:
        grouped: Dict[YearMonth, List[DayAggregate]] = defaultdict(list)
        for day in self.latest_per_day():
            grouped[YearMonth.of(day.date)].append(day)

        return {
            key: MonthBucket(key=key, days=tuple(grouped[key]))
            for key in sorted(grouped)
        }

    def yearly_summaries(self) -> List[YearSummary]:
        by_year: Dict[int, List[MonthBucket]] = defaultdict(list)
        for key, bucket in self.monthly_buckets().items():
            by_year[key.year].append(bucket)

        return [
            YearSummary(year=year, months=tuple(by_year[year]))
            for year in sorted(by_year)
        ]

    def grand_summary(self) -> GrandSummary:
        return GrandSummary(years=tuple(self.yearly_summaries()))

    # ------------------------------------------------------------------
    # RAW SNAPSHOT VIEWS
    # ------------------------------------------------------------------

    def chronological(self) -> List[HistoryRecord]:
        """All usable snapshots, same-day duplicates included, oldest first."""
        return sorted(self._records, key=lambda r: r.timestamp)

    def by_weekday(self) -> Dict[Weekday, SummaryStatistics]:
        grouped: Dict[Weekday, List[Decimal]] = defaultdict(list)
        for record in self._records:
            grouped[Weekday.of(record.timestamp)].append(record.total_profit)

        return {
            weekday: SummaryStatistics.of(grouped[weekday])
            for weekday in Weekday
            if weekday in grouped
        }

    def by_day_of_month(self) -> Dict[int, SummaryStatistics]:
        grouped: Dict[int, List[Decimal]] = defaultdict(list)
        for record in self._records:
            grouped[record.timestamp.day].append(record.total_profit)

        return {day: SummaryStatistics.of(grouped[day]) for day in sorted(grouped)}

    def day_of_month_extremes(self) -> DayOfMonthExtremes:
        """
        Day of month with the highest and with the lowest summed profit.
        The lowest day number wins ties.
        """
        most_profit: Optional[DayOfMonthTotal] = None
        most_loss: Optional[DayOfMonthTotal] = None

        # ascending day order + strict comparison keeps the lowest day on ties
        for day, stats in self.by_day_of_month().items():
            if most_profit is None or stats.total > most_profit.stats.total:
                most_profit = DayOfMonthTotal(day=day, stats=stats)
            if most_loss is None or stats.total < most_loss.stats.total:
                most_loss = DayOfMonthTotal(day=day, stats=stats)

        return DayOfMonthExtremes(most_profit=most_profit, most_loss=most_loss)
