# pnl_stats/reports/pnl_report.py

"""
REPORTING — VERIFIED P&L REPORT

Assembles every aggregation of a fetched history into one dict.
Read-only; presentation lives in formatters.py.
"""

import logging

from pnl_stats.domain.models import PnlHistory, SummaryStatistics
from pnl_stats.domain.services.aggregation_engine import PnlAggregationEngine

logger = logging.getLogger(__name__)


def _profile_section(history: PnlHistory):
    profile = history.profile
    if profile is None:
        return None
    return {
        "name": profile.name,
        "twitter_username": profile.twitter.username if profile.twitter else None,
        "followers_count": profile.followers_count,
        "total_snapshots_count": profile.total_snapshots_count,
        "live_share_mode": profile.live_share_mode,
        "live_since": profile.live_since.isoformat() if profile.live_since else None,
    }


def _extreme(total):
    if total is None:
        return None
    return {"day": total.day, "total_profit": total.stats.total, "count": total.stats.count}


def generate_pnl_report(history: PnlHistory) -> dict:
    if not isinstance(history, PnlHistory):
        raise ValueError("history must be a fetched PnlHistory")

    try:
        engine = PnlAggregationEngine(history.records)

        # ------------------------------------------------------------
        # Years → months
        # ------------------------------------------------------------
        years = []
        for year in engine.yearly_summaries():
            months = []
            for bucket in year.months:
                stats = bucket.stats
                months.append({
                    "month": bucket.month,
                    "total_profit": stats.total,
                    "daily_average": stats.average,
                    "day_count": bucket.day_count,
                    "profitable_days": bucket.profitable_days,
                    "loss_days": bucket.loss_days,
                })
            years.append({
                "year": year.year,
                "months": months,
                "total_profit": year.stats.total,
                "monthly_average": year.stats.average,
                "day_count": year.day_count,
                "profitable_days": year.profitable_days,
                "loss_days": year.loss_days,
            })

        # ------------------------------------------------------------
        # Grand summary
        # ------------------------------------------------------------
        grand = engine.grand_summary()
        summary = {
            "total_profit": grand.total_profit,
            "day_count": grand.day_count,
            "profitable_days": grand.profitable_days,
            "loss_days": grand.loss_days,
        }

        # ------------------------------------------------------------
        # Raw snapshot views
        # ------------------------------------------------------------
        chronological = [
            {
                "timestamp": record.timestamp.isoformat(),
                "profit": record.total_profit,
                "is_no_trade_day": record.is_no_trade_day,
            }
            for record in engine.chronological()
        ]

        weekdays = [
            {"weekday": weekday.value, **_weekday_stats(stats)}
            for weekday, stats in engine.by_weekday().items()
        ]

        extremes = engine.day_of_month_extremes()

        return {
            "username": history.username,
            "profile": _profile_section(history),
            "years": years,
            "summary": summary,
            "chronological": chronological,
            "weekdays": weekdays,
            "day_of_month": {
                "most_profit": _extreme(extremes.most_profit),
                "most_loss": _extreme(extremes.most_loss),
            },
        }

    except ValueError:
        raise
    except Exception as exc:
        logger.exception("P&L report generation failed")
        raise RuntimeError("Failed to generate P&L report") from exc


def _weekday_stats(stats: SummaryStatistics) -> dict:
    return {
        "total_profit": stats.total,
        "average_profit": stats.average,
        "count": stats.count,
    }
