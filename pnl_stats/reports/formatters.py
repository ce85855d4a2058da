"""Plain-text rendering of a generated P&L report."""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from pnl_stats.config import settings

CENTS = Decimal("0.01")


def _round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Optional[Decimal]) -> str:
    if value is None:
        return "n/a"
    return f"{_round_cents(value):.2f}"


def format_currency(value: Optional[Decimal], symbol: Optional[str] = None) -> str:
    if value is None:
        return "n/a"
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{symbol}{_round_cents(value):,.2f}"


def _format_profile(profile: dict) -> str:
    name = profile.get("name") or "unknown"
    if profile.get("twitter_username"):
        name = f"{name} (@{profile['twitter_username']})"
    parts = [f"Trader: {name}"]
    if profile.get("followers_count") is not None:
        parts.append(f"Followers: {profile['followers_count']}")
    if profile.get("total_snapshots_count") is not None:
        parts.append(f"Snapshots: {profile['total_snapshots_count']}")
    if profile.get("live_since"):
        parts.append(f"Live since: {profile['live_since']}")
    return ", ".join(parts)


def format_pnl_report(report: dict) -> str:
    lines: List[str] = []

    if report.get("profile"):
        lines.append(_format_profile(report["profile"]))
        lines.append("")

    for year in report["years"]:
        lines.append(f"Year: {year['year']}")
        for m in year["months"]:
            lines.append(
                f"  Month: {m['month']:02d}, Total Profit: {format_amount(m['total_profit'])}, "
                f"Daily avg: {format_amount(m['daily_average'])}, Count: {m['day_count']}, "
                f"Profitable: {m['profitable_days']}, Loss: {m['loss_days']}"
            )
        lines.append(
            f"  Year Total: {format_amount(year['total_profit'])}, "
            f"Monthly Avg: {format_amount(year['monthly_average'])}, "
            f"Total Days: {year['day_count']}, Profitable: {year['profitable_days']}, "
            f"Loss: {year['loss_days']}"
        )
        lines.append("")

    summary = report["summary"]
    lines.append(f"Summary for all years: for User: {report['username']}")
    lines.append(
        f"Total Profit: {format_currency(summary['total_profit'])}, "
        f"Total Days: {summary['day_count']}, Profitable: {summary['profitable_days']}, "
        f"Loss: {summary['loss_days']}"
    )

    for item in report["chronological"]:
        marker = " (no trade day)" if item["is_no_trade_day"] else ""
        lines.append(f"Date: {item['timestamp']}, Profit: {format_amount(item['profit'])}{marker}")

    for w in report["weekdays"]:
        lines.append(
            f"Day of Week: {w['weekday']}, Total Profit: {format_amount(w['total_profit'])}, "
            f"Average Profit: {format_amount(w['average_profit'])}, Count: {w['count']}"
        )

    most_profit = report["day_of_month"]["most_profit"]
    most_loss = report["day_of_month"]["most_loss"]
    if most_profit:
        lines.append(
            f"Day of Month with Most Profit: {most_profit['day']}, "
            f"Total Profit: {format_amount(most_profit['total_profit'])}"
        )
    if most_loss:
        lines.append(
            f"Day of Month with Most Loss: {most_loss['day']}, "
            f"Total Loss: {format_amount(most_loss['total_profit'])}"
        )

    return "\n".join(lines)
