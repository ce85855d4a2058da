from decimal import Decimal

from pnl_stats.domain.models import PnlHistory
from pnl_stats.reports.formatters import format_amount, format_currency, format_pnl_report
from pnl_stats.reports.pnl_report import generate_pnl_report


def test_format_amount_rounds_half_up_to_two_decimals():
    assert format_amount(Decimal("12.345")) == "12.35"
    assert format_amount(Decimal("50.125")) == "50.13"
    assert format_amount(Decimal("-2.345")) == "-2.35"
    assert format_amount(Decimal("-5")) == "-5.00"
    assert format_amount(None) == "n/a"


def test_format_currency_groups_thousands():
    assert format_currency(Decimal("1234567.891")) == "₹1,234,567.89"
    assert format_currency(Decimal("-2500"), symbol="$") == "$-2,500.00"


def test_currency_symbol_comes_from_settings(monkeypatch):
    from pnl_stats import config as config_module
    monkeypatch.setattr(config_module.settings, "CURRENCY_SYMBOL", "Rs.")

    assert format_currency(Decimal("10")) == "Rs.10.00"


def test_empty_report_renders_zero_summary():
    text = format_pnl_report(generate_pnl_report(PnlHistory(username="nobody")))

    assert "Summary for all years: for User: nobody" in text
    assert "Total Profit: ₹0.00, Total Days: 0, Profitable: 0, Loss: 0" in text
    assert "Year:" not in text
    assert "Day of Month with Most Profit" not in text


def test_format_currency_rounds_half_up():
    assert format_currency(Decimal("1000.005")) == "₹1,000.01"
