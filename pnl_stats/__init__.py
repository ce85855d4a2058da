"""
Verified P&L statistics.

Fetches a user's public P&L snapshot history and summarises it by
month, year, weekday and day of month.
"""

__version__ = "0.1.0"
