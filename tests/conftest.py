from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

import httpx
import pytest

from pnl_stats.domain.models import HistoryRecord

IST = timezone(timedelta(hours=5, minutes=30))


def ist(year, month, day, hour=15, minute=30) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=IST)


@pytest.fixture
def make_record() -> Callable[..., HistoryRecord]:
    counter = {"n": 0}

    def _make(timestamp: Optional[datetime], profit, short_id: Optional[str] = None, no_trade: bool = False):
        counter["n"] += 1
        return HistoryRecord(
            short_id=short_id or f"snap{counter['n']:04d}",
            timestamp=timestamp,
            total_profit=None if profit is None else Decimal(str(profit)),
            is_no_trade_day=no_trade,
        )

    return _make


@pytest.fixture
def sample_payload() -> dict:
    return {
        "status": True,
        "data": {
            "history": [
                {"short_id": "a1", "created_at": "2024-01-05T10:00:00+05:30", "total_profit": 100, "is_no_tradeday": False},
                {"short_id": "a2", "created_at": "2024-01-05T15:00:00+05:30", "total_profit": 150.25, "is_no_tradeday": False},
                {"short_id": "a3", "created_at": "2024-01-06T09:00:00+05:30", "total_profit": -50, "is_no_tradeday": True},
            ],
            "creator_profile": {
                "broker_id": 3,
                "name": "Asha Trader",
                "followers_count": 1200,
                "total_snapshots_count": 3,
                "live_share_mode": "all",
                "live_since": "2023-06-01T09:15:00+05:30",
                "twitter_profile": {
                    "id": "42",
                    "name": "Asha",
                    "username": "asha_trades",
                    "profile_image_url": "https://example.com/a.png",
                    "word_hash": "xyz",
                },
            },
        },
    }


@pytest.fixture
def mock_http_client():
    """Factory for httpx clients answering through a handler function."""
    clients = []

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build

    for client in clients:
        client.close()
