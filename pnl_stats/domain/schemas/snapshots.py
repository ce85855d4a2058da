"""
Wire schema for the positions snapshots list API.

Validates the JSON body and converts it into domain entities.
"""

from datetime import datetime, tzinfo
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from pnl_stats.domain.models import CreatorProfile, HistoryRecord, PnlHistory, TwitterProfile
from pnl_stats.utils.time import ensure_aware


class TwitterProfileSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    profile_image_url: Optional[str] = None


class CreatorProfileSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: Optional[str] = None
    broker_id: Optional[int] = None
    followers_count: Optional[int] = None
    total_snapshots_count: Optional[int] = None
    live_share_mode: Optional[str] = None
    live_since: Optional[datetime] = None
    twitter_profile: Optional[TwitterProfileSchema] = None


class HistoryItemSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    short_id: Optional[str] = None
    created_at: Optional[datetime] = None
    total_profit: Optional[Decimal] = None
    is_no_tradeday: Optional[bool] = False

    @field_validator("total_profit", mode="before")
    @classmethod
    def _profit_as_decimal(cls, value):
        # go through str() so 0.1 stays 0.1 instead of its binary expansion
        if isinstance(value, float):
            return Decimal(str(value))
        return value


class SnapshotDataSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    history: Optional[List[Optional[HistoryItemSchema]]] = None
    creator_profile: Optional[CreatorProfileSchema] = None


class SnapshotListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: bool = True
    data: Optional[SnapshotDataSchema] = None

    def to_history(self, username: str, naive_tz: Optional[tzinfo] = None) -> PnlHistory:
        data = self.data
        items = [item for item in (data.history or []) if item is not None] if data else []

        records = tuple(
            HistoryRecord(
                short_id=item.short_id,
                timestamp=ensure_aware(item.created_at, naive_tz) if item.created_at else None,
                total_profit=item.total_profit,
                is_no_trade_day=bool(item.is_no_tradeday),
            )
            for item in items
        )

        profile = None
        if data and data.creator_profile:
            cp = data.creator_profile
            twitter = None
            if cp.twitter_profile:
                twitter = TwitterProfile(
                    id=cp.twitter_profile.id,
                    name=cp.twitter_profile.name,
                    username=cp.twitter_profile.username,
                    profile_image_url=cp.twitter_profile.profile_image_url,
                )
            profile = CreatorProfile(
                name=cp.name,
                broker_id=cp.broker_id,
                followers_count=cp.followers_count,
                total_snapshots_count=cp.total_snapshots_count,
                live_share_mode=cp.live_share_mode,
                live_since=ensure_aware(cp.live_since, naive_tz) if cp.live_since else None,
                twitter=twitter,
            )

        return PnlHistory(username=username, records=records, profile=profile)
