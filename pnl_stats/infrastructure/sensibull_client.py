"""
Sensibull Verified P&L Client
Single blocking fetch of a user's public positions snapshot history.

Failures are returned as a FetchError value, never raised and never
turned into an empty history.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlsplit

import httpx
from pydantic import ValidationError

from pnl_stats.config import settings
from pnl_stats.domain.models import PnlHistory
from pnl_stats.domain.schemas.snapshots import SnapshotListResponse
from pnl_stats.utils.time import resolve_timezone

logger = logging.getLogger(__name__)

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


class FetchErrorKind(str, Enum):
    """Why the history could not be fetched"""
    TRANSPORT = "TRANSPORT"
    HTTP_STATUS = "HTTP_STATUS"
    SCHEMA = "SCHEMA"


@dataclass(frozen=True)
class FetchError:
    kind: FetchErrorKind
    message: str
    status_code: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass(frozen=True)
class FetchResult:
    """Either a history or an error, never both."""
    history: Optional[PnlHistory] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.history is not None

    @classmethod
    def success(cls, history: PnlHistory) -> "FetchResult":
        return cls(history=history)

    @classmethod
    def failure(cls, kind: FetchErrorKind, message: str, status_code: Optional[int] = None) -> "FetchResult":
        return cls(error=FetchError(kind=kind, message=message, status_code=status_code))


def extract_username(profile_url: str, path_prefix: Optional[str] = None) -> str:
    """
    Username from a public profile URL such as
    https://web.sensibull.com/verified-pnl/<username>/...

    A bare username is returned unchanged.
    """
    prefix = (path_prefix or settings.PROFILE_PATH_PREFIX).strip("/")
    value = (profile_url or "").strip()
    if not value:
        raise ValueError("profile URL must be a non-empty string")

    if not _SCHEME.match(value):
        if "/" in value or "?" in value or "#" in value:
            raise ValueError(f"Not a verified P&L profile URL: {profile_url!r}")
        return value

    segments = [s for s in urlsplit(value).path.split("/") if s]
    if len(segments) < 2 or segments[0] != prefix:
        raise ValueError(f"Not a verified P&L profile URL: {profile_url!r}")
    return segments[1]


class SensibullClient:
    def __init__(
        self,
        api_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.api_base_url = (api_base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = settings.HTTP_TIMEOUT_SECONDS if timeout is None else timeout
        # an injected client is owned by the caller and left open
        self._client = client

    def snapshots_url(self, username: str) -> str:
        return f"{self.api_base_url}/{settings.SNAPSHOTS_ENDPOINT}/{username}"

    def _get(self, url: str) -> httpx.Response:
        headers = {
            "Accept": "application/json",
            "User-Agent": settings.USER_AGENT,
        }
        if self._client is not None:
            return self._client.get(url, headers=headers)
        with httpx.Client(timeout=self.timeout) as client:
            return client.get(url, headers=headers)

    def fetch_history(self, username: str) -> FetchResult:
        url = self.snapshots_url(username)
        logger.info("Fetching P&L history for %s", username)

        try:
            response = self._get(url)
        except httpx.HTTPError as exc:
            logger.error("Request to %s failed: %s", url, exc)
            return FetchResult.failure(FetchErrorKind.TRANSPORT, f"request to {url} failed: {exc}")

        if response.status_code != 200:
            logger.error("HTTP request failed with status code: %s", response.status_code)
            return FetchResult.failure(
                FetchErrorKind.HTTP_STATUS,
                f"{url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = SnapshotListResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Unexpected response body from %s: %s", url, exc)
            return FetchResult.failure(
                FetchErrorKind.SCHEMA,
                f"unexpected response body: {exc}",
                status_code=response.status_code,
            )

        if not payload.status:
            logger.warning("API reported status=false for %s", username)

        history = payload.to_history(username, naive_tz=resolve_timezone(settings.TIMEZONE))
        logger.info("Fetched %d history records for %s", len(history.records), username)
        return FetchResult.success(history)
