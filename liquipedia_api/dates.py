"""Date conversion between Liquipedia (YYYY-MM-DD) and API (DD-MM-YYYY) forms."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone
from typing import Callable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

WIKI_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
API_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")
# Filter targets may drop leading zeros: "1-5-2023".
LOOSE_API_DATE_RE = re.compile(r"^\d{1,2}-\d{1,2}-\d{4}$")


def wiki_to_api(value: str) -> str:
    """'2023-05-10' -> '10-05-2023'. Other strings are returned unchanged."""
    if not WIKI_DATE_RE.match(value):
        return value
    return "-".join(reversed(value.split("-")))


def api_to_wiki(value: str) -> str:
    """'10-05-2023' -> '2023-05-10'. Other strings are returned unchanged."""
    if not API_DATE_RE.match(value):
        return value
    return "-".join(reversed(value.split("-")))


def timestamp_to_iso(seconds: int) -> str:
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_api_date(value: str | None) -> date | None:
    """Parse a D-M-YYYY or DD-MM-YYYY string; None if it is not a real calendar date."""
    if not value or not LOOSE_API_DATE_RE.match(value.strip()):
        return None
    try:
        return datetime.strptime(value.strip(), "%d-%m-%Y").date()
    except ValueError:
        return None


def calendar_date(value: str | None) -> date | None:
    """Calendar day of an API date or an ISO-8601 datetime, as written.

    No timezone conversion happens: '2023-05-10T23:30:00Z' is the 10th.
    """
    if not value:
        return None
    parsed = parse_api_date(value)
    if parsed is not None:
        return parsed
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    except ValueError:
        return None


def is_same_day(left: date | datetime, right: date | datetime) -> bool:
    """Compare day, month and year only."""
    return (left.day, left.month, left.year) == (right.day, right.month, right.year)


def filter_by_date(
    records: Iterable[T],
    target: str | None,
    key: Callable[[T], str | None],
) -> list[T]:
    """Keep records whose date falls on ``target`` (DD-MM-YYYY).

    Records without a determinable date are dropped. A target that is not a
    valid DD-MM-YYYY date matches nothing.
    """
    records = list(records)
    if target is None:
        return records

    target_day = parse_api_date(target)
    if target_day is None:
        logger.warning("Ignoring records for malformed date filter %r", target)
        return []

    kept = []
    for record in records:
        day = calendar_date(key(record))
        if day is not None and is_same_day(day, target_day):
            kept.append(record)
    return kept
