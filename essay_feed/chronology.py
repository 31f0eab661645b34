"""Synthetic publication dates for an undated article listing.

Every article of one build shares the calendar day of the generation instant.
The time of day counts down one second per position, so the first (most recent)
entry of a listing of ``count`` articles is stamped ``count - 1`` seconds after
midnight and the last one is stamped at midnight.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, Tuple

from .models import ArticleLink, TimedArticle


def offset_seconds(index: int, count: int) -> int:
    return max(0, count - index - 1)


def format_offset(offset: int) -> str:
    # Hours are not wrapped at 24; listings longer than a day of seconds keep counting.
    minutes, seconds = divmod(offset, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def generation_date(instant: datetime) -> str:
    """Return the ``Ddd, DD Mon YYYY`` day portion of ``instant`` in UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    # format_datetime is locale independent, unlike strftime("%a").
    return format_datetime(instant.astimezone(timezone.utc), usegmt=True)[:16]


def pub_date(instant: datetime, index: int, count: int) -> str:
    return _stamp(generation_date(instant), index, count)


def assign_timestamps(articles: Iterable[ArticleLink], instant: datetime) -> Tuple[TimedArticle, ...]:
    listing = tuple(articles)
    count = len(listing)
    day = generation_date(instant)
    return tuple(
        TimedArticle.from_link(article, _stamp(day, index, count))
        for index, article in enumerate(listing)
    )


def _stamp(day: str, index: int, count: int) -> str:
    return f"{day} {format_offset(offset_seconds(index, count))} GMT"
