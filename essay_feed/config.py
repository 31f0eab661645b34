from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SOURCE_URL = "http://paulgraham.com/articles.html"
DEFAULT_BASE_URL = "http://paulgraham.com"
DEFAULT_MARKER = "</table><br><table"
DEFAULT_TITLE = "Paul Graham: Essays"
DEFAULT_LINK = "http://www.paulgraham.com/"
DEFAULT_DESCRIPTION = "Unauthorized scraped RSS feed"


@dataclass(slots=True)
class FeedConfig:
    """Runtime configuration for the essay feed."""

    source_url: str = DEFAULT_SOURCE_URL
    base_url: str = DEFAULT_BASE_URL
    start_marker: str = DEFAULT_MARKER
    end_marker: str = DEFAULT_MARKER
    timeout: float = 10.0
    title: str = DEFAULT_TITLE
    link: str = DEFAULT_LINK
    description: str = DEFAULT_DESCRIPTION

    @classmethod
    def from_env(cls) -> "FeedConfig":
        import os

        return cls(
            source_url=os.getenv("ESSAY_FEED_SOURCE_URL") or DEFAULT_SOURCE_URL,
            base_url=os.getenv("ESSAY_FEED_BASE_URL") or DEFAULT_BASE_URL,
            start_marker=os.getenv("ESSAY_FEED_START_MARKER") or DEFAULT_MARKER,
            end_marker=os.getenv("ESSAY_FEED_END_MARKER") or DEFAULT_MARKER,
            timeout=_parse_timeout(os.getenv("ESSAY_FEED_TIMEOUT"), default=10.0),
            title=os.getenv("ESSAY_FEED_TITLE") or DEFAULT_TITLE,
            link=os.getenv("ESSAY_FEED_LINK") or DEFAULT_LINK,
            description=os.getenv("ESSAY_FEED_DESCRIPTION") or DEFAULT_DESCRIPTION,
        )


def _parse_timeout(value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError("ESSAY_FEED_TIMEOUT must be a number if set") from None
    if parsed <= 0:
        raise ValueError("ESSAY_FEED_TIMEOUT must be positive")
    return parsed
