from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Optional, Tuple

from .chronology import assign_timestamps
from .config import FeedConfig
from .extractor import extract_articles
from .models import ArticleLink
from .providers.article_index import ArticleIndexSource
from .providers.base import BaseSource
from .serializer import ChannelInfo, render_feed

logger = logging.getLogger(__name__)


class FeedBuilder:
    """Scrapes the article index and renders it as an RSS feed."""

    def __init__(self, config: Optional[FeedConfig] = None, source: Optional[BaseSource] = None) -> None:
        self.config = config or FeedConfig.from_env()
        self.source = source if source is not None else self._build_source()
        self.channel = ChannelInfo(
            title=self.config.title,
            link=self.config.link,
            description=self.config.description,
        )

    def _build_source(self) -> BaseSource:
        return ArticleIndexSource(
            url=self.config.source_url,
            start_marker=self.config.start_marker,
            end_marker=self.config.end_marker,
            timeout=self.config.timeout,
        )

    def articles(self) -> Tuple[ArticleLink, ...]:
        fragment = self.source.fetch()
        return extract_articles(fragment, self.config.base_url)

    def build(self, now: Optional[datetime] = None) -> str:
        """Render the feed, stamping every item relative to ``now``.

        ``now`` defaults to the current UTC time and is read exactly once so all
        items of one document share the same day.
        """
        instant = now or datetime.now(timezone.utc)
        timed = assign_timestamps(self.articles(), instant)
        logger.info("Built feed with %s items", len(timed))
        return render_feed(timed, self.channel)
