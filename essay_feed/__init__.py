"""Essay Feed package initializer."""

from .config import FeedConfig
from .feed import FeedBuilder
from .models import ArticleLink, TimedArticle

__all__ = ["FeedBuilder", "FeedConfig", "ArticleLink", "TimedArticle"]
