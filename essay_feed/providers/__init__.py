from .article_index import ArticleIndexSource, slice_between
from .base import BaseSource
from .static_source import StaticSource

__all__ = ["ArticleIndexSource", "BaseSource", "StaticSource", "slice_between"]
