from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArticleLink:
    """A single essay scraped from the article index."""

    url: str
    title: str


@dataclass(frozen=True, slots=True)
class TimedArticle:
    """An article paired with its synthetic publication date."""

    url: str
    title: str
    pub_date: str

    @classmethod
    def from_link(cls, link: ArticleLink, pub_date: str) -> "TimedArticle":
        return cls(url=link.url, title=link.title, pub_date=pub_date)
