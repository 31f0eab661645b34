from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .config import DEFAULT_DESCRIPTION, DEFAULT_LINK, DEFAULT_TITLE
from .models import TimedArticle
from .text import escape_xml, normalize_url

CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"


@dataclass(frozen=True, slots=True)
class ChannelInfo:
    """Fixed header of the generated channel."""

    title: str = DEFAULT_TITLE
    link: str = DEFAULT_LINK
    description: str = DEFAULT_DESCRIPTION


def render_feed(articles: Iterable[TimedArticle], channel: ChannelInfo | None = None) -> str:
    channel = channel or ChannelInfo()
    parts: List[str] = [_render_start(channel)]
    parts.extend(_render_item(article) for article in articles)
    parts.append(_render_end())
    return "".join(parts).lstrip()


def _render_start(channel: ChannelInfo) -> str:
    return f"""
<rss version="2.0" xmlns:content="{CONTENT_NAMESPACE}" xmlns:dc="{DC_NAMESPACE}"><channel>
	<title>{escape_xml(channel.title)}</title>
	<link>{escape_xml(channel.link)}</link>
	<description>{escape_xml(channel.description)}</description>"""


def _render_item(article: TimedArticle) -> str:
    link = escape_xml(normalize_url(article.url))
    return f"""
	<item>
		<link>{link}</link>
		<title>{escape_xml(article.title)}</title>
		<pubDate>{article.pub_date}</pubDate>
		<guid>{link}</guid>
	</item>"""


def _render_end() -> str:
    return """
</channel></rss>
"""
