"""Scanner for the anchor tags in the hand-written essay index.

The index markup is fixed and trusted, so the scanner only looks for the literal
delimiters ``<a href="``, ``">`` and ``</a>`` instead of parsing HTML.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple
from urllib.parse import urljoin

from .config import DEFAULT_BASE_URL
from .models import ArticleLink

ANCHOR_OPEN = '<a href="'
HREF_CLOSE = '">'
ANCHOR_CLOSE = "</a>"
LINE_BREAKS = ("\n", "\r", "\u2028", "\u2029")

logger = logging.getLogger(__name__)


def extract_articles(fragment: Optional[str], base_url: str = DEFAULT_BASE_URL) -> Tuple[ArticleLink, ...]:
    """Return the articles linked from ``fragment`` in document order."""
    if not fragment:
        return ()
    articles: List[ArticleLink] = []
    for anchor in _scan_anchors(fragment):
        article = _parse_anchor(anchor, base_url)
        if article is None:
            logger.debug("Dropping malformed anchor: %r", anchor)
            continue
        articles.append(article)
    return tuple(articles)


def _scan_anchors(fragment: str) -> Iterator[str]:
    pos = 0
    while True:
        start = fragment.find(ANCHOR_OPEN, pos)
        if start < 0:
            return
        close = fragment.find(ANCHOR_CLOSE, start + len(ANCHOR_OPEN))
        if close < 0:
            return
        # An opener without its own closing tag belongs to no anchor.
        inner = fragment.rfind(ANCHOR_OPEN, start + 1, close)
        if inner >= 0:
            start = inner
        end = close + len(ANCHOR_CLOSE)
        pos = end
        anchor = fragment[start:end]
        if any(brk in anchor for brk in LINE_BREAKS):
            logger.debug("Skipping anchor split across lines: %r", anchor)
            continue
        yield anchor


def _parse_anchor(anchor: str, base_url: str) -> Optional[ArticleLink]:
    url_end = anchor.find(HREF_CLOSE, len(ANCHOR_OPEN))
    title_end = anchor.find(ANCHOR_CLOSE)
    if url_end < 0 or title_end < 0 or url_end > title_end:
        return None
    href = anchor[len(ANCHOR_OPEN):url_end]
    url = _resolve(href, base_url)
    if not url:
        return None
    title = anchor[url_end + len(HREF_CLOSE):title_end]
    if not title:
        return None
    return ArticleLink(url=url, title=title)


def _resolve(href: str, base_url: str) -> Optional[str]:
    if not href.strip():
        return None
    try:
        resolved = urljoin(base_url, href.strip())
    except ValueError:
        return None
    return resolved.strip() or None
