from __future__ import annotations

import logging
from typing import Optional

import requests

from ..config import DEFAULT_MARKER, DEFAULT_SOURCE_URL
from .base import BaseSource

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml"

logger = logging.getLogger(__name__)


class ArticleIndexSource(BaseSource):
    """Fetches the essay index page and cuts out the article table."""

    def __init__(
        self,
        url: str = DEFAULT_SOURCE_URL,
        start_marker: str = DEFAULT_MARKER,
        end_marker: str = DEFAULT_MARKER,
        timeout: float = 10.0,
    ) -> None:
        if not start_marker:
            raise ValueError("ArticleIndexSource requires a start marker")
        self._url = url
        self._start_marker = start_marker
        self._end_marker = end_marker
        self._timeout = timeout

    def fetch(self) -> Optional[str]:
        try:
            response = requests.get(
                self._url,
                headers={"Accept": ACCEPT_HEADER},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Article index fetch failed for %s: %s", self._url, exc)
            return None
        fragment = slice_between(response.text, self._start_marker, self._end_marker)
        if fragment is None:
            logger.warning("Article table marker not found in %s", self._url)
        return fragment


def slice_between(document: str, start: str, end: str) -> Optional[str]:
    """Return the text after the first ``start`` up to the next ``end``.

    Without a closing ``end`` the rest of the document is returned; without
    ``start`` there is nothing to return.
    """
    _, found, tail = document.partition(start)
    if not found:
        return None
    if end:
        body, _, _ = tail.partition(end)
        return body
    return tail
