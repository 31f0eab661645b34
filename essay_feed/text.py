from __future__ import annotations

from typing import Iterable

# Index entries whose markup breaks the anchor scanner; anything scraped with one
# of these prefixes is a truncated copy of the canonical URL.
KNOWN_BROKEN_URLS = (
    "http://paulgraham.com/fix.html",
    "http://paulgraham.com/foundervisa.html",
)

_XML_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
)


def normalize_url(url: str, known: Iterable[str] = KNOWN_BROKEN_URLS) -> str:
    for canonical in known:
        if url.startswith(canonical):
            return canonical
    return url


def escape_xml(text: str) -> str:
    for char, entity in _XML_ENTITIES:
        text = text.replace(char, entity)
    return text
