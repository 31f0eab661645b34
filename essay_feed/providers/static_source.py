from __future__ import annotations

from typing import Optional

from .base import BaseSource


class StaticSource(BaseSource):
    """Returns a fixed fragment for offline development."""

    def __init__(self, fragment: Optional[str]) -> None:
        self._fragment = fragment

    def fetch(self) -> Optional[str]:
        return self._fragment
