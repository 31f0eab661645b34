from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class BaseSource(ABC):
    """Abstract base class for article index sources."""

    @abstractmethod
    def fetch(self) -> Optional[str]:
        """Return the HTML fragment holding the article table, or ``None``."""
