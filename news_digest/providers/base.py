from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

from ..models import Article


class BaseProvider(ABC):
    """Abstract base class for article sources."""

    name = "source"

    @abstractmethod
    def fetch(self) -> Iterable[Article]:
        """Yield normalized ``Article`` objects for the configured topic."""


ProviderList = List[BaseProvider]
