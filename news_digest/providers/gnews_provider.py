from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

import requests

from ..models import Article
from .base import BaseProvider

logger = logging.getLogger(__name__)

UNKNOWN_SOURCE = "Unknown"


class GNewsProvider(BaseProvider):
    """Fetches topic search results from the GNews API."""

    BASE_URL = "https://gnews.io/api/v4/search"
    name = "GNews"

    def __init__(
        self,
        api_key: Optional[str],
        query: str,
        language: str = "en",
        limit: int = 10,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        self._query = query
        self._language = language
        self._limit = limit
        self._timeout = timeout
        self._session = session

    def fetch(self) -> Iterable[Article]:
        if not self._api_key:
            logger.warning("GNEWS_API_KEY not set, skipping GNews API")
            return []
        payload = self._search()
        if payload is None:
            return []
        articles = payload.get("articles")
        if not isinstance(articles, list):
            logger.warning("No articles found in GNews response")
            return []
        return [_to_article(item) for item in articles if _is_complete(item)]

    def _search(self) -> Optional[Mapping[str, Any]]:
        params = {
            "q": f'"{self._query}"',
            "lang": self._language,
            "max": self._limit,
            "apikey": self._api_key,
        }
        http = self._session or requests
        try:
            response = http.get(self.BASE_URL, params=params, timeout=self._timeout)
        except requests.Timeout:
            logger.warning("GNews API request timed out")
            return None
        except requests.RequestException as exc:
            logger.warning("Failed to fetch from GNews: %s", exc)
            return None
        if not response.ok:
            logger.warning("GNews API error: %s %s", response.status_code, response.reason)
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("GNews API returned invalid JSON: %s", exc)
            return None
        return payload if isinstance(payload, Mapping) else None


def _is_complete(item: Any) -> bool:
    if not isinstance(item, Mapping):
        return False
    return all(isinstance(item.get(key), str) and item.get(key) for key in ("title", "url", "description"))


def _to_article(item: Mapping[str, Any]) -> Article:
    source = item.get("source")
    source_name = source.get("name") if isinstance(source, Mapping) else None
    return Article(
        title=item["title"].strip(),
        url=item["url"],
        source=source_name or UNKNOWN_SOURCE,
        published_at=item.get("publishedAt"),
        content=item["description"].strip(),
    )
