from __future__ import annotations

import html
import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import feedparser
import requests

from ..models import Article
from .base import BaseProvider

logger = logging.getLogger(__name__)

FEED_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; RSSReader/1.0)",
    "Accept": "application/rss+xml, application/xml, text/xml, */*",
}
DEFAULT_SOURCE = "RSS Feed"

_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\s+")


class FeedError(Exception):
    """Raised when a feed document cannot be parsed."""


class RSSProvider(BaseProvider):
    """Fetches feeds one after another and keeps entries mentioning the topic keyword."""

    name = "RSS"

    def __init__(
        self,
        feed_urls: Sequence[str],
        keyword: str,
        per_feed_limit: int = 15,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._feed_urls = list(feed_urls)
        self._keyword = keyword
        self._per_feed_limit = per_feed_limit
        self._timeout = timeout
        self._session = session

    def fetch(self) -> Iterable[Article]:
        results: List[Article] = []
        for url in self._feed_urls:
            try:
                feed = self._parse(url)
            except Exception as exc:
                logger.warning("Failed to fetch RSS feed %s: %s", url, exc)
                continue  # Skip failed feeds but continue others
            source = (feed.feed.get("title") or "").strip() or DEFAULT_SOURCE
            for entry in feed.entries[: self._per_feed_limit]:
                if not self._accepts(entry):
                    continue
                results.append(
                    Article(
                        title=entry["title"].strip(),
                        url=entry["link"],
                        source=source,
                        published_at=entry["published"],
                        content=(_snippet(entry) or entry["title"]).strip(),
                    )
                )
        return results

    def _parse(self, url: str) -> Any:
        http = self._session or requests
        response = http.get(url, headers=FEED_HEADERS, timeout=self._timeout)
        response.raise_for_status()
        feed = feedparser.parse(response.content)
        if getattr(feed, "bozo", 0) and not feed.entries:
            exc = getattr(feed, "bozo_exception", None)
            raise FeedError(f"invalid feed document ({exc})" if exc else "invalid feed document")
        return feed

    def _accepts(self, entry: Mapping[str, Any]) -> bool:
        title = entry.get("title")
        if not isinstance(title, str) or not title:
            return False
        # Case-sensitive, title only.
        if self._keyword not in title:
            return False
        return bool(entry.get("link")) and bool(entry.get("published"))


def _snippet(entry: Mapping[str, Any]) -> str:
    summary = entry.get("summary")
    if not isinstance(summary, str):
        return ""
    text = html.unescape(_TAG_RE.sub(" ", summary))
    return _SPACE_RE.sub(" ", text).strip()
