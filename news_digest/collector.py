from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import requests

from .config import DigestConfig
from .models import Article
from .providers.base import BaseProvider, ProviderList
from .providers.gnews_provider import GNewsProvider
from .providers.rss_provider import RSSProvider

logger = logging.getLogger(__name__)


class ArticleCollector:
    """Merges articles from every provider into one validated, URL-unique list."""

    def __init__(
        self,
        config: Optional[DigestConfig] = None,
        providers: Optional[Iterable[BaseProvider]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or DigestConfig.from_env()
        if providers is not None:
            self.providers: ProviderList = list(providers)
        else:
            self.providers = self._build_providers(session)

    def _build_providers(self, session: Optional[requests.Session]) -> ProviderList:
        return [
            GNewsProvider(
                self.config.gnews_api_key,
                query=self.config.topic_query,
                language=self.config.language,
                limit=self.config.search_result_limit,
                timeout=self.config.request_timeout,
                session=session,
            ),
            RSSProvider(
                self.config.feed_urls,
                keyword=self.config.topic_keyword,
                per_feed_limit=self.config.per_feed_limit,
                timeout=self.config.request_timeout,
                session=session,
            ),
        ]

    def collect(self) -> List[Article]:
        articles: List[Article] = []
        for provider in self.providers:
            try:
                fetched = list(provider.fetch())
            except Exception:
                logger.exception("Provider %s failed, skipping", provider.name)
                continue
            logger.info("Provider %s returned %d articles", provider.name, len(fetched))
            articles.extend(fetched)
        return deduplicate(articles)


def deduplicate(articles: Iterable[Article]) -> List[Article]:
    """Drop invalid articles and repeated URLs, keeping the first occurrence in order."""
    seen_urls: set[str] = set()
    unique: List[Article] = []
    for article in articles:
        if not article.is_valid() or article.url in seen_urls:
            continue
        seen_urls.add(article.url)
        unique.append(article)
    return unique
