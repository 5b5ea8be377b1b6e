from __future__ import annotations

import logging
from typing import List, Optional

from .analyzer import ArticleAnalyzer
from .collector import ArticleCollector
from .config import DigestConfig
from .exceptions import DigestGenerationError
from .models import AnalyzedArticle
from .storage import DigestStore

logger = logging.getLogger(__name__)


class DigestAgent:
    """Collects, analyzes, and publishes the news digest."""

    def __init__(
        self,
        config: Optional[DigestConfig] = None,
        collector: Optional[ArticleCollector] = None,
        analyzer: Optional[ArticleAnalyzer] = None,
    ) -> None:
        self.config = config or DigestConfig.from_env()
        self.collector = collector or ArticleCollector(self.config)
        self.analyzer = analyzer or ArticleAnalyzer(self.config)

    def generate(self) -> List[AnalyzedArticle]:
        try:
            articles = self.collector.collect()
            top = articles[: self.config.digest_size]
            logger.info("Analyzing %d of %d collected articles", len(top), len(articles))
            return self.analyzer.analyze_many(top)
        except Exception as exc:
            raise DigestGenerationError("Digest generation failed") from exc

    def publish(self, store: DigestStore) -> List[AnalyzedArticle]:
        """Generate a digest and hand it to ``store``; nothing is stored if generation fails."""
        digest = self.generate()
        store.persist(digest)
        logger.info("Digest updated: %d articles", len(digest))
        return digest
