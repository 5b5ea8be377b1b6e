from __future__ import annotations

import concurrent.futures as _fut
from typing import Iterable, List, Optional

from .config import DigestConfig
from .inference import InferenceClient
from .models import NEUTRAL, AnalyzedArticle, Article
from .sentiment import score_sentiment
from .summarizer import summarize

NO_CONTENT = "No content available"


class ArticleAnalyzer:
    """Summarizes articles and labels their sentiment, falling back locally on any failure."""

    def __init__(self, config: Optional[DigestConfig] = None, client: Optional[InferenceClient] = None) -> None:
        self.config = config or DigestConfig.from_env()
        self.client = client or InferenceClient(
            self.config.hf_api_key,
            timeout=self.config.inference_timeout,
            max_input_length=self.config.max_content_length,
        )

    def analyze(self, article: Article) -> AnalyzedArticle:
        content = article.content
        if not content or not isinstance(content, str):
            summary = str(content) if content else NO_CONTENT
            return AnalyzedArticle.from_article(article, summary=summary, sentiment=NEUTRAL)

        text = content[: self.config.max_content_length]
        summary = summarize(text, self.client)
        # Classify the summary rather than the full body.
        sentiment = score_sentiment(summary, self.client)
        return AnalyzedArticle.from_article(article, summary=summary, sentiment=sentiment)

    def analyze_many(self, articles: Iterable[Article]) -> List[AnalyzedArticle]:
        """Analyze each article in its own worker; results keep the input order."""
        batch = list(articles)
        if not batch:
            return []
        with _fut.ThreadPoolExecutor(max_workers=len(batch)) as ex:
            futures = [ex.submit(self.analyze, article) for article in batch]
            return [fu.result() for fu in futures]
