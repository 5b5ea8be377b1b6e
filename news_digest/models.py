from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

NEUTRAL = "neutral"
SENTIMENTS = ("positive", "negative", NEUTRAL)


@dataclass(frozen=True, slots=True)
class Article:
    """Normalized article produced by the collector."""

    title: str
    url: str
    source: str
    published_at: Optional[str]
    content: Optional[str]

    def is_valid(self) -> bool:
        return bool(
            isinstance(self.url, str)
            and self.url
            and self.url.startswith("http")
            and isinstance(self.title, str)
            and self.title
            and isinstance(self.content, str)
            and self.content
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "publishedAt": self.published_at,
            "content": self.content,
        }


@dataclass(frozen=True, slots=True)
class AnalyzedArticle:
    """Article enriched with a summary and a sentiment label."""

    title: str
    url: str
    source: str
    published_at: Optional[str]
    content: Optional[str]
    summary: str
    sentiment: str = NEUTRAL

    @classmethod
    def from_article(cls, article: Article, summary: str, sentiment: str = NEUTRAL) -> "AnalyzedArticle":
        return cls(
            title=article.title,
            url=article.url,
            source=article.source,
            published_at=article.published_at,
            content=article.content,
            summary=summary,
            sentiment=sentiment,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "publishedAt": self.published_at,
            "content": self.content,
            "summary": self.summary,
            "sentiment": self.sentiment,
        }
