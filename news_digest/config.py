from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_FEEDS = [
    "https://www.npr.org/rss/rss.php?id=1014",
    "https://feeds.bbci.co.uk/news/politics/rss.xml",
    "https://feeds.feedburner.com/realclearpolitics/qlMj",
]


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(slots=True)
class DigestConfig:
    """Runtime configuration for the digest pipeline."""

    gnews_api_key: Optional[str] = None
    hf_api_key: Optional[str] = None
    feed_urls: List[str] = field(default_factory=lambda: list(DEFAULT_FEEDS))
    topic_query: str = "Donald Trump"
    topic_keyword: str = "Trump"
    language: str = "en"
    search_result_limit: int = 10
    per_feed_limit: int = 15
    request_timeout: float = 15.0
    inference_timeout: float = 10.0
    max_content_length: int = 5000
    digest_size: int = 5
    digest_path: str = "public/digest.json"
    digest_secret: Optional[str] = None
    cache_max_age: int = 3600

    @classmethod
    def from_env(cls) -> "DigestConfig":
        import os

        return cls(
            gnews_api_key=os.getenv("GNEWS_API_KEY") or None,
            hf_api_key=os.getenv("HF_API_KEY") or None,
            feed_urls=_split_csv(os.getenv("NEWS_DIGEST_FEEDS")) or list(DEFAULT_FEEDS),
            topic_query=os.getenv("NEWS_DIGEST_QUERY") or "Donald Trump",
            topic_keyword=os.getenv("NEWS_DIGEST_KEYWORD") or "Trump",
            digest_size=_parse_positive_int("NEWS_DIGEST_SIZE", os.getenv("NEWS_DIGEST_SIZE"), default=5),
            digest_path=os.getenv("NEWS_DIGEST_PATH") or "public/digest.json",
            digest_secret=os.getenv("DIGEST_SECRET") or None,
        )


def _parse_positive_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed
