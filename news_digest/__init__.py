"""News digest package initializer."""

from .agent import DigestAgent
from .analyzer import ArticleAnalyzer
from .collector import ArticleCollector
from .config import DigestConfig
from .models import AnalyzedArticle, Article
from .storage import DigestStore, FileDigestStore

__all__ = [
    "Article",
    "AnalyzedArticle",
    "ArticleAnalyzer",
    "ArticleCollector",
    "DigestAgent",
    "DigestConfig",
    "DigestStore",
    "FileDigestStore",
]
