import threading
import time
from unittest.mock import MagicMock

import requests

from news_digest.analyzer import NO_CONTENT, ArticleAnalyzer
from news_digest.inference import SENTIMENT_MODEL, SUMMARY_MODEL, InferenceClient

from helpers import article


def _client(summary=None, sentiment=None):
    client = MagicMock(spec=InferenceClient)

    def _query(model, inputs):
        if model == SUMMARY_MODEL:
            return summary
        if model == SENTIMENT_MODEL:
            return sentiment
        return None

    client.query.side_effect = _query
    return client


def test_fallback_summary_for_short_content(config):
    analyzer = ArticleAnalyzer(config, client=_client())

    result = analyzer.analyze(article(content="Hello world"))

    assert result.summary == "Hello world"
    assert result.sentiment == "neutral"


def test_fallback_summary_truncates_long_content(config):
    content = "".join(chr(ord("a") + i % 26) for i in range(6000))
    analyzer = ArticleAnalyzer(config, client=_client())

    result = analyzer.analyze(article(content=content))

    assert result.summary == content[:5000][:200] + "..."
    assert result.content == content


def test_truncated_content_is_sent_for_summary(config):
    client = _client()
    ArticleAnalyzer(config, client=client).analyze(article(content="x" * 6000))

    model, inputs = client.query.call_args_list[0].args
    assert model == SUMMARY_MODEL
    assert len(inputs) == 5000


def test_summary_from_inference_is_used_for_sentiment(config):
    client = _client(
        summary=[{"summary_text": "Short summary."}],
        sentiment=[[{"label": "LABEL_0", "score": 0.8}, {"label": "LABEL_2", "score": 0.2}]],
    )

    result = ArticleAnalyzer(config, client=client).analyze(article(content="Long body " * 50))

    assert result.summary == "Short summary."
    assert result.sentiment == "negative"
    client.query.assert_any_call(SENTIMENT_MODEL, "Short summary.")


def test_sentiment_picks_highest_score(config):
    client = _client(
        sentiment=[
            {"label": "LABEL_2", "score": 0.9},
            {"label": "LABEL_0", "score": 0.05},
            {"label": "LABEL_1", "score": 0.05},
        ]
    )

    result = ArticleAnalyzer(config, client=client).analyze(article(content="Great news"))

    assert result.sentiment == "positive"


def test_unknown_sentiment_label_is_neutral(config):
    client = _client(sentiment=[[{"label": "joy", "score": 0.99}]])

    assert ArticleAnalyzer(config, client=client).analyze(article()).sentiment == "neutral"


def test_missing_content_skips_inference(config):
    client = _client()

    result = ArticleAnalyzer(config, client=client).analyze(article(content=None))

    assert result.summary == NO_CONTENT
    assert result.sentiment == "neutral"
    client.query.assert_not_called()


def test_analyzed_article_keeps_original_fields(config):
    original = article("https://news.test/keep", content="Body")

    result = ArticleAnalyzer(config, client=_client()).analyze(original)

    assert (result.title, result.url, result.source, result.published_at, result.content) == (
        original.title,
        original.url,
        original.source,
        original.published_at,
        original.content,
    )


def test_analyze_many_preserves_input_order(config):
    delays = {"https://news.test/0": 0.2, "https://news.test/1": 0.0, "https://news.test/2": 0.1}
    running = []
    lock = threading.Lock()

    class SlowAnalyzer(ArticleAnalyzer):
        def analyze(self, item):
            with lock:
                running.append(item.url)
            time.sleep(delays[item.url])
            return super().analyze(item)

    batch = [article(url, content=url) for url in delays]
    results = SlowAnalyzer(config, client=_client()).analyze_many(batch)

    assert [r.url for r in results] == list(delays)
    assert sorted(running) == sorted(delays)


def test_analyze_many_empty_batch(config):
    assert ArticleAnalyzer(config, client=_client()).analyze_many([]) == []


def test_without_api_key_no_request_is_made(config, monkeypatch):
    config.hf_api_key = None
    post = MagicMock()
    monkeypatch.setattr("news_digest.inference.requests.post", post)

    result = ArticleAnalyzer(config).analyze(article(content="Hello world"))

    assert result.summary == "Hello world"
    assert result.sentiment == "neutral"
    post.assert_not_called()


def test_connection_error_falls_back_locally(config):
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("refused")
    client = InferenceClient("key", session=session)
    content = "word " * 100

    result = ArticleAnalyzer(config, client=client).analyze(article(content=content))

    assert result.summary == content[:200] + "..."
    assert result.sentiment == "neutral"


def test_non_string_content_is_kept_as_summary(config):
    client = _client()

    result = ArticleAnalyzer(config, client=client).analyze(article(content=12345))

    assert result.summary == "12345"
    assert result.sentiment == "neutral"
    client.query.assert_not_called()
