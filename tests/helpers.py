from typing import Any, Dict, Iterable, Optional
from unittest.mock import MagicMock

import requests

from news_digest import Article


def make_response(json_data: Any = None, status: int = 200, content: bytes = b"") -> MagicMock:
    response = MagicMock()
    response.ok = 200 <= status < 400
    response.status_code = status
    response.reason = "OK" if response.ok else "Error"
    response.content = content
    response.json.return_value = json_data
    if response.ok:
        response.raise_for_status.return_value = None
    else:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return response


def make_session(routes: Dict[str, Any]) -> MagicMock:
    """Session whose ``get`` answers by URL; exception values are raised."""

    def _get(url, **kwargs):
        result = routes[url]
        if isinstance(result, Exception):
            raise result
        return result

    session = MagicMock()
    session.get.side_effect = _get
    return session


def rss_document(title: str, items: Iterable[Dict[str, Optional[str]]]) -> bytes:
    parts = []
    for item in items:
        fields = []
        if item.get("title") is not None:
            fields.append(f"<title>{item['title']}</title>")
        if item.get("link") is not None:
            fields.append(f"<link>{item['link']}</link>")
        if item.get("pubDate") is not None:
            fields.append(f"<pubDate>{item['pubDate']}</pubDate>")
        if item.get("description") is not None:
            fields.append(f"<description>{item['description']}</description>")
        parts.append("<item>" + "".join(fields) + "</item>")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel>'
        f"<title>{title}</title><link>https://feeds.test/</link><description>test</description>"
        + "".join(parts)
        + "</channel></rss>"
    ).encode("utf-8")


def article(url: str = "https://news.test/a", content: Optional[str] = "Body text", title: str = "Trump speaks") -> Article:
    return Article(
        title=title,
        url=url,
        source="Test Source",
        published_at="2024-01-01T00:00:00Z",
        content=content,
    )
