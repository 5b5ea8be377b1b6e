from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .inference import SENTIMENT_MODEL, InferenceClient
from .models import NEUTRAL

LABEL_MAP = {
    "LABEL_0": "negative",
    "LABEL_1": "neutral",
    "LABEL_2": "positive",
}


def score_sentiment(text: Optional[str], client: Optional[InferenceClient] = None, model: str = SENTIMENT_MODEL) -> str:
    if not text or client is None:
        return NEUTRAL
    scores = _scores(client.query(model, text))
    if not scores:
        return NEUTRAL
    top = max(scores, key=lambda item: item["score"])
    return LABEL_MAP.get(top["label"], NEUTRAL)


def _scores(payload: Any) -> List[Mapping[str, Any]]:
    """Extract ``{label, score}`` records from either a flat or a nested response."""
    if not isinstance(payload, list) or not payload:
        return []
    if isinstance(payload[0], list):
        payload = payload[0]
    return [
        item
        for item in payload
        if isinstance(item, Mapping)
        and isinstance(item.get("label"), str)
        and isinstance(item.get("score"), (int, float))
    ]
