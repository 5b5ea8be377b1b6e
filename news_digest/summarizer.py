from __future__ import annotations

from typing import Any, Optional

from .inference import SUMMARY_MODEL, InferenceClient

FALLBACK_LENGTH = 200


def summarize(text: str, client: Optional[InferenceClient] = None, model: str = SUMMARY_MODEL) -> str:
    if client is not None:
        summary = _summary_text(client.query(model, text))
        if summary:
            return summary
    return fallback_summary(text)


def fallback_summary(text: str, length: int = FALLBACK_LENGTH) -> str:
    if len(text) <= length:
        return text
    return text[:length] + "..."


def _summary_text(payload: Any) -> Optional[str]:
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    if not isinstance(first, dict):
        return None
    summary = first.get("summary_text")
    return summary if isinstance(summary, str) and summary else None
