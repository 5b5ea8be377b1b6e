from __future__ import annotations

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

SUMMARY_MODEL = "facebook/bart-large-cnn"
SENTIMENT_MODEL = "cardiffnlp/twitter-roberta-base-sentiment"


class InferenceClient:
    """Best-effort client for the Hugging Face inference API.

    Every call returns the decoded JSON payload, or ``None`` when the client is
    not configured, the input is unusable, or the request fails in any way.
    Calls are never retried.
    """

    BASE_URL = "https://api-inference.huggingface.co/models"

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 10.0,
        max_input_length: int = 5000,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._max_input_length = max_input_length
        self._session = session

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def query(self, model: str, inputs: Any) -> Optional[Any]:
        if not self._api_key:
            return None
        if not inputs or not isinstance(inputs, str) or len(inputs) > self._max_input_length:
            return None
        http = self._session or requests
        try:
            response = http.post(
                f"{self.BASE_URL}/{model}",
                headers={"Authorization": f"Bearer {self._api_key}"},
                json={"inputs": inputs},
                timeout=self._timeout,
            )
        except requests.Timeout:
            logger.warning("HF API request timed out for model: %s", model)
            return None
        except requests.RequestException as exc:
            logger.warning("HF API request failed for model %s: %s", model, exc)
            return None
        if not response.ok:
            logger.warning("HF API returned %s for model %s", response.status_code, model)
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning("HF API returned invalid JSON for model %s", model)
            return None
