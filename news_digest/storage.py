from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .models import AnalyzedArticle

logger = logging.getLogger(__name__)


class DigestStore(ABC):
    """Where a finished digest is kept between runs."""

    @abstractmethod
    def persist(self, digest: Sequence[AnalyzedArticle]) -> None:
        """Replace the stored digest with ``digest``."""

    @abstractmethod
    def load(self) -> Optional[List[Dict[str, Any]]]:
        """Return the stored digest, or ``None`` if there is none."""


class FileDigestStore(DigestStore):
    """Keeps the digest as a JSON array on the local filesystem."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def persist(self, digest: Sequence[AnalyzedArticle]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([item.to_dict() for item in digest], indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".digest-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def load(self) -> Optional[List[Dict[str, Any]]]:
        if not self.path.exists():
            return None
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Failed to load digest from %s: %s", self.path, exc)
            return None
