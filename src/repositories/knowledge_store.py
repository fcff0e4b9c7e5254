"""
Knowledge base store.

Entries are loaded once per container (bundled JSON or an S3 override) and are
read-only afterwards, so one store can serve any number of requests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Protocol, Tuple

from pydantic import ValidationError as PydanticValidationError

from config.settings import Settings
from models.knowledge import KnowledgeEntry
from repositories.s3_repo import S3Repository
from utils.error_handling import KnowledgeBaseError
from utils.logging_config import get_logger
from utils.validators import ensure_present

logger = get_logger(__name__)


class KnowledgeStore(Protocol):
    """Ordered, read-only sequence of knowledge entries."""

    @property
    def entries(self) -> Tuple[KnowledgeEntry, ...]:
        ...


class StaticKnowledgeStore:
    """In-memory store; iteration order is precedence order."""

    def __init__(self, entries: Iterable[KnowledgeEntry] = ()) -> None:
        self._entries: Tuple[KnowledgeEntry, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[KnowledgeEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_json_text(cls, text: str, origin: str = "<string>") -> "StaticKnowledgeStore":
        """Parse a ``{"entries": [...]}`` document (a bare list is accepted too)."""
        try:
            document = json.loads(text)
            raw_entries = document["entries"] if isinstance(document, dict) else document
            if not isinstance(raw_entries, list):
                raise KnowledgeBaseError(f"{origin}: 'entries' must be a list")
            entries = [KnowledgeEntry.model_validate(item) for item in raw_entries]
        except (json.JSONDecodeError, KeyError, TypeError, PydanticValidationError) as exc:
            raise KnowledgeBaseError(f"{origin}: invalid knowledge base ({exc})") from exc

        logger.info(
            "Knowledge base loaded", extra={"origin": origin, "entries": len(entries)}
        )
        return cls(entries)

    @classmethod
    def from_json_file(cls, path: str) -> "StaticKnowledgeStore":
        """Load from a local JSON file (the bundled default or an override)."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise KnowledgeBaseError(f"{path}: cannot read knowledge base ({exc})") from exc
        return cls.from_json_text(text, origin=path)

    @classmethod
    def from_s3(
        cls, bucket: str, key: str, repository: S3Repository | None = None
    ) -> "StaticKnowledgeStore":
        """Load the JSON document from S3."""
        ensure_present(bucket, "bucket")
        ensure_present(key, "key")
        repo = repository or S3Repository(bucket)
        try:
            text = repo.read_text(key)
        except Exception as exc:
            raise KnowledgeBaseError(
                f"s3://{bucket}/{key}: cannot read knowledge base ({exc})"
            ) from exc
        return cls.from_json_text(text, origin=f"s3://{bucket}/{key}")


def load_knowledge_store(settings: Settings) -> StaticKnowledgeStore:
    """Pick the configured source: S3 when a bucket is set, the file otherwise."""
    if settings.knowledge_base_bucket:
        return StaticKnowledgeStore.from_s3(
            settings.knowledge_base_bucket, settings.knowledge_base_key
        )
    return StaticKnowledgeStore.from_json_file(settings.knowledge_base_path)
