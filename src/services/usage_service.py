"""
FAQ usage analytics.

Fire-and-forget: every failure is logged and swallowed so the response that
was already computed is never affected.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from config.settings import Settings
from repositories.dynamodb_repo import DynamoDbRepository
from services.resolution_service import ResolutionOutcome
from utils.logging_config import get_logger

logger = get_logger(__name__)

EVENT_TYPE = "faq_usage"
LOG_PREVIEW_CHARS = 50
STORED_PREVIEW_CHARS = 100


class UsageLogger:
    """Structured log line always; DynamoDB item when analytics are enabled."""

    def __init__(
        self,
        settings: Settings,
        repository: Optional[DynamoDbRepository] = None,
    ) -> None:
        self.settings = settings
        self._repository = repository

    def _get_repository(self) -> Optional[DynamoDbRepository]:
        if self._repository is None and self.settings.usage_persistence_enabled:
            self._repository = DynamoDbRepository(self.settings.usage_table)
        return self._repository

    def log_usage(self, query: str, outcome: ResolutionOutcome) -> None:
        """Record one answered query; never raises."""
        response = outcome.response
        try:
            logger.info(
                "FAQ usage",
                extra={
                    "query": query,
                    "response_preview": response.message[:LOG_PREVIEW_CHARS],
                    "stage": outcome.stage.value,
                    "confidence": response.confidence,
                },
            )
            if not self.settings.usage_persistence_enabled:
                return

            now = datetime.now(timezone.utc)
            expires = now + timedelta(days=self.settings.usage_ttl_days)
            self._get_repository().put(
                {
                    "event_type": EVENT_TYPE,
                    # Suffix keeps sort keys unique for concurrent requests.
                    "timestamp": f"{now.isoformat()}#{uuid.uuid4().hex[:8]}",
                    "query": query,
                    "response_preview": response.message[:STORED_PREVIEW_CHARS],
                    "stage": outcome.stage.value,
                    # DynamoDB rejects Python floats.
                    "confidence": str(response.confidence),
                    "ttl": int(expires.timestamp()),
                }
            )
        except Exception as exc:
            logger.warning("Failed to record FAQ usage", extra={"error": str(exc)})
