"""
Runtime settings for the FAQ Lambda.

Everything is read from environment variables once per container; defaults
keep local runs and tests working without any AWS resources.
"""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_KNOWLEDGE_BASE_PATH = str(Path(__file__).with_name("knowledge_base.json"))


@dataclass
class Settings:
    """Application settings with local-friendly defaults."""

    environment: str = "dev"

    # Knowledge base source: S3 wins when a bucket is configured.
    knowledge_base_path: str = DEFAULT_KNOWLEDGE_BASE_PATH
    knowledge_base_bucket: Optional[str] = None
    knowledge_base_key: str = "knowledge_base.json"

    # Usage analytics (fire-and-forget, DynamoDB).
    usage_table: Optional[str] = None
    analytics_enabled: bool = False
    usage_ttl_days: int = 30

    log_level: str = "INFO"

    @property
    def usage_persistence_enabled(self) -> bool:
        """Usage items are written only when a table exists and analytics are on."""
        return bool(self.usage_table) and self.analytics_enabled

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            knowledge_base_path=os.environ.get(
                "KNOWLEDGE_BASE_PATH", DEFAULT_KNOWLEDGE_BASE_PATH
            ),
            knowledge_base_bucket=os.environ.get("KNOWLEDGE_BASE_BUCKET") or None,
            knowledge_base_key=os.environ.get("KNOWLEDGE_BASE_KEY", "knowledge_base.json"),
            usage_table=os.environ.get("FAQ_USAGE_TABLE") or None,
            analytics_enabled=os.environ.get("ENABLE_ANALYTICS", "false").lower() == "true",
            usage_ttl_days=int(os.environ.get("USAGE_TTL_DAYS", "30")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
