"""
Environment-specific deployment settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 10
    log_level: str = "INFO"

    # Feature flag: read knowledge_base.json from the bucket instead of the bundled copy.
    # Upload the document before enabling it.
    kb_override_enabled: bool = False

    # Usage analytics
    analytics_enabled: bool = False
    usage_ttl_days: int = 30

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        analytics_enabled = os.environ.get("ENABLE_ANALYTICS", "false").lower() == "true"
        kb_override_enabled = os.environ.get("KB_OVERRIDE_ENABLED", "false").lower() == "true"
        region = os.environ.get("AWS_REGION", "eu-west-2")

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                analytics_enabled=analytics_enabled,
                kb_override_enabled=kb_override_enabled,
                lambda_memory_mb=512,
                usage_ttl_days=90,
            )

        return cls(
            environment=env,
            aws_region=region,
            analytics_enabled=analytics_enabled,
            kb_override_enabled=kb_override_enabled,
        )
