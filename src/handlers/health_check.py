"""Lightweight health check handler."""

import os
import json
from datetime import datetime, timezone

from utils.logging_config import get_logger

from . import faq

logger = get_logger(__name__)


def lambda_handler(event, context):
    """Return 200 with the loaded knowledge base size, 503 if it cannot load."""
    body = {
        "environment": os.environ.get("ENVIRONMENT", "dev"),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    try:
        body["knowledge_base_entries"] = len(faq._get_resolver().store.entries)
        body["status"] = "ok"
        status = 200
    except Exception:
        logger.exception("Knowledge base unavailable")
        body["status"] = "degraded"
        status = 503
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
