"""
FAQ handler for POST /chatbot/faq.

Answers common questions without the full AI pipeline. The knowledge base is
loaded on first use and then reused by every warm invocation.
"""

from __future__ import annotations

import json
import uuid
from typing import Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from config.chatbot import SERVICE_ERROR, SERVICE_ERROR_MESSAGE
from config.settings import Settings
from models.response import FaqRequest
from services.normalizer import normalize
from utils.error_handling import AppError, InvalidQueryError, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded so the knowledge base is read once per container.
_resolver: Optional["QueryResolutionService"] = None
_usage_logger: Optional["UsageLogger"] = None


def _get_resolver():
    """Lazy-load QueryResolutionService with the configured knowledge base."""
    global _resolver
    if _resolver is None:
        from repositories.knowledge_store import load_knowledge_store
        from services.resolution_service import QueryResolutionService

        _resolver = QueryResolutionService(load_knowledge_store(Settings.from_environment()))
    return _resolver


def _get_usage_logger():
    """Lazy-load UsageLogger."""
    global _usage_logger
    if _usage_logger is None:
        from services.usage_service import UsageLogger

        _usage_logger = UsageLogger(Settings.from_environment())
    return _usage_logger


def _parse_request(event) -> FaqRequest:
    """Decode the body; anything malformed is a client error."""
    try:
        payload = json.loads(event.get("body") or "{}")
        return FaqRequest.model_validate(payload)
    except (json.JSONDecodeError, PydanticValidationError) as exc:
        raise InvalidQueryError() from exc


def _service_error(correlation_id: str) -> Dict:
    """Generic 500; details stay in the logs, never in the body."""
    logger.exception("FAQ resolution failed", extra={"correlation_id": correlation_id})
    return {
        "statusCode": 500,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"error": SERVICE_ERROR, "message": SERVICE_ERROR_MESSAGE}),
    }


def lambda_handler(event, context) -> Dict:
    """Resolve the query and return the chatbot response JSON."""
    correlation_id = str(uuid.uuid4())
    try:
        request = _parse_request(event)
        outcome = _get_resolver().resolve_with_trace(request.query, request.context)
    except AppError as exc:
        if exc.status_code >= 500:
            return _service_error(correlation_id)
        logger.warning(
            "FAQ request rejected",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return to_response(exc, correlation_id)
    except Exception:
        return _service_error(correlation_id)

    response = outcome.response
    if response.is_faq:
        _get_usage_logger().log_usage(normalize(request.query), outcome)

    logger.info(
        "FAQ answered",
        extra={
            "correlation_id": correlation_id,
            "stage": outcome.stage.value,
            "needs_full_processing": bool(response.needs_full_processing),
        },
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": response.to_json(),
    }
