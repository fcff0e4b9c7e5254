"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class InvalidQueryError(AppError):
    """Raised when the FAQ query is missing or not a string."""

    def __init__(self, message: str = "Invalid request. Query must be a string."):
        super().__init__(message, status_code=400)


class KnowledgeBaseError(AppError):
    """Raised when the knowledge base document cannot be loaded or parsed."""

    def __init__(self, message: str = "Knowledge base could not be loaded"):
        super().__init__(message, status_code=500)


def to_response(error: AppError, correlation_id: Optional[str] = None) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    body: Dict[str, Any] = {"error": str(error)}
    if correlation_id:
        body["correlation_id"] = correlation_id
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
