"""Chatbot request/response wire models."""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ChatbotResponse(BaseModel):
    """
    Answer returned by the FAQ endpoint.

    Field names are snake_case in Python; the JSON aliases match the shape the
    site's chat widget already consumes.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    confidence: float = Field(ge=0, le=1)
    is_faq: Optional[bool] = Field(default=None, alias="isFaq")
    source: Optional[str] = None
    suggested_questions: Optional[List[str]] = Field(
        default=None, alias="suggestedQuestions"
    )
    needs_full_processing: Optional[bool] = Field(
        default=None, alias="needsFullProcessing"
    )

    # Set by the rule engine only.
    matched_rule: Optional[str] = Field(default=None, alias="matchedRule")
    rule_based_response: Optional[bool] = Field(default=None, alias="ruleBasedResponse")
    fact_checked: Optional[bool] = Field(default=None, alias="factChecked")
    context_aware: Optional[bool] = Field(default=None, alias="contextAware")

    def to_payload(self) -> Dict[str, Any]:
        """Wire dict: aliased keys, unset optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Deterministic JSON text for the HTTP body."""
        return json.dumps(self.to_payload())


class FaqRequest(BaseModel):
    """Inbound body of POST /chatbot/faq."""

    query: StrictStr
    context: Optional[List[str]] = None

    @field_validator("context", mode="before")
    @classmethod
    def drop_unusable_context(cls, value: Any) -> Optional[List[str]]:
        """Context is best-effort; anything but a list of strings is ignored."""
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        return None
