"""Knowledge base models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from config.chatbot import EXACT_TRIGGER_CONFIDENCE, SUBSTRING_TRIGGER_CONFIDENCE


class KnowledgeEntry(BaseModel):
    """One canned answer plus the phrases that select it."""

    model_config = ConfigDict(frozen=True)

    triggers: Tuple[str, ...]
    response: str
    source: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    @field_validator("triggers")
    @classmethod
    def validate_triggers(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        """A blank trigger would be contained in every query, so reject it."""
        if not value:
            raise ValueError("triggers must contain at least one phrase")
        if any(not trigger.strip() for trigger in value):
            raise ValueError("triggers must not be blank")
        return value


class MatchTier(IntEnum):
    """Precedence level of a knowledge base match."""

    EXACT = 1
    SUBSTRING = 2

    @property
    def confidence(self) -> float:
        if self is MatchTier.EXACT:
            return EXACT_TRIGGER_CONFIDENCE
        return SUBSTRING_TRIGGER_CONFIDENCE


@dataclass(frozen=True)
class MatchResult:
    """Entry selected by the knowledge base matcher."""

    entry: KnowledgeEntry
    tier: MatchTier
    confidence: float


@dataclass(frozen=True)
class ScoredEntry:
    """Fallback ranking candidate; score counts keyword/trigger overlap."""

    entry: KnowledgeEntry
    score: int
