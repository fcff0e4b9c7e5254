"""Pydantic models for the FAQ resolution pipeline."""

from models.knowledge import (  # noqa: F401
    KnowledgeEntry,
    MatchResult,
    MatchTier,
    ScoredEntry,
)
from models.response import ChatbotResponse, FaqRequest  # noqa: F401
