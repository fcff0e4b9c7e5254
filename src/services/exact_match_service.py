"""Constant-time answers for the highest-frequency intents."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from config.chatbot import EXACT_MATCH_CONFIDENCE, EXACT_MATCH_SUGGESTIONS, EXACT_PHRASES
from models.response import ChatbotResponse


class ExactPhraseMatcher:
    """Dictionary lookup of canned greeting and intent phrases."""

    def __init__(
        self,
        phrases: Mapping[str, str] = EXACT_PHRASES,
        suggestions: Sequence[str] = EXACT_MATCH_SUGGESTIONS,
    ) -> None:
        self.phrases = dict(phrases)
        self.suggestions = list(suggestions)

    def match(self, query: str) -> Optional[ChatbotResponse]:
        """Return the canned answer for an already-normalized query, if any."""
        message = self.phrases.get(query)
        if not message:
            return None
        # These intents carry no keywords, so the suggestions are generic.
        return ChatbotResponse(
            message=message,
            confidence=EXACT_MATCH_CONFIDENCE,
            is_faq=True,
            suggested_questions=list(self.suggestions),
        )
