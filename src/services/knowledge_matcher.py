"""
Two-tier knowledge base matcher.

Tier 1 looks for a trigger equal to the query, tier 2 for a trigger contained
in it. Each tier is a complete pass over the store, so an exact match anywhere
outranks a containment match on an earlier entry.
"""

from __future__ import annotations

from typing import Optional

from models.knowledge import MatchResult, MatchTier
from repositories.knowledge_store import KnowledgeStore
from services.normalizer import normalize
from utils.logging_config import get_logger

logger = get_logger(__name__)


class KnowledgeBaseMatcher:
    """Precedence-ordered linear scan; first hit wins, no cross-entry scoring."""

    def __init__(self, store: KnowledgeStore) -> None:
        self.store = store

    def match(self, query: str) -> Optional[MatchResult]:
        """Match an already-normalized query against the store."""
        result = self._exact_pass(query) or self._substring_pass(query)
        if result:
            logger.debug(
                "Knowledge base hit",
                extra={"tier": int(result.tier), "source": result.entry.source},
            )
        return result

    def _exact_pass(self, query: str) -> Optional[MatchResult]:
        for entry in self.store.entries:
            for trigger in entry.triggers:
                if query == normalize(trigger):
                    return MatchResult(entry, MatchTier.EXACT, MatchTier.EXACT.confidence)
        return None

    def _substring_pass(self, query: str) -> Optional[MatchResult]:
        for entry in self.store.entries:
            if any(normalize(trigger) in query for trigger in entry.triggers):
                return MatchResult(
                    entry, MatchTier.SUBSTRING, MatchTier.SUBSTRING.confidence
                )
        return None
