"""
Suggested questions for queries nothing could answer.

Every knowledge base entry is scored against the query's significant words:
two points per keyword equal to a word, one point per (trigger, word) pair
where the trigger contains the word. Overlapping triggers on one entry are
not deduplicated, so an entry with many similar triggers can outscore others.
"""

from __future__ import annotations

from typing import List

from config.chatbot import MAX_SUGGESTIONS
from models.knowledge import KnowledgeEntry, ScoredEntry
from repositories.knowledge_store import KnowledgeStore
from services.normalizer import significant_words

KEYWORD_POINTS = 2
TRIGGER_POINTS = 1


class FallbackSuggestionRanker:
    """Keyword-overlap ranking over the whole store."""

    def __init__(self, store: KnowledgeStore, limit: int = MAX_SUGGESTIONS) -> None:
        self.store = store
        self.limit = limit

    def score(self, query: str) -> List[ScoredEntry]:
        """Entries with a positive score, best first; ties keep store order."""
        words = significant_words(query)
        if not words:
            return []

        scored = []
        for entry in self.store.entries:
            points = self._score_entry(entry, words)
            if points > 0:
                scored.append(ScoredEntry(entry, points))
        # sorted() is stable with reverse=True, which keeps store order on ties.
        return sorted(scored, key=lambda item: item.score, reverse=True)

    def rank(self, query: str) -> List[str]:
        """First trigger of each of the top-scoring entries."""
        return [item.entry.triggers[0] for item in self.score(query)[: self.limit]]

    @staticmethod
    def _score_entry(entry: KnowledgeEntry, words: List[str]) -> int:
        word_set = set(words)
        points = sum(
            KEYWORD_POINTS for keyword in entry.keywords if keyword.lower() in word_set
        )
        for trigger in entry.triggers:
            lowered = trigger.lower()
            points += sum(TRIGGER_POINTS for word in words if word in lowered)
        return points
