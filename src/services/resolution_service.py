"""
FAQ query resolution, cheapest answer first.

Input check, then EXACT_CHECK -> KB_CHECK -> RULE_CHECK -> ESCALATE, strictly linear.
Only the input shape check can fail; every later stage signals "no answer"
by returning None and the pipeline moves on.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from config.chatbot import ESCALATION_CONFIDENCE, ESCALATION_MESSAGE
from models.knowledge import MatchResult
from models.response import ChatbotResponse
from repositories.knowledge_store import KnowledgeStore
from services.exact_match_service import ExactPhraseMatcher
from services.fallback_ranker import FallbackSuggestionRanker
from services.knowledge_matcher import KnowledgeBaseMatcher
from services.normalizer import normalize
from services.related_questions import RelatedQuestionGenerator
from services.rule_engine import PatternRuleEngine, RuleEngine
from utils.logging_config import get_logger
from utils.validators import ensure_query

logger = get_logger(__name__)


class ResolutionStage(str, Enum):
    """Answering stage reported in the trace."""

    EXACT_CHECK = "exact_check"
    KB_CHECK = "kb_check"
    RULE_CHECK = "rule_check"
    ESCALATE = "escalate"


@dataclass(frozen=True)
class ResolutionOutcome:
    """Response plus the stage that produced it, for logging and analytics."""

    response: ChatbotResponse
    stage: ResolutionStage
    latency_ms: int


class QueryResolutionService:
    """Sequences the matchers, the rule engine and the fallback ranker."""

    def __init__(
        self,
        store: KnowledgeStore,
        rule_engine: Optional[RuleEngine] = None,
        exact_matcher: Optional[ExactPhraseMatcher] = None,
        question_generator: Optional[RelatedQuestionGenerator] = None,
    ) -> None:
        self.store = store
        self.exact_matcher = exact_matcher or ExactPhraseMatcher()
        self.kb_matcher = KnowledgeBaseMatcher(store)
        self.rule_engine = rule_engine if rule_engine is not None else PatternRuleEngine()
        self.question_generator = question_generator or RelatedQuestionGenerator()
        self.ranker = FallbackSuggestionRanker(store)

    def resolve(self, query: Any, context: Optional[Sequence[str]] = None) -> ChatbotResponse:
        """Answer a raw query; raises InvalidQueryError for a missing/non-string query."""
        return self.resolve_with_trace(query, context).response

    def resolve_with_trace(
        self, query: Any, context: Optional[Sequence[str]] = None
    ) -> ResolutionOutcome:
        """Run the pipeline and report which stage answered."""
        start = time.perf_counter()
        normalized = normalize(ensure_query(query))

        response = self.exact_matcher.match(normalized)
        stage = ResolutionStage.EXACT_CHECK

        if response is None:
            stage = ResolutionStage.KB_CHECK
            match = self.kb_matcher.match(normalized)
            if match:
                response = self._from_match(match)

        if response is None:
            stage = ResolutionStage.RULE_CHECK
            response = self._evaluate_rules(normalized, context)

        if response is None:
            stage = ResolutionStage.ESCALATE
            response = self._escalate(normalized)

        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "Query resolved",
            extra={
                "stage": stage.value,
                "confidence": response.confidence,
                "duration_ms": latency_ms,
            },
        )
        return ResolutionOutcome(response=response, stage=stage, latency_ms=latency_ms)

    def _from_match(self, match: MatchResult) -> ChatbotResponse:
        return ChatbotResponse(
            message=match.entry.response,
            confidence=match.confidence,
            is_faq=True,
            source=match.entry.source,
            suggested_questions=self.question_generator.generate(match.entry.keywords),
        )

    def _evaluate_rules(
        self, normalized: str, context: Optional[Sequence[str]]
    ) -> Optional[ChatbotResponse]:
        """Rule engine failures count as "no rule matched"."""
        try:
            return self.rule_engine.evaluate(normalized, context)
        except Exception as exc:
            logger.warning(
                "Rule engine failed; escalating instead",
                extra={"error": str(exc)},
            )
            return None

    def _escalate(self, normalized: str) -> ChatbotResponse:
        return ChatbotResponse(
            message=ESCALATION_MESSAGE,
            confidence=ESCALATION_CONFIDENCE,
            needs_full_processing=True,
            suggested_questions=self.ranker.rank(normalized),
        )
