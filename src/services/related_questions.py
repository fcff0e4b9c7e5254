"""Follow-up question generation from an entry's keyword list."""

from __future__ import annotations

from typing import List, Sequence

from config.chatbot import DEFAULT_SUGGESTION_CONFIG, SuggestionConfig


class RelatedQuestionGenerator:
    """Template-cycling generator with a priority-keyword filter."""

    def __init__(self, config: SuggestionConfig = DEFAULT_SUGGESTION_CONFIG) -> None:
        self.config = config

    def generate(self, keywords: Sequence[str]) -> List[str]:
        """
        Build up to ``max_questions`` follow-ups.

        Priority keywords are used when at least one is present, otherwise the
        raw list. Keyword ``i`` gets template ``i mod len(templates)``. Any slot
        left empty is filled from the default question at the same index, so
        defaults never displace generated questions.
        """
        limit = self.config.max_questions
        priority = [k for k in keywords if k in self.config.priority_keywords]
        source = priority or list(keywords)

        templates = self.config.question_templates
        questions: List[str] = []
        for i, keyword in enumerate(source[:limit]):
            template = templates[i % len(templates)]
            questions.append(template.format(keyword=keyword))

        defaults = self.config.default_questions
        for i in range(len(questions), limit):
            if i >= len(defaults):
                break
            questions.append(defaults[i])

        return questions
