"""
Static chatbot configuration.

Canned messages, the exact-phrase dictionary and the suggestion tables live
here so services receive them as plain data and tests can swap in fixtures.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

WELCOME_MESSAGE = (
    "Hi there! I'm Atlas Assistant 2.0, your AI-powered guide to Atlas Technosoft's "
    "solutions and services. I can provide detailed information on our SAP "
    "implementations, automation solutions, and digital transformation services. "
    "I can also search the web for the latest information when needed. "
    "How can I assist you today?"
)

EXACT_PHRASES: Dict[str, str] = {
    "hi": WELCOME_MESSAGE,
    "hello": WELCOME_MESSAGE,
    "hey": WELCOME_MESSAGE,
    "contact": (
        "You can reach us at contact@atlastechnosoft.com or call us at "
        "+1 (555) 123-4567. Would you like me to connect you with a representative?"
    ),
    "help": (
        "I'm here to help! You can ask me about our SAP solutions, automation "
        "services, or any other services Atlas Technosoft offers. "
        "What would you like to know about?"
    ),
    "pricing": (
        "Our pricing varies based on your specific needs and project requirements. "
        "I'd be happy to connect you with our sales team for a customized quote. "
        "Would you like me to arrange that for you?"
    ),
}

EXACT_MATCH_SUGGESTIONS: Tuple[str, ...] = (
    "What SAP solutions do you offer?",
    "Tell me about your automation solutions",
    "How can Atlas help my business?",
)

ESCALATION_MESSAGE = (
    "I'll need to think about this question a bit more deeply. "
    "Let me get you a comprehensive answer."
)

SERVICE_ERROR_MESSAGE = (
    "I'm having trouble processing your question right now. "
    "Please try again or ask something else."
)
SERVICE_ERROR = "An error occurred while processing your request."

EXACT_MATCH_CONFIDENCE = 0.99
EXACT_TRIGGER_CONFIDENCE = 0.96
SUBSTRING_TRIGGER_CONFIDENCE = 0.92
ESCALATION_CONFIDENCE = 0.4

MAX_SUGGESTIONS = 3


@dataclass(frozen=True)
class SuggestionConfig:
    """Inputs for follow-up question generation."""

    priority_keywords: Tuple[str, ...]
    question_templates: Tuple[str, ...]
    default_questions: Tuple[str, ...]
    max_questions: int = MAX_SUGGESTIONS


DEFAULT_SUGGESTION_CONFIG = SuggestionConfig(
    priority_keywords=("sap", "business one", "automation", "rpa", "implementation", "cloud"),
    question_templates=(
        "Tell me more about {keyword}",
        "What are the benefits of {keyword}?",
        "How does {keyword} work?",
    ),
    default_questions=(
        "What services does Atlas Technosoft offer?",
        "How can I contact your team?",
        "What industries do you specialize in?",
    ),
)
