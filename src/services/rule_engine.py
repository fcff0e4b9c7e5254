"""
Rule-based answers for structured questions.

The resolution pipeline only depends on the ``RuleEngine`` protocol. The
default implementation scans regex rules in declaration order; a rule's
priority becomes the response confidence but does not affect scan order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Protocol, Sequence, Tuple

from models.response import ChatbotResponse
from services.normalizer import normalize


def _mentions(entities: Sequence[str], markers: Sequence[str]) -> bool:
    return any(marker in entity for entity in entities for marker in markers)


class RuleEngine(Protocol):
    """Returns a complete response or None; must not raise for normal input."""

    def evaluate(
        self, normalized_query: str, context: Optional[Sequence[str]] = None
    ) -> Optional[ChatbotResponse]:
        ...


@dataclass(frozen=True)
class ResponseVariant:
    """Alternative text chosen when an extracted entity contains a marker."""

    markers: Tuple[str, ...]
    text: str


@dataclass(frozen=True)
class Rule:
    """One pattern rule; ``variant_mode`` is "replace" or "append"."""

    id: str
    category: str
    patterns: Tuple[Pattern[str], ...]
    response: str
    priority: int
    source: Optional[str] = None
    requires_entities: bool = False
    variants: Tuple[ResponseVariant, ...] = ()
    variant_mode: str = "replace"
    suffix: str = ""

    def matches(self, query: str) -> bool:
        return any(pattern.search(query) for pattern in self.patterns)

    def render(self, entities: Sequence[str]) -> str:
        chosen = next(
            (
                variant
                for variant in self.variants
                if _mentions(entities, variant.markers)
            ),
            None,
        )
        if chosen and self.variant_mode == "replace":
            return chosen.text
        extra = chosen.text if chosen else ""
        return f"{self.response}{extra}{self.suffix}"


@dataclass(frozen=True)
class EntityQuestions:
    """Follow-ups used instead of the category default when a marker is present."""

    markers: Tuple[str, ...]
    questions: Tuple[str, ...]


@dataclass(frozen=True)
class FollowUps:
    """Follow-up questions for one rule category."""

    default: Tuple[str, ...]
    by_entity: Tuple[EntityQuestions, ...] = ()

    def pick(self, entities: Sequence[str]) -> List[str]:
        for option in self.by_entity:
            if _mentions(entities, option.markers):
                return list(option.questions)
        return list(self.default)


def _compile(*patterns: str) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


PRODUCT_PATTERNS = _compile(
    r"SAP\s+Business\s+One",
    r"S/4HANA",
    r"UiPath",
    r"HANA",
    r"ByDesign",
    r"Business\s+ByDesign",
    r"SAP\s+B1",
    r"Joule",
)
YEAR_PATTERN = re.compile(r"(20\d\d)")
TECH_PATTERNS = _compile(
    r"agentic",
    r"automation",
    r"RPA",
    r"Autopilot",
    r"cloud",
    r"on-premise",
    r"\bAI\b",
    r"machine learning",
    r"document understanding",
    r"process mining",
)
PROFILE_PATTERNS = _compile(
    r"\bGDPR\b",
    r"\bHIPAA\b",
    r"\bsmall\b",
    r"\bSME\b",
    r"\benterprise\b",
    r"\blarge\b",
)


def extract_entities(query: str) -> List[str]:
    """Products, years, technologies and business-profile terms in the query."""
    entities: List[str] = []

    def add(value: str) -> None:
        if value not in entities:
            entities.append(value)

    for pattern in PRODUCT_PATTERNS:
        match = pattern.search(query)
        if match:
            add(match.group(0).lower())
    for year in YEAR_PATTERN.findall(query):
        add(year)
    for pattern in TECH_PATTERNS + PROFILE_PATTERNS:
        match = pattern.search(query)
        if match:
            add(match.group(0).lower())
    return entities


DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule(
        id="contact-info",
        category="contact",
        patterns=_compile(
            r"how (can|do) I contact",
            r"contact (information|details)",
            r"phone number",
            r"email address",
            r"reach out",
            r"get in touch",
        ),
        response=(
            "You can contact Atlas Technosoft by email at info@atlastechnosoft.com, or by "
            "phone at +91-22-2240 1925, +91-22-4022 1925, or mobile +91-9372329599. "
            "Alternatively, you can fill out our contact form on our website at "
            "atlastechnosoft.com/Contact_Us.html. Our team typically responds within "
            "1 business day."
        ),
        priority=10,
        source="Contact Information",
    ),
    Rule(
        id="office-location",
        category="location",
        patterns=_compile(
            r"where (are you|is the office)",
            r"(office|company) (location|address)",
            r"headquarters",
            r"visit (your|the) office",
        ),
        response=(
            "Our Head Office is located at Office No.29, Building No.108/116, Vitthalwadi, "
            "Kalabadevi Road, Marine Lines, Mumbai - 400 002, Maharashtra, India. We also "
            "have a Branch Office at F/2nd Floor, Yashodhan Building, Chandavarkar Road, "
            "Om Shanti Chowk, Borivali(west), Mumbai - 400 092, Maharashtra, India."
        ),
        priority=9,
        source="Company Locations",
    ),
    Rule(
        id="business-hours",
        category="hours",
        patterns=_compile(
            r"business hours",
            r"when are you open",
            r"opening hours",
            r"working hours",
            r"office hours",
            r"hours of operation",
        ),
        response=(
            "Our standard business hours are Monday to Friday, 9:00 AM to 6:00 PM Indian "
            "Standard Time (IST). Our support team is available 24/7 for Premium Support "
            "customers."
        ),
        priority=8,
        source="Company Information",
    ),
    Rule(
        id="emergency-support",
        category="emergency",
        patterns=_compile(
            r"emergency support",
            r"urgent help",
            r"system (down|failure|outage)",
            r"critical issue",
            r"production (issue|outage)",
            r"immediate assistance",
        ),
        response=(
            "For urgent or critical issues, please contact our 24/7 emergency support line "
            "at +91-9372329599 or email emergency-support@atlastechnosoft.com with 'URGENT' "
            "in the subject line. Premium Support customers can also use the dedicated "
            "emergency portal at support.atlastechnosoft.com/emergency. Our SLA guarantees "
            "a response within 30 minutes for critical issues."
        ),
        priority=10,
        source="Support Services",
    ),
    Rule(
        id="product-version-info",
        category="products",
        patterns=_compile(
            r"what'?s new in (.*?)( in | )(20\d\d|\d+\.\d+)",
            r"latest (version|features|update|release) (of|in|for) (.*)",
            r"new features in (.*?)( in | )(20\d\d|\d+\.\d+)",
        ),
        response=(
            "Our latest product updates include enhanced AI capabilities, improved cloud "
            "integrations, and more robust security features. For specific product "
            "information, please let me know which solution you're interested in, such as "
            "SAP Business One, UiPath, or our other offerings."
        ),
        priority=8,
        source="Product Updates 2025",
        requires_entities=True,
        variants=(
            ResponseVariant(
                ("business one", "b1"),
                "SAP Business One 2025 comes with enhanced AI capabilities, including Joule - "
                "SAP's AI copilot that provides context-aware insights and guidance. Key "
                "improvements include advanced analytics with real-time dashboards, extended "
                "web client capabilities with an intuitive user experience, and a new API "
                "framework for easier customization. The 2025 version also features improved "
                "identity and authentication management with two-factor authentication, "
                "cloud-native integrations, and enhanced mobile functionality.",
            ),
            ResponseVariant(
                ("uipath",),
                "UiPath's latest platform includes a significant shift to agentic automation, "
                "combining AI agents that think and adapt with robots that execute tasks with "
                "precision. Key features include Agent Builder for creating enterprise agents, "
                "Autopilot for AI-powered productivity across different roles, Maestro for "
                "orchestrating human-AI-robot workflows, and an AI Trust Layer for enterprise "
                "governance. Their 2025 vision focuses on extending automation to more "
                "complex, differentiated use cases that weren't previously possible with "
                "traditional RPA.",
            ),
            ResponseVariant(
                ("s/4hana",),
                "SAP S/4HANA Cloud Public Edition 2502 update (2025) includes advanced AI "
                "capabilities powered by Joule, SAP's AI copilot. Key enhancements include "
                "AI-driven productivity features, modern collaborative user experience with "
                "Microsoft Teams integration, intelligent finance with SAP Green Ledger, and "
                "expanded functionality tailored for specific industries like retail. The "
                "platform also includes improved service contract management, pricing "
                "flexibility, and enhanced identity and access management.",
            ),
        ),
    ),
    Rule(
        id="security-policy",
        category="security",
        patterns=_compile(
            r"security (policy|practices|measures)",
            r"how (do you|does atlas) (handle|manage|protect) (data|security)",
            r"data protection",
            r"privacy policy",
            r"data security",
        ),
        response=(
            "Security is a top priority at Atlas Technosoft. We implement industry best "
            "practices including end-to-end encryption, role-based access controls, regular "
            "security audits, and comprehensive staff training. Our solutions comply with "
            "relevant regulations like GDPR and industry standards. We employ a multi-layered "
            "security approach with secure development practices, regular penetration "
            "testing, and a dedicated security team that monitors for threats 24/7. All "
            "client data is encrypted both in transit and at rest."
        ),
        priority=9,
        source="Security and Compliance",
    ),
    Rule(
        id="compliance-info",
        category="compliance",
        patterns=_compile(
            r"compliance (with|to) (.*)",
            r"(gdpr|hipaa|iso|soc) compliance",
            r"(regulatory|regulation) (requirements|compliance)",
            r"compliant with (.*)",
        ),
        response=(
            "Atlas Technosoft maintains compliance with major regulatory frameworks including "
            "GDPR, HIPAA, ISO 27001, and SOC 2. Our solutions are designed with compliance in "
            "mind, and we regularly update our policies and procedures to reflect changes in "
            "regulations. We provide compliance documentation and can support our clients "
            "through audits and assessments."
        ),
        priority=8,
        source="Security and Compliance",
        variant_mode="append",
        variants=(
            ResponseVariant(
                ("gdpr",),
                " For GDPR specifically, we serve as both a data processor and controller "
                "depending on the context, and we provide data processing agreements, maintain "
                "records of processing activities, and support data subject rights requests.",
            ),
            ResponseVariant(
                ("hipaa",),
                " For HIPAA specifically, we implement all required physical, technical, and "
                "administrative safeguards, provide business associate agreements, and ensure "
                "our staff receives regular HIPAA compliance training.",
            ),
        ),
    ),
    Rule(
        id="solution-recommendation",
        category="recommendation",
        patterns=_compile(
            r"which (solution|product|software) (should I|would you) (use|recommend|choose)",
            r"recommend (a|the best) (solution|software|product)",
            r"best (solution|option) for (.*)",
            r"help (me|us) choose",
            r"what (would you|do you) recommend",
        ),
        response=(
            "To provide the most appropriate recommendation, we'd need to understand your "
            "specific business requirements, industry, size, budget, and strategic "
            "objectives. We typically conduct a detailed requirements gathering session to "
            "match the right solution to your needs."
        ),
        priority=7,
        source="Solution Consultation",
        variant_mode="append",
        variants=(
            ResponseVariant(
                ("small", "sme"),
                " For small to medium-sized businesses, we typically recommend SAP Business "
                "One as it offers comprehensive functionality at a price point that makes "
                "sense for growing companies. It covers financials, sales, inventory, "
                "production, and more in an integrated package.",
            ),
            ResponseVariant(
                ("enterprise", "large"),
                " For larger enterprises with complex requirements, SAP S/4HANA Cloud "
                "provides enterprise-scale capabilities with the flexibility of cloud "
                "deployment and advanced AI-powered analytics.",
            ),
            ResponseVariant(
                ("automation",),
                " For automation needs, our UiPath-based solutions offer the best combination "
                "of robust RPA capabilities and cutting-edge agentic AI features for "
                "end-to-end process automation.",
            ),
        ),
        suffix=(
            " I'd be happy to arrange a consultation with one of our solution architects who "
            "can provide a tailored recommendation based on your specific situation."
        ),
    ),
)

DEFAULT_FOLLOW_UPS = {
    "contact": FollowUps(
        (
            "What are your business hours?",
            "Can I schedule a product demo?",
            "Where are your offices located?",
        )
    ),
    "location": FollowUps(
        (
            "What are your business hours?",
            "How can I schedule a meeting at your office?",
            "Do you offer remote consultations?",
        )
    ),
    "hours": FollowUps(
        (
            "How can I contact your support team?",
            "What is your emergency support process?",
            "Do you offer 24/7 support?",
        )
    ),
    "emergency": FollowUps(
        (
            "What's included in your Premium Support package?",
            "How do you handle system outages?",
            "What are your typical issue resolution times?",
        )
    ),
    "products": FollowUps(
        (
            "What SAP solutions do you offer?",
            "Tell me about your automation capabilities",
            "What digital transformation services do you provide?",
        ),
        by_entity=(
            EntityQuestions(
                ("business one", "b1"),
                (
                    "What are the key benefits of SAP Business One?",
                    "How does the cloud version of Business One compare to on-premise?",
                    "What industries do you implement SAP Business One for?",
                ),
            ),
            EntityQuestions(
                ("uipath",),
                (
                    "What is agentic automation in UiPath?",
                    "Tell me about UiPath Autopilot",
                    "How does UiPath integrate with SAP systems?",
                ),
            ),
        ),
    ),
    "security": FollowUps(
        (
            "What compliance certifications do you have?",
            "How do you handle data breaches?",
            "Can you explain your data protection practices?",
        )
    ),
    "compliance": FollowUps(
        (
            "How do you help with GDPR compliance?",
            "What security measures do you implement?",
            "Do you conduct regular security audits?",
        )
    ),
    "recommendation": FollowUps(
        (
            "Can you tell me more about SAP Business One?",
            "What automation solutions do you offer?",
            "How do you typically implement new systems?",
        )
    ),
}

GENERIC_FOLLOW_UPS = FollowUps(
    (
        "What services does Atlas Technosoft offer?",
        "Tell me about your implementation methodology",
        "What industries do you specialize in?",
    )
)


class PatternRuleEngine:
    """First matching rule wins; rules needing entities are skipped without them."""

    def __init__(
        self,
        rules: Sequence[Rule] = DEFAULT_RULES,
        follow_ups: Optional[dict] = None,
    ) -> None:
        self.rules = tuple(rules)
        self.follow_ups = DEFAULT_FOLLOW_UPS if follow_ups is None else follow_ups

    def evaluate(
        self, normalized_query: str, context: Optional[Sequence[str]] = None
    ) -> Optional[ChatbotResponse]:
        query = normalize(normalized_query)
        entities = extract_entities(query)

        for rule in self.rules:
            if not rule.matches(query):
                continue
            if rule.requires_entities and not entities:
                continue
            return ChatbotResponse(
                message=rule.render(entities),
                source=rule.source,
                confidence=rule.priority / 10,
                fact_checked=True,
                rule_based_response=True,
                matched_rule=rule.id,
                context_aware=bool(context),
                suggested_questions=self.follow_ups.get(
                    rule.category, GENERIC_FOLLOW_UPS
                ).pick(entities),
            )
        return None
