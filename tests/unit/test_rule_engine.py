"""Pattern rule engine tests."""

import re

from services.rule_engine import (
    DEFAULT_FOLLOW_UPS,
    DEFAULT_RULES,
    GENERIC_FOLLOW_UPS,
    PatternRuleEngine,
    Rule,
    extract_entities,
)

RULES = {rule.id: rule for rule in DEFAULT_RULES}


class TestEntityExtraction:
    def test_products_years_and_tech_in_order(self):
        entities = extract_entities("sap business one 2025 and 2025 cloud")
        assert entities == ["sap business one", "2025", "cloud"]

    def test_ai_needs_word_boundary(self):
        assert extract_entities("maintenance plans") == []
        assert extract_entities("ai for finance") == ["ai"]

    def test_profile_terms(self):
        assert extract_entities("gdpr for a small team") == ["gdpr", "small"]

    def test_nothing_found(self):
        assert extract_entities("tell me a joke") == []


class TestPatternRuleEngine:
    def test_contact_rule(self):
        response = PatternRuleEngine().evaluate("how can i contact someone")
        assert response.matched_rule == "contact-info"
        assert response.confidence == 1.0
        assert response.fact_checked is True
        assert response.rule_based_response is True
        assert response.context_aware is False
        assert response.source == "Contact Information"
        assert response.suggested_questions == list(DEFAULT_FOLLOW_UPS["contact"].default)
        assert response.is_faq is None

    def test_context_marks_response_context_aware(self):
        response = PatternRuleEngine().evaluate("what are your business hours", ["hi"])
        assert response.matched_rule == "business-hours"
        assert response.confidence == 0.8
        assert response.context_aware is True

    def test_declaration_order_beats_priority(self):
        response = PatternRuleEngine().evaluate("emergency support contact details")
        assert response.matched_rule == "contact-info"

    def test_input_is_normalized_again(self):
        response = PatternRuleEngine().evaluate("  Where Are You located?  ")
        assert response.matched_rule == "office-location"

    def test_no_rule_matches(self):
        assert PatternRuleEngine().evaluate("tell me a joke") is None


class TestProductRule:
    def test_business_one_variant_and_follow_ups(self):
        response = PatternRuleEngine().evaluate("what's new in sap business one 2025")
        assert response.matched_rule == "product-version-info"
        assert response.message.startswith("SAP Business One 2025 comes with")
        assert response.confidence == 0.8
        assert response.suggested_questions[0] == "What are the key benefits of SAP Business One?"

    def test_uipath_variant(self):
        response = PatternRuleEngine().evaluate("latest features of uipath")
        assert response.message.startswith("UiPath's latest platform")
        assert response.suggested_questions[0] == "What is agentic automation in UiPath?"

    def test_s4hana_variant(self):
        response = PatternRuleEngine().evaluate("latest release of s/4hana")
        assert response.message.startswith("SAP S/4HANA Cloud Public Edition")

    def test_generic_text_when_entity_has_no_variant(self):
        response = PatternRuleEngine().evaluate("latest version of joule")
        assert response.message == RULES["product-version-info"].response
        assert response.suggested_questions == list(DEFAULT_FOLLOW_UPS["products"].default)

    def test_skipped_without_entities(self):
        assert PatternRuleEngine().evaluate("latest version of our stuff") is None


class TestAppendVariants:
    def test_gdpr_appended(self):
        response = PatternRuleEngine().evaluate("are you compliant with gdpr")
        base = RULES["compliance-info"].response
        assert response.matched_rule == "compliance-info"
        assert response.message.startswith(base)
        assert "For GDPR specifically" in response.message

    def test_compliance_without_variant(self):
        response = PatternRuleEngine().evaluate("regulatory requirements please")
        assert response.message == RULES["compliance-info"].response

    def test_recommendation_for_automation(self):
        rule = RULES["solution-recommendation"]
        response = PatternRuleEngine().evaluate("what would you recommend for automation")
        assert response.confidence == 0.7
        assert "our UiPath-based solutions" in response.message
        assert response.message.endswith(rule.suffix)

    def test_recommendation_for_enterprise(self):
        response = PatternRuleEngine().evaluate("help us choose for a large enterprise")
        assert "For larger enterprises" in response.message

    def test_recommendation_without_entities(self):
        rule = RULES["solution-recommendation"]
        response = PatternRuleEngine().evaluate("what do you recommend")
        assert response.message == rule.response + rule.suffix


class TestCustomRules:
    def test_generic_follow_ups_for_unknown_category(self):
        rule = Rule(
            id="ping",
            category="diagnostics",
            patterns=(re.compile(r"ping"),),
            response="pong",
            priority=5,
        )
        response = PatternRuleEngine(rules=[rule]).evaluate("ping")
        assert response.message == "pong"
        assert response.confidence == 0.5
        assert response.source is None
        assert response.suggested_questions == list(GENERIC_FOLLOW_UPS.default)
