"""Fallback suggestion ranking tests."""

from repositories.knowledge_store import StaticKnowledgeStore
from services.fallback_ranker import FallbackSuggestionRanker


class TestScoring:
    def test_keyword_and_trigger_points(self, sample_store):
        scored = FallbackSuggestionRanker(sample_store).score("thinking about cloud migration")
        assert [item.entry.source for item in scored] == ["Deployment Options"]
        # keyword "cloud" (2) + "cloud hosting options" (1) + "cloud migration" (2)
        assert scored[0].score == 5

    def test_zero_scores_are_excluded(self, sample_store):
        assert FallbackSuggestionRanker(sample_store).score("quantum widgets") == []

    def test_scores_are_non_increasing(self, make_entry):
        store = StaticKnowledgeStore(
            [
                make_entry(["data"], keywords=()),
                make_entry(["data lake", "data mesh"], keywords=("data",)),
                make_entry(["something else"], keywords=("data",)),
            ]
        )
        scores = [item.score for item in FallbackSuggestionRanker(store).score("data")]
        assert scores == sorted(scores, reverse=True)
        assert scores == [4, 2, 1]

    def test_overlapping_triggers_accumulate(self, make_entry):
        many = make_entry(["data one", "data two", "data three"], response="many")
        keyword = make_entry(["other"], response="keyword", keywords=("data",))
        store = StaticKnowledgeStore([keyword, many])
        scored = FallbackSuggestionRanker(store).score("data")
        assert [item.entry.response for item in scored] == ["many", "keyword"]

    def test_ties_keep_store_order(self, make_entry):
        store = StaticKnowledgeStore(
            [make_entry(["cloud first"]), make_entry(["cloud second"])]
        )
        assert FallbackSuggestionRanker(store).rank("cloud") == ["cloud first", "cloud second"]

    def test_repeated_words_count_once(self, make_entry):
        store = StaticKnowledgeStore([make_entry(["cloud"], keywords=("cloud",))])
        assert FallbackSuggestionRanker(store).score("cloud cloud cloud")[0].score == 3


class TestRank:
    def test_returns_first_triggers(self, sample_store):
        ranked = FallbackSuggestionRanker(sample_store).rank("cloud automation robots")
        assert ranked == ["robotic process automation", "cloud hosting options"]

    def test_limit_is_three(self, make_entry):
        store = StaticKnowledgeStore(
            [make_entry([f"cloud {i}"], keywords=("cloud",)) for i in range(5)]
        )
        assert FallbackSuggestionRanker(store).rank("cloud") == ["cloud 0", "cloud 1", "cloud 2"]

    def test_short_words_only(self, sample_store):
        assert FallbackSuggestionRanker(sample_store).rank("sap erp b1") == []

    def test_empty_store(self):
        assert FallbackSuggestionRanker(StaticKnowledgeStore()).rank("cloud migration") == []
