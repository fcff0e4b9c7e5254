"""Knowledge base loading tests (bundled file, JSON text and S3)."""

import io
import json
from unittest.mock import MagicMock, patch

import pytest

from config.settings import Settings
from repositories.knowledge_store import StaticKnowledgeStore, load_knowledge_store
from repositories.s3_repo import S3Repository
from utils.error_handling import KnowledgeBaseError

DOCUMENT = {
    "entries": [
        {"triggers": ["what is rpa"], "response": "RPA...", "source": "Automation"},
        {"triggers": ["cloud"], "response": "Cloud...", "keywords": ["cloud"]},
    ]
}


class TestBundledKnowledgeBase:
    def test_default_settings_load_bundled_file(self):
        store = load_knowledge_store(Settings())
        assert len(store) == 37
        assert store.entries[0].triggers[0] == "who are you"
        assert store.entries[-1].source == "Microsoft Integration Solutions"

    def test_every_entry_has_triggers(self):
        store = load_knowledge_store(Settings())
        assert all(entry.triggers for entry in store.entries)


class TestJsonText:
    def test_document_keeps_order(self):
        store = StaticKnowledgeStore.from_json_text(json.dumps(DOCUMENT))
        assert [entry.response for entry in store.entries] == ["RPA...", "Cloud..."]
        assert store.entries[1].keywords == ("cloud",)

    def test_bare_list(self):
        store = StaticKnowledgeStore.from_json_text(json.dumps(DOCUMENT["entries"]))
        assert len(store) == 2

    @pytest.mark.parametrize(
        "text",
        [
            "{not json",
            json.dumps({"items": []}),
            json.dumps({"entries": {"triggers": ["x"]}}),
            json.dumps({"entries": [{"triggers": [], "response": "x"}]}),
            json.dumps({"entries": [{"response": "x"}]}),
            json.dumps("just a string"),
        ],
    )
    def test_invalid_documents(self, text):
        with pytest.raises(KnowledgeBaseError):
            StaticKnowledgeStore.from_json_text(text)

    def test_empty_document(self):
        assert len(StaticKnowledgeStore.from_json_text('{"entries": []}')) == 0


class TestJsonFile:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
        assert len(StaticKnowledgeStore.from_json_file(str(path))) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(KnowledgeBaseError) as exc_info:
            StaticKnowledgeStore.from_json_file(str(tmp_path / "missing.json"))
        assert exc_info.value.status_code == 500


class TestS3:
    def test_reads_from_repository(self):
        repo = MagicMock()
        repo.read_text.return_value = json.dumps(DOCUMENT)
        store = StaticKnowledgeStore.from_s3("kb-bucket", "kb.json", repository=repo)
        repo.read_text.assert_called_once_with("kb.json")
        assert len(store) == 2

    def test_read_failure_is_wrapped(self):
        repo = MagicMock()
        repo.read_text.side_effect = RuntimeError("AccessDenied")
        with pytest.raises(KnowledgeBaseError) as exc_info:
            StaticKnowledgeStore.from_s3("kb-bucket", "kb.json", repository=repo)
        assert "s3://kb-bucket/kb.json" in str(exc_info.value)

    def test_bucket_required(self):
        with pytest.raises(ValueError):
            StaticKnowledgeStore.from_s3("", "kb.json", repository=MagicMock())

    def test_settings_with_bucket_use_s3(self):
        settings = Settings(knowledge_base_bucket="kb-bucket", knowledge_base_key="faq.json")
        with patch("repositories.knowledge_store.S3Repository") as repo_cls:
            repo_cls.return_value.read_text.return_value = json.dumps(DOCUMENT)
            store = load_knowledge_store(settings)
        repo_cls.assert_called_once_with("kb-bucket")
        repo_cls.return_value.read_text.assert_called_once_with("faq.json")
        assert len(store) == 2


class TestS3Repository:
    def test_read_text_decodes_body(self):
        client = MagicMock()
        client.get_object.return_value = {"Body": io.BytesIO("{\"entries\": []}".encode("utf-8"))}
        repo = S3Repository("kb-bucket", client=client)
        assert repo.read_text("kb.json") == '{"entries": []}'
        client.get_object.assert_called_once_with(Bucket="kb-bucket", Key="kb.json")
