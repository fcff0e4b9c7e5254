"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import faq` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory.
"""

import os
import sys
from pathlib import Path

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# The FAQ Lambda must fall back to the bundled knowledge base in tests.
os.environ.pop("KNOWLEDGE_BASE_BUCKET", None)
os.environ.pop("KNOWLEDGE_BASE_PATH", None)
os.environ.pop("FAQ_USAGE_TABLE", None)

boto3.setup_default_session(region_name="eu-west-2")


@pytest.fixture
def make_entry():
    """Factory for KnowledgeEntry fixtures."""
    from models.knowledge import KnowledgeEntry

    def _make(triggers, response="answer", source=None, keywords=()):
        return KnowledgeEntry(
            triggers=tuple(triggers),
            response=response,
            source=source,
            keywords=tuple(keywords),
        )

    return _make


@pytest.fixture
def sample_store(make_entry):
    """Small store covering exact, substring and fallback paths."""
    from repositories.knowledge_store import StaticKnowledgeStore

    return StaticKnowledgeStore(
        [
            make_entry(
                ["what is sap b1", "sap business one"],
                response="SAP Business One is an ERP for small businesses.",
                source="SAP Solutions",
                keywords=["sap", "business one", "erp"],
            ),
            make_entry(
                ["cloud hosting options", "cloud migration"],
                response="We host in the cloud or on-premise.",
                source="Deployment Options",
                keywords=["cloud", "hosting"],
            ),
            make_entry(
                ["robotic process automation", "what is rpa"],
                response="RPA automates repetitive tasks.",
                source="Automation Solutions",
                keywords=["automation", "rpa", "robots"],
            ),
        ]
    )
