"""Pytest configuration shared by unit and integration tests"""

import sys
from pathlib import Path

import pytest

# Add project root to path for tfidf_lab imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tfidf_lab import config


@pytest.fixture(autouse=True)
def stemming_enabled(monkeypatch):
    """
    Pin the tokenizer to the stemming variant.

    Tests must not depend on a TFIDF_STEMMING value from the developer's
    environment or .env file.
    """
    monkeypatch.setattr(config, "STEMMING", True)


@pytest.fixture
def fixture_corpus():
    """Small HTML corpus checked into tests/fixtures/corpus"""
    return Path(__file__).parent / "fixtures" / "corpus"
