"""Shared fixtures for integration tests

Integration tests run the whole pipeline on the HTML corpus checked into
tests/fixtures/corpus:

    directory walk → text extraction → indexing → model file → search / HTTP

No mocks, no network. Everything runs against temporary files.
"""

import pytest

from tfidf_lab.document_processor import DocumentProcessor
from tfidf_lab.storage import load_model, save_model
from tfidf_lab.tfidf import CorpusModel


@pytest.fixture
def indexed_corpus(fixture_corpus, tmp_path):
    """Index the fixture corpus, persist it and load it back"""
    model = CorpusModel()
    report = DocumentProcessor().index_directory(str(fixture_corpus), model)

    model_path = tmp_path / "corpus.json"
    save_model(model, model_path)

    return load_model(model_path), report
