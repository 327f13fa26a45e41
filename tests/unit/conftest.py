"""Unit test fixtures - small in-memory corpora"""

import pytest

from tfidf_lab.tfidf import CorpusModel, Doc


@pytest.fixture
def pets_model():
    """
    Two-document corpus used throughout the scorer tests.

    Doc A = {"cat": 3, "dog": 1} (dtc=4), Doc B = {"dog": 5} (dtc=5)
    """
    model = CorpusModel()
    model.add_document("a.html", Doc(dtf={"cat": 3, "dog": 1}, dtc=4))
    model.add_document("b.html", Doc(dtf={"dog": 5}, dtc=5))
    return model


@pytest.fixture
def html_tree(tmp_path):
    """
    Corpus directory with supported, unsupported and broken files.

    root/
    ├── a.html          indexed
    ├── notes.txt       unsupported extension
    ├── README          no extension
    ├── broken.html     not UTF-8
    └── sub/
        └── b.html      indexed
    """
    root = tmp_path / "corpus"
    (root / "sub").mkdir(parents=True)
    (root / "a.html").write_text("<html><body><p>cat cat cat dog</p></body></html>", encoding="utf-8")
    (root / "sub" / "b.html").write_text("<html><body><p>dog dog dog dog dog</p></body></html>", encoding="utf-8")
    (root / "notes.txt").write_text("cat", encoding="utf-8")
    (root / "README").write_text("cat", encoding="utf-8")
    (root / "broken.html").write_bytes(b"<html>\xff\xfe cat</html>")
    return root
