"""Unit tests for the command line interface"""

import logging
import math
import os

import pytest

from tfidf_lab import cli
from tfidf_lab.storage import load_model


@pytest.fixture(autouse=True)
def restore_root_logger():
    """cli.main() reconfigures the root logger, undo it after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestIndexCommand:
    def test_index_writes_model(self, html_tree, tmp_path):
        output = tmp_path / "model.json"

        assert cli.main(["index", str(html_tree), str(output)]) == 0

        model = load_model(output)
        assert os.path.join(str(html_tree), "a.html") in model.doc_index
        assert model.document_count == 2

    def test_missing_root_exits_non_zero(self, tmp_path, capsys):
        output = tmp_path / "model.json"

        assert cli.main(["index", str(tmp_path / "missing"), str(output)]) == 1
        assert "could not open directory" in capsys.readouterr().err
        assert not output.exists()

    def test_unwritable_output_exits_non_zero(self, html_tree, tmp_path):
        output = tmp_path / "missing-dir" / "model.json"
        assert cli.main(["index", str(html_tree), str(output)]) == 1


class TestSearchCommand:
    def test_prints_ranked_results(self, html_tree, tmp_path, capsys):
        output = tmp_path / "model.json"
        cli.main(["index", str(html_tree), str(output)])
        capsys.readouterr()

        assert cli.main(["search", "cat", str(output)]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0] == f"1. {os.path.join(str(html_tree), 'a.html')} => {0.75 * math.log10(1.5)}"
        assert lines[1] == f"2. {os.path.join(str(html_tree), 'sub', 'b.html')} => 0.0"

    def test_top_ten_only(self, tmp_path, capsys):
        root = tmp_path / "many"
        root.mkdir()
        for i in range(15):
            (root / f"page{i:02d}.html").write_text("<p>cat</p>", encoding="utf-8")
        output = tmp_path / "model.json"
        cli.main(["index", str(root), str(output)])
        capsys.readouterr()

        cli.main(["search", "cat", str(output)])

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 10
        assert lines[0].startswith("1. ")
        assert lines[9].startswith("10. ")

    def test_missing_model_exits_non_zero(self, tmp_path, capsys):
        assert cli.main(["search", "cat", str(tmp_path / "missing.json")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "could not read model file" in captured.err

    def test_corrupt_model_exits_non_zero(self, tmp_path):
        path = tmp_path / "model.json"
        path.write_text("{\"doc_index\": 42}", encoding="utf-8")
        assert cli.main(["search", "cat", str(path)]) == 1


class TestServeCommand:
    def test_serves_loaded_model(self, pets_model, tmp_path, monkeypatch):
        from tfidf_lab.storage import save_model

        path = tmp_path / "model.json"
        save_model(pets_model, path)
        calls = []
        monkeypatch.setattr("tfidf_lab.api.serve", lambda model, host, port: calls.append((model, host, port)))

        assert cli.main(["serve", str(path), "--port", "8123"]) == 0

        model, host, port = calls[0]
        assert model.doc_index == pets_model.doc_index
        assert port == 8123
        assert host == "127.0.0.1"

    def test_default_port(self, pets_model, tmp_path, monkeypatch):
        from tfidf_lab.storage import save_model

        path = tmp_path / "model.json"
        save_model(pets_model, path)
        calls = []
        monkeypatch.setattr("tfidf_lab.api.serve", lambda model, host, port: calls.append(port))

        cli.main(["serve", str(path)])

        assert calls == [42069]

    def test_missing_model_exits_non_zero(self, tmp_path):
        assert cli.main(["serve", str(tmp_path / "missing.json")]) == 1


class TestArguments:
    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code != 0


class TestSearchCommandErrors:
    def test_non_utf8_model_exits_non_zero(self, tmp_path, capsys):
        path = tmp_path / "model.json"
        path.write_bytes(b'{"doc_index": {"\xff": {"dtf": {}, "dtc": 0}}, "tcf_table": {}}')

        assert cli.main(["search", "cat", str(path)]) == 1
        assert "invalid model file" in capsys.readouterr().err
