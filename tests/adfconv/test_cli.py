"""Tests for the command line entry point."""

import json
import sys

import pytest
from loguru import logger

from adfconv.cli import run


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestCli:
    def test_markdown_file(self, tmp_path, capsys):
        source = tmp_path / "page.md"
        source.write_text("- [x] done\n- plain\n", encoding="utf-8")

        assert run([str(source), "--log-level", "WARNING"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["type"] == "doc"
        assert [block["type"] for block in output["content"]] == ["taskList", "bulletList"]
        assert output["content"][0]["content"][0]["attrs"]["state"] == "DONE"

    def test_html_by_suffix(self, tmp_path, capsys):
        source = tmp_path / "page.html"
        source.write_text("<ol><li>one</li></ol>", encoding="utf-8")

        assert run([str(source), "--log-level", "WARNING"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["content"][0]["type"] == "orderedList"

    def test_html_flag_overrides_suffix(self, tmp_path, capsys):
        source = tmp_path / "page.txt"
        source.write_text("<ul><li>- [ ] not markdown</li></ul>", encoding="utf-8")

        assert run([str(source), "--html", "--log-level", "WARNING"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["content"][0]["type"] == "bulletList"

    def test_missing_file_exits_with_error(self, tmp_path, capsys):
        assert run([str(tmp_path / "missing.md"), "--log-level", "CRITICAL"]) == 1
        assert capsys.readouterr().out == ""
