"""Tests for the show command."""

from __future__ import annotations

import base64
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cyberdocs.cli import cli
from cyberdocs.infrastructure.filesystem import packaged_text


@pytest.mark.usefixtures("_isolated_docs")
class TestShowCommand:
    def test_text_form(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "spec-1"])
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == (packaged_text("spec-1") or "").rstrip("\n")

    def test_tool_form(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "spec-1", "--form", "tool"])
        assert result.exit_code == 0
        assert result.output.startswith("### API Spec #1")
        assert result.output.rstrip("\n").endswith("- resource://cyber/spec-1.docx")

    def test_binary_form(self, cli_runner: CliRunner, docs_root: Path) -> None:
        result = cli_runner.invoke(cli, ["show", "spec-2", "--form", "binary"])
        assert result.exit_code == 0
        envelope = json.loads(result.output)
        item = envelope["contents"][0]
        assert item["uri"] == "resource://cyber/spec-2.docx"
        assert base64.b64decode(item["blob"]) == (docs_root / "spec" / "spec-2.docx").read_bytes()

    def test_binary_form_missing(self, cli_runner: CliRunner, docs_root: Path) -> None:
        (docs_root / "spec" / "spec-2.docx").unlink()
        result = cli_runner.invoke(cli, ["show", "spec-2", "--form", "binary"])
        assert result.exit_code == 1
        assert "spec-2.docx" in result.stderr

    def test_unknown_document(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "spec-9"])
        assert result.exit_code == 1
        assert "spec-9" in result.stderr
        assert "known documents: spec-1, spec-2" in result.stderr

    def test_invalid_form(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "spec-1", "--form", "pdf"])
        assert result.exit_code == 2
