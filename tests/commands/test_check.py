"""Tests for the check command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cyberdocs.cli import cli


@pytest.mark.usefixtures("_isolated_docs")
class TestCheckCommand:
    def test_all_present(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "spec-1" in result.output
        assert "spec-2" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "check"
        assert data["data"]["count"] == 2

    def test_missing_original_exits_1(self, cli_runner: CliRunner, docs_root: Path) -> None:
        (docs_root / "spec" / "spec-2.docx").unlink()
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert '"code": "RESOURCE_READ_ERROR"' in result.stderr
        assert "spec-2" in result.stderr
