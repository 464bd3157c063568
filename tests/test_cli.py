"""Tests for the root cyberdocs CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from cyberdocs import __version__
from cyberdocs.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "cyberdocs" in result.output
    for command in ("serve", "list", "check", "show"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_invalid_toml_is_reported(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "cyberdocs.toml").write_text("[server")
    monkeypatch.chdir(tmp_path)
    result = cli_runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_invalid_schema_is_reported(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "cyberdocs.toml").write_text('[server]\nport = "not-a-port"\n')
    monkeypatch.chdir(tmp_path)
    result = cli_runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "port" in result.output


def test_empty_document_table_is_reported(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "cyberdocs.toml").write_text("documents = []\n")
    monkeypatch.chdir(tmp_path)
    result = cli_runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "at least one document" in result.output
