"""Shared pytest fixtures and test helpers for cyberdocs tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from cyberdocs.config.settings import DocsSettings
from cyberdocs.infrastructure.catalog import Catalog

# Zip local-file-header magic followed by arbitrary payload, like a .docx.
SPEC_1_BYTES = b"PK\x03\x04spec-1 original\x00\xff\x10"
SPEC_2_BYTES = b"PK\x03\x04spec-2 original\x00\x01"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CYBERDOCS_* environment out of the tests."""
    monkeypatch.delenv("CYBERDOCS_CONFIG", raising=False)
    monkeypatch.delenv("CYBERDOCS_VERBOSE", raising=False)
    monkeypatch.delenv("CYBERDOCS_DOCS_ROOT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Temporary docs root holding both default originals under ``spec/``."""
    spec_dir = tmp_path / "spec"
    spec_dir.mkdir()
    (spec_dir / "spec-1.docx").write_bytes(SPEC_1_BYTES)
    (spec_dir / "spec-2.docx").write_bytes(SPEC_2_BYTES)
    return tmp_path


@pytest.fixture
def settings(docs_root: Path) -> DocsSettings:
    """Default settings rooted at the temporary docs root."""
    return DocsSettings.from_cli(docs_root=docs_root)


@pytest.fixture
def catalog(settings: DocsSettings) -> Catalog:
    """Catalog with the built-in spec-1 and spec-2 documents."""
    return Catalog.from_settings(settings)


@pytest.fixture
def _isolated_docs(docs_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp docs root so the CLI serves its originals.

    Use via ``@pytest.mark.usefixtures("_isolated_docs")`` on command test
    classes.
    """
    monkeypatch.chdir(docs_root)


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"
