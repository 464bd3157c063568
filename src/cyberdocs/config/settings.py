"""DocsSettings: one frozen object built from flags, environment and file.

Highest priority first:

1. keyword arguments (the CLI flags Click parsed)
2. ``CYBERDOCS_*`` environment variables, ``__`` for nesting
   (``CYBERDOCS_SERVER__NAMESPACE=acme``)
3. the config file found by :func:`~cyberdocs.config.discovery.find_config`
4. the defaults on the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cyberdocs.config.discovery import find_config, read_config_table
from cyberdocs.config.models import DocumentConfig, ServerConfig, default_documents

# Config file in effect while from_cli() constructs an instance.
_config_file: ContextVar[Path | None] = ContextVar("cyberdocs_config_file", default=None)


class ConfigFileSource(PydanticBaseSettingsSource):
    """Settings source over the cyberdocs table of a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._table: dict[str, Any] = read_config_table(path) if path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


class DocsSettings(BaseSettings):
    """Resolved settings for one CLI invocation or server process.

    Attributes:
        docs_root: Base directory for relative document paths.
        config_path: The config file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CYBERDOCS_",
        "env_nested_delimiter": "__",
    }

    docs_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    server: ServerConfig = Field(default_factory=ServerConfig)
    documents: list[DocumentConfig] = Field(default_factory=default_documents)

    @field_validator("documents")
    @classmethod
    def _at_least_one_document(cls, value: list[DocumentConfig]) -> list[DocumentConfig]:
        if not value:
            raise ValueError("at least one document must be configured")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            ConfigFileSource(settings_cls, _config_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        docs_root: Path | None = None,
        **cli_flags: Any,
    ) -> DocsSettings:
        """Build settings the way the CLI does.

        An explicit *config_path* that does not exist is ignored. Without
        *docs_root*, documents resolve against the config file's directory,
        or the working directory when there is no config file.
        """
        if config_path:
            path = Path(config_path)
            config_file = path if path.is_file() else None
        else:
            config_file = find_config(docs_root)

        if docs_root is None:
            docs_root = config_file.parent if config_file else Path.cwd()

        token = _config_file.set(config_file)
        try:
            return cls(docs_root=docs_root, config_path=config_file, **cli_flags)
        finally:
            _config_file.reset(token)
