"""Allow ``python -m cyberdocs``."""

from cyberdocs.cli import cli

cli()
