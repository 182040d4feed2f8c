"""selector-builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selector_builder import __version__
from selector_builder.config import LOG_LEVEL_ENV, LOG_LEVELS, CliConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (defaults to $SELECTOR_BUILDER_LOG_LEVEL or WARNING)",
)
def cli(log_level: str | None) -> None:
    """selector-builder - compose CSS selectors from typed fragments."""
    config = load_config(log_level)
    logging.basicConfig(level=config.log_level, format=config.log_format)


def load_config(log_level: str | None) -> CliConfig:
    """Resolve the CLI config; an explicit --log-level wins over the env."""
    if log_level:
        return CliConfig(log_level=log_level.upper())
    try:
        return CliConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(f"${LOG_LEVEL_ENV}: {exc}") from None


# Import and register subcommands
from selector_builder.cli.render import render  # noqa: E402

cli.add_command(render)
