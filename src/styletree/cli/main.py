"""Styletree CLI entry point: Click group with subcommands."""

from __future__ import annotations

import click

from styletree import __version__
from styletree.config import LOG_LEVELS, load_config
from styletree.log import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="styletree")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: STYLETREE_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Styletree - parse markup and stylesheets into a styled element tree."""
    config = load_config()
    configure_logging(log_level or config.log_level)
    ctx.obj = config


# Import and register subcommands
from styletree.cli.inspect import css, dom, style  # noqa: E402

cli.add_command(dom)
cli.add_command(css)
cli.add_command(style)
