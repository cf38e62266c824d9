"""CLI commands: styletree dom / css / style -- display parsed structures."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from styletree.config import StyletreeConfig
from styletree.dom import parse_html
from styletree.parser import ParseError
from styletree.printing import format_document, format_styled_tree
from styletree.style import style_tree
from styletree.stylesheet import parse_stylesheet


def _config(ctx: click.Context) -> StyletreeConfig:
    return ctx.obj if isinstance(ctx.obj, StyletreeConfig) else StyletreeConfig()


def _read(path: str, config: StyletreeConfig) -> str:
    return Path(path).read_text(encoding=config.encoding)


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True))
@click.option("--indent", type=int, default=None, help="Indentation step")
@click.pass_context
def dom(ctx: click.Context, htmlfile: str, indent: int | None) -> None:
    """Parse a markup file and print its document tree."""
    config = _config(ctx)
    try:
        root = parse_html(_read(htmlfile, config))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(format_document(root, step=indent if indent is not None else config.indent))


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.pass_context
def css(ctx: click.Context, cssfile: str) -> None:
    """Parse a stylesheet file and print its rules."""
    config = _config(ctx)
    try:
        stylesheet = parse_stylesheet(_read(cssfile, config))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if stylesheet.rules:
        click.echo(str(stylesheet))
        click.echo()
    click.echo(f"Rules: {len(stylesheet.rules)}")


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True))
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("--indent", type=int, default=None, help="Indentation step")
@click.pass_context
def style(ctx: click.Context, htmlfile: str, cssfile: str, indent: int | None) -> None:
    """Resolve a stylesheet against a markup file and print the styled tree."""
    config = _config(ctx)
    try:
        root = parse_html(_read(htmlfile, config))
        stylesheet = parse_stylesheet(_read(cssfile, config))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    styled = style_tree(root, stylesheet)
    click.echo(format_styled_tree(styled, step=indent if indent is not None else config.indent))
