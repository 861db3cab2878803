"""textprep tokenize / purify / shorten / dedupe."""

from __future__ import annotations

import sys

import click


def _read_stdin_if_empty(values: tuple[str, ...]) -> tuple[str, ...]:
    if values:
        return values
    if sys.stdin.isatty():
        return ()
    return (sys.stdin.read(),)


@click.command()
@click.argument("fields", nargs=-1)
@click.option("--language", default=None, help="Two-letter code selecting the stop-word set.")
@click.pass_context
def tokenize(ctx: click.Context, fields: tuple[str, ...], language: str | None) -> None:
    """Print the search token string for FIELDS (or stdin)."""
    from textprep.core.cli.common import load_options
    from textprep.text.tokenize import tokenize as build_tokens

    options = load_options(ctx, language=language.lower() if language else None)
    click.echo(build_tokens(*_read_stdin_if_empty(fields), options=options))


@click.command()
@click.argument("text")
@click.option("--separator", default=None, help="Replacement separator (default: configured replacer).")
@click.option("--legacy", is_flag=True, help="Keep punctuation, collapse separators in fixed steps.")
@click.pass_context
def purify(ctx: click.Context, text: str, separator: str | None, legacy: bool) -> None:
    """Print TEXT lowercased with words joined by a single separator."""
    from textprep.core.cli.common import load_options
    from textprep.text.purify import purify as purify_text

    options = load_options(ctx, legacy_purify=legacy or None)
    click.echo(purify_text(text, separator, options=options))


@click.command()
@click.argument("text")
@click.option("--limit", type=int, required=True, help="Character or word budget.")
@click.option("--words", "use_words", is_flag=True, help="Count words instead of characters.")
@click.option("--ellipsis", "add_ellipsis", is_flag=True, help="Append '...' when words were dropped.")
def shorten(text: str, limit: int, use_words: bool, add_ellipsis: bool) -> None:
    """Print TEXT with markup removed, cut to --limit characters or words."""
    from textprep.text.shorten import shorten as shorten_text

    click.echo(shorten_text(text, limit, use_words, add_ellipsis))


@click.command()
@click.argument("items", nargs=-1)
def dedupe(items: tuple[str, ...]) -> None:
    """Print each distinct ITEM once, in order of first occurrence."""
    from textprep.text.unique import dedupe as unique_items

    for item in unique_items(items):
        click.echo(item)
