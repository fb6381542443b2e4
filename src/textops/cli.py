"""CLI entry point for textops."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from textops.config import load_config
from textops.ops.base import InvalidArgumentError
from textops.ops.ids import convert_uuid
from textops.ops.join import build_sentence_list, combine_array, split_args
from textops.ops.text import capitalise, limit_characters, remove_color, strip_diacritics
from textops.types import ChatColor

console = Console(stderr=True)


def _run(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call an operation, turning InvalidArgumentError into exit status 1."""
    try:
        return func(*args, **kwargs)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Verbose output.")
def main(verbose: bool) -> None:
    """String manipulation helpers."""
    config = load_config(verbose=verbose or None)
    if config.verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.option("--separator", "-s", default=None, help="Text placed between words.")
@click.option("--start", default=0, type=int, help="Index of the first word to use.")
@click.argument("words", nargs=-1)
def combine(separator: str | None, start: int, words: tuple[str, ...]) -> None:
    """Join WORDS with a separator."""
    config = load_config(separator=separator)
    click.echo(combine_array(start, config.separator, words))


@main.command()
@click.option("--separator", "-s", default=None, help="Text placed between words.")
@click.option("--start", default=0, type=int, help="Index of the first word to use.")
@click.argument("words", nargs=-1)
def split(separator: str | None, start: int, words: tuple[str, ...]) -> None:
    """Join WORDS and split them again, one fragment per line."""
    config = load_config(separator=separator)
    for part in split_args(start, config.separator, words):
        click.echo(part)


@main.command()
@click.argument("words", nargs=-1)
def sentence(words: tuple[str, ...]) -> None:
    """Format WORDS as a list, e.g. "a, b and c"."""
    click.echo(_run(build_sentence_list, words))


@main.command("capitalise")
@click.option("--keep-case", is_flag=True, default=False,
              help="Leave the rest of each word untouched.")
@click.argument("text")
def capitalise_cmd(keep_case: bool, text: str) -> None:
    """Capitalise every word in TEXT."""
    click.echo(capitalise(text, force_lower_case=not keep_case))


@main.command("strip-diacritics")
@click.argument("text")
def strip_diacritics_cmd(text: str) -> None:
    """Remove accents from TEXT."""
    click.echo(strip_diacritics(text))


@main.command("uuid")
@click.argument("text")
def uuid_cmd(text: str) -> None:
    """Print TEXT as a canonical UUID."""
    click.echo(str(_run(convert_uuid, text)))


@main.command()
@click.option("--max", "max_length", required=True, type=int, help="Maximum length.")
@click.argument("text")
def limit(max_length: int, text: str) -> None:
    """Truncate TEXT to a maximum length."""
    click.echo(_run(limit_characters, text, max_length))


@main.command("strip-color")
@click.option("--legacy", is_flag=True, default=False,
              help="Return the input unchanged, as older releases did.")
@click.argument("text")
def strip_color(legacy: bool, text: str) -> None:
    """Remove chat colour codes from TEXT."""
    config = load_config(legacy_color_strip=legacy or None)
    click.echo(remove_color(text, *ChatColor, legacy=config.legacy_color_strip))
