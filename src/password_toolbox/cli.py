from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click
import typer
import yaml

from .config import ToolboxConfig, handle_from_config, load_config, sampler_from_config
from .errors import ToolboxError
from .generator import generate, generate_human_readable
from .matcher import is_listed
from .models import LookupResult
from .windowing import read_window

app = typer.Typer(help="Password toolbox CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@app.callback()
def configure_logging(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Generate passwords and look them up in large wordlists."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING), format=LOG_FORMAT
    )


@app.command()
def token(
    length: int | None = typer.Option(None, "--length", "-l", help="Password length."),
    pattern: str | None = typer.Option(
        None, "--pattern", "-p", help="Characters the password may contain."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print a random password drawn from a character pattern."""
    cfg = _load_config(config)
    if length is not None:
        cfg.generator.length = length
    if pattern:
        cfg.generator.pattern = pattern
    try:
        sampler = sampler_from_config(cfg)
        typer.echo(generate(cfg.generator.length, cfg.generator.pattern, sampler))
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc


@app.command()
def number(
    minimum: int = typer.Argument(..., help="Smallest value (>= 0)."),
    maximum: int = typer.Argument(..., help="Largest value (> 0)."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print a uniformly distributed integer from MINIMUM to MAXIMUM inclusive."""
    cfg = _load_config(config)
    try:
        typer.echo(str(sampler_from_config(cfg).random_int(minimum, maximum)))
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc


@app.command()
def passphrase(
    dictionary: Path | None = typer.Option(
        None, "--dictionary", "-d", help="Newline-delimited wordlist."
    ),
    length: int | None = typer.Option(None, "--length", "-l", help="Total length."),
    numeric_length: int | None = typer.Option(
        None, "--numeric-length", "-n", help="Digits added before or after the word."
    ),
    cache: bool | None = typer.Option(
        None, "--cache/--no-cache", help="Hold the whole dictionary in memory."
    ),
    chunk_size: int | None = typer.Option(None, "--chunk-size", help="Window size."),
    encoding: str | None = typer.Option(None, "--encoding", help="Dictionary encoding."),
    max_attempts: int | None = typer.Option(
        None, "--max-attempts", help="Windows to sample before giving up."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print a human-readable password built from a dictionary word."""
    cfg = _load_config(config)
    _apply_dictionary_overrides(cfg, dictionary, cache, chunk_size, encoding)
    if length is not None:
        cfg.generator.length = length
    if numeric_length is not None:
        cfg.generator.numeric_length = numeric_length
    if max_attempts is not None:
        cfg.max_pick_attempts = max_attempts
    try:
        handle = handle_from_config(cfg)
        password = generate_human_readable(
            handle,
            cfg.generator.length,
            cfg.generator.numeric_length,
            sampler=sampler_from_config(cfg),
            max_attempts=cfg.max_pick_attempts,
        )
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc
    LOGGER.info("Generated a %d-character passphrase.", len(password))
    typer.echo(password)


@app.command()
def lookup(
    word: str = typer.Argument(..., help="Password to look up."),
    dictionary: Path | None = typer.Option(
        None, "--dictionary", "-d", help="Newline-delimited wordlist."
    ),
    cache: bool | None = typer.Option(
        None, "--cache/--no-cache", help="Hold the whole dictionary in memory."
    ),
    case_insensitive: bool | None = typer.Option(
        None,
        "--case-insensitive/--case-sensitive",
        help="Lowercase the word before matching.",
    ),
    chunk_size: int | None = typer.Option(None, "--chunk-size", help="Page size."),
    encoding: str | None = typer.Option(None, "--encoding", help="Dictionary encoding."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Report whether WORD is a whole line of the dictionary, as JSON."""
    cfg = _load_config(config)
    _apply_dictionary_overrides(cfg, dictionary, cache, chunk_size, encoding)
    if case_insensitive is not None:
        cfg.case_insensitive = case_insensitive
    if not cfg.dictionary_path:
        raise typer.BadParameter("A dictionary is required (--dictionary or config).")
    try:
        handle = handle_from_config(cfg)
        found = is_listed(handle, word, case_insensitive=cfg.case_insensitive)
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc
    result = LookupResult(
        word=word,
        dictionary=cfg.dictionary_path,
        found=found,
        cached=cfg.cache_enabled,
    )
    typer.echo(json.dumps(asdict(result), indent=2))


@app.command()
def window(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    page: int = typer.Option(1, "--page", help="1-indexed page number."),
    chunk_size: int | None = typer.Option(None, "--chunk-size", help="Page size."),
    encoding: str | None = typer.Option(None, "--encoding", help="File encoding."),
) -> None:
    """Print one page of a file, cut on character boundaries."""
    try:
        text = read_window(path, chunk_size, page, encoding)
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc
    typer.echo(text, nl=False)


@app.command()
def entropy(
    strategy: str | None = typer.Option(
        None, "--strategy", help="auto, secrets, urandom or pseudo."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Show which entropy source backs random generation, as JSON."""
    cfg = _load_config(config)
    if strategy:
        cfg.entropy_strategy = strategy
    try:
        info = sampler_from_config(cfg).describe()
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc
    typer.echo(json.dumps(asdict(info), indent=2))


@app.command("print-config")
def print_config(config: Path | None = typer.Option(None, "--config", "-c")) -> None:
    """Print the effective configuration as YAML."""
    cfg = _load_config(config)
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config(path: Path | None) -> ToolboxConfig:
    try:
        return load_config(path)
    except OSError as exc:
        raise click.ClickException(f"Unable to read configuration {path}: {exc}") from exc
    except ToolboxError as exc:
        raise click.ClickException(str(exc)) from exc


def _apply_dictionary_overrides(
    config: ToolboxConfig,
    dictionary: Path | None,
    cache: bool | None,
    chunk_size: int | None,
    encoding: str | None,
) -> None:
    """Apply CLI overrides to dictionary-related config fields when provided."""
    if dictionary:
        config.dictionary_path = str(dictionary)
    if cache is not None:
        config.cache_enabled = cache
    if chunk_size is not None:
        config.chunk_size = chunk_size
    if encoding:
        config.dictionary_encoding = encoding


if __name__ == "__main__":
    main()
