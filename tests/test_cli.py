import json
import re
from pathlib import Path

import click
from typer.testing import CliRunner

from password_toolbox.cli import app
from tests.utils import write_wordlist

runner = CliRunner()


def test_cli_token_respects_length_and_pattern():
    """token command prints a password drawn from the given pattern."""
    result = runner.invoke(app, ["token", "--length", "24", "--pattern", "xyz"])
    assert result.exit_code == 0
    password = result.stdout.strip()
    assert len(password) == 24
    assert set(password) <= set("xyz")


def test_cli_number_is_within_bounds():
    """number command prints an integer inside the inclusive range."""
    result = runner.invoke(app, ["number", "10", "12"])
    assert result.exit_code == 0
    assert int(result.stdout.strip()) in {10, 11, 12}


def test_cli_number_rejects_bad_bounds():
    """number command reports invalid bounds as a usage error."""
    result = runner.invoke(app, ["number", "0", "0"])
    assert result.exit_code == 1

    result = runner.invoke(app, ["number", "0", "0"], standalone_mode=False)
    assert isinstance(result.exception, click.ClickException)
    assert "Maximum value" in str(result.exception)


def test_cli_lookup_outputs_json(tmp_path: Path):
    """lookup command reports whole-line matches as JSON."""
    dictionary = write_wordlist(tmp_path / "common.txt", "123456\npassword\nqwerty\n")
    result = runner.invoke(
        app, ["lookup", "PASSWORD", "--dictionary", str(dictionary), "--chunk-size", "5"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["found"] is True
    assert payload["word"] == "PASSWORD"
    assert payload["cached"] is False

    result = runner.invoke(
        app,
        ["lookup", "PASSWORD", "-d", str(dictionary), "--cache", "--case-sensitive"],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["found"] is False
    assert payload["cached"] is True


def test_cli_lookup_requires_dictionary():
    """lookup command refuses to run without a dictionary."""
    result = runner.invoke(app, ["lookup", "secret"])
    assert result.exit_code == 2


def test_cli_passphrase_uses_dictionary(tmp_path: Path):
    """passphrase command combines a dictionary word with digits."""
    dictionary = write_wordlist(tmp_path / "animals.txt", "cat\nhorse\nzebra\n")
    result = runner.invoke(
        app,
        ["passphrase", "-d", str(dictionary), "--length", "7", "--numeric-length", "2"],
    )
    assert result.exit_code == 0
    assert re.fullmatch(r"(horse|zebra)\d{2}|\d{2}(horse|zebra)", result.stdout.strip())


def test_cli_passphrase_missing_dictionary(tmp_path: Path):
    """passphrase command surfaces unreadable dictionaries as errors."""
    args = ["passphrase", "-d", str(tmp_path / "missing.txt"), "--length", "5"]
    result = runner.invoke(app, args)
    assert result.exit_code == 1

    result = runner.invoke(app, args, standalone_mode=False)
    assert isinstance(result.exception, click.ClickException)
    assert "Unable to load the dictionary" in str(result.exception)


def test_cli_passphrase_reads_yaml_config(tmp_path: Path):
    """passphrase command picks its dictionary and lengths from a config file."""
    dictionary = write_wordlist(tmp_path / "animals.txt", "cat\nhorse\nzebra\n")
    config_path = tmp_path / "toolbox.yaml"
    config_path.write_text(
        f"dictionary_path: {dictionary}\n"
        "cache_enabled: true\n"
        "generator:\n"
        "  length: 3\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["passphrase", "--config", str(config_path)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "cat"


def test_cli_window_prints_page(tmp_path: Path):
    """window command prints one character-aligned page."""
    path = write_wordlist(tmp_path / "euro.txt", "a€b")
    result = runner.invoke(app, ["window", str(path), "--chunk-size", "2", "--page", "2"])
    assert result.exit_code == 0
    assert result.stdout == "€"


def test_cli_entropy_reports_strategy():
    """entropy command describes the selected entropy source."""
    result = runner.invoke(app, ["entropy"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"name": "secrets", "secure": True, "rank": 1}

    result = runner.invoke(app, ["entropy", "--strategy", "dice"])
    assert result.exit_code == 1


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "dictionary_path" in result.stdout
    assert "entropy_strategy: auto" in result.stdout


def test_cli_reports_invalid_config(tmp_path: Path):
    """Commands report invalid configuration files without a traceback."""
    config_path = tmp_path / "toolbox.yaml"
    config_path.write_text("chunk_size: 0\n", encoding="utf-8")
    result = runner.invoke(app, ["print-config", "--config", str(config_path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)

    missing = tmp_path / "missing.yaml"
    result = runner.invoke(app, ["token", "--config", str(missing)], standalone_mode=False)
    assert isinstance(result.exception, click.ClickException)
    assert "Unable to read configuration" in str(result.exception)
