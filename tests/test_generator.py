import re
from pathlib import Path

import pytest

from password_toolbox.entropy import SecretsStrategy, UrandomStrategy
from password_toolbox.errors import DictionaryNotConfiguredError, GenerationError
from password_toolbox.generator import generate, generate_human_readable
from password_toolbox.sampler import Sampler
from password_toolbox.wordlist import WordlistHandle
from tests.utils import write_wordlist

WORDS = "cat\ndog\nhorse\nzebra\n"


def _handle(tmp_path: Path) -> WordlistHandle:
    path = write_wordlist(tmp_path / "animals.txt", WORDS)
    return WordlistHandle(path=str(path))


def test_generate_uses_pattern():
    password = generate(16, "abc", Sampler(SecretsStrategy()))
    assert len(password) == 16
    assert set(password) <= set("abc")
    assert generate(0) == ""


def test_generate_wraps_entropy_failures():
    def broken(size: int) -> bytes:
        raise OSError("no entropy")

    with pytest.raises(GenerationError):
        generate(8, sampler=Sampler(UrandomStrategy(source=broken)))


def test_word_only_passphrase(tmp_path: Path):
    handle = _handle(tmp_path)
    assert {generate_human_readable(handle, 5) for _ in range(100)} == {"horse", "zebra"}


def test_word_and_number_in_either_order(tmp_path: Path):
    handle = _handle(tmp_path)
    results = [generate_human_readable(handle, 5, numeric_length=2) for _ in range(200)]
    suffixed = [value for value in results if re.fullmatch(r"(cat|dog)\d{2}", value)]
    prefixed = [value for value in results if re.fullmatch(r"\d{2}(cat|dog)", value)]
    assert len(suffixed) + len(prefixed) == len(results)
    assert suffixed and prefixed


def test_numeric_length_covering_total_returns_digits(tmp_path: Path):
    handle = _handle(tmp_path)
    assert re.fullmatch(r"\d{4}", generate_human_readable(handle, 4, numeric_length=4))
    assert re.fullmatch(r"\d{6}", generate_human_readable(handle, 3, numeric_length=6))


def test_passphrase_requires_dictionary():
    with pytest.raises(DictionaryNotConfiguredError):
        generate_human_readable(WordlistHandle(), 8)
    assert generate_human_readable(WordlistHandle(), 0) == ""


def test_passphrase_without_matching_word(tmp_path: Path):
    handle = _handle(tmp_path)
    with pytest.raises(GenerationError):
        generate_human_readable(handle, 9, max_attempts=10)
