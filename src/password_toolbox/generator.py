from __future__ import annotations

import logging

from .errors import DictionaryNotConfiguredError, GenerationError, InvalidArgumentError
from .picker import DEFAULT_MAX_ATTEMPTS, pick_line_of_length
from .sampler import DIGITS, Sampler, default_sampler
from .wordlist import WordlistHandle

LOGGER = logging.getLogger(__name__)


def generate(length: int, pattern: str | None = None, sampler: Sampler | None = None) -> str:
    """Generate a random password of ``length`` characters taken from ``pattern``."""
    if length <= 0:
        return ""
    sampler = sampler or default_sampler()
    try:
        return sampler.random_token(length, pattern)
    except (GenerationError, InvalidArgumentError) as exc:
        raise GenerationError("Unable to generate the password.") from exc


def generate_human_readable(
    handle: WordlistHandle,
    length: int,
    numeric_length: int = 0,
    sampler: Sampler | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Generate a password made of a dictionary word and an optional number.

    ``length`` is the total length. When ``numeric_length`` is positive a string
    of that many digits is placed before or after the word (chosen at random)
    and the word gets the remaining characters. A ``numeric_length`` of at least
    ``length`` yields just the number.
    """
    if length <= 0:
        return ""
    if handle.path is None:
        raise DictionaryNotConfiguredError("No dictionary has been defined.")
    sampler = sampler or default_sampler()

    numeric_length = max(0, numeric_length)
    number = ""
    if numeric_length > 0:
        length = max(length, numeric_length)
        number = sampler.random_token(numeric_length, DIGITS)
        if numeric_length == length:
            return number
        length -= numeric_length

    word = pick_line_of_length(handle, length, sampler=sampler, max_attempts=max_attempts)
    LOGGER.debug("Composing %d-character word with %d digits.", len(word), len(number))
    if sampler.random_int(0, 1) == 1:
        return word + number
    return number + word
