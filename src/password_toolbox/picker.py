from __future__ import annotations

import logging

from .errors import DictionaryNotConfiguredError, WordNotFoundError
from .sampler import Sampler, default_sampler
from .wordlist import WordlistHandle

DEFAULT_MAX_ATTEMPTS = 10_000

LOGGER = logging.getLogger(__name__)


def pick_line_of_length(
    handle: WordlistHandle,
    length: int,
    sampler: Sampler | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Return a random dictionary line that is exactly ``length`` characters long.

    A random ``chunk_size``-wide slice of the dictionary is taken. Its start is
    drawn from ``[0, len(text) - chunk_size]`` with both ends included, so the
    slice ending on the last character is reachable. The partial lines at both
    edges of the slice are discarded, and one of the remaining lines of the
    right length is chosen uniformly. Slices without such a line are
    re-sampled, up to ``max_attempts`` times.
    """
    if handle.path is None:
        raise DictionaryNotConfiguredError("No dictionary has been defined.")
    if length <= 0:
        return ""
    text = handle.full_text()
    if not text:
        return ""
    sampler = sampler or default_sampler()

    chunk_size = handle.chunk_size
    upper = len(text) - chunk_size
    for attempt in range(1, max(1, max_attempts) + 1):
        start = sampler.random_int(0, upper) if upper > 0 else 0
        candidates = [
            line for line in _window_lines(text, start, chunk_size) if len(line) == length
        ]
        if candidates:
            LOGGER.debug("Picked a %d-character line after %d attempt(s).", length, attempt)
            return sampler.choice(candidates)
    raise WordNotFoundError(
        f"No {length}-character line found in {handle.path} after {max_attempts} attempts."
    )


def _window_lines(text: str, start: int, chunk_size: int) -> list[str]:
    """Return the complete lines of ``text[start:start + chunk_size]``."""
    end = start + chunk_size
    window = text[start:end]
    if start > 0 and text[start - 1] != "\n":
        head = window.find("\n")
        if head == -1:
            return []
        window = window[head + 1 :]
    if end < len(text) and not window.endswith("\n"):
        tail = window.rfind("\n")
        if tail == -1:
            return []
        window = window[:tail]
    elif window.endswith("\n"):
        window = window[:-1]
    if not window:
        return []
    return window.split("\n")
