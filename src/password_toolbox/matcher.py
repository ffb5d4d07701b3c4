from __future__ import annotations

import logging

from .windowing import iter_windows
from .wordlist import WordlistHandle

LOGGER = logging.getLogger(__name__)


def contains_line(handle: WordlistHandle, target: str) -> bool:
    """
    Return True when ``target`` is one whole line of the handle's dictionary.

    Without a configured path this is simply False. With caching enabled the
    cached text is searched (and loaded first when missing); otherwise the file
    is scanned one page at a time.
    """
    if handle.path is None:
        return False
    if not target or "\n" in target:
        return False
    if handle.cache_enabled:
        return _text_has_line(handle.cached_text(), target)
    return _scan_has_line(handle, target)


def is_listed(
    handle: WordlistHandle, password: str, case_insensitive: bool = True
) -> bool:
    """Check a password against the dictionary, lowercasing it first if requested."""
    if case_insensitive:
        password = password.lower()
    return contains_line(handle, password)


def _text_has_line(text: str, target: str) -> bool:
    if not text:
        return False
    if text == target:
        return True
    if text.startswith(target + "\n") or text.endswith("\n" + target):
        return True
    return f"\n{target}\n" in text


def _scan_has_line(handle: WordlistHandle, target: str) -> bool:
    # ``carry`` holds the unterminated last line of the previous page so that a
    # line split across a page boundary is compared whole.
    carry = ""
    for window in iter_windows(handle.path, handle.chunk_size, handle.encoding):
        lines = (carry + window.text).split("\n")
        carry = lines.pop()
        if target in lines:
            LOGGER.debug("Found dictionary match on page %d of %s.", window.page, handle.path)
            return True
    return carry == target
