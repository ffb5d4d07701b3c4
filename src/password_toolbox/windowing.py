from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import Iterator

from .errors import DictionaryReadError, InvalidArgumentError
from .models import Window

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_ENCODING = "utf-8"
# Widest character (in bytes) of any supported encoding.
MAX_CHAR_WIDTH = 4
# Bytes replayed before a page so the decoder reaches the state a sequential
# read of the file would have at the page start.
LOOKBACK = MAX_CHAR_WIDTH - 1
DECODE_ERRORS = "replace"

LOGGER = logging.getLogger(__name__)


def resolve_encoding(encoding: str | None) -> str:
    """Return a usable codec name, falling back to DEFAULT_ENCODING."""
    name = encoding or DEFAULT_ENCODING
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise InvalidArgumentError(f"Unknown encoding: {name}") from exc
    return name


def read_window(
    path: str | Path | None,
    chunk_size: int | None = None,
    page: int | None = None,
    encoding: str | None = None,
) -> str:
    """Return the decoded text of one page of a file ("" once past the end)."""
    return read_page(path, chunk_size, page, encoding).text


def read_page(
    path: str | Path | None,
    chunk_size: int | None = None,
    page: int | None = None,
    encoding: str | None = None,
) -> Window:
    """
    Read page ``page`` (1-indexed) of ``chunk_size`` bytes from ``path``.

    The window holds every character a sequential decode of the file emits while
    consuming the bytes ``[chunk_size * (page - 1), chunk_size * page)``. Up to
    LOOKBACK bytes before the page are replayed through the decoder first, so a
    character which begins before the boundary is completed in this page, a
    character still incomplete at the end of the page is left for the next one,
    and an invalid sequence cut by the boundary becomes U+FFFD exactly once.
    Joining the text of pages 1, 2, 3, ... therefore equals ``read_text``.
    """
    if path is None or str(path) == "":
        raise InvalidArgumentError("Invalid file path.")
    if chunk_size is None or chunk_size <= 0:
        chunk_size = DEFAULT_CHUNK_SIZE
    if page is None or page < 1:
        page = 1
    codec = resolve_encoding(encoding)

    start = chunk_size * (page - 1)
    fetch_start = max(0, start - LOOKBACK)
    try:
        with open(path, "rb") as handle:
            file_size = os.fstat(handle.fileno()).st_size
            if start >= file_size:
                return Window(str(path), chunk_size, page, codec, start, start, "", True)
            handle.seek(fetch_start)
            data = handle.read(chunk_size + start - fetch_start)
    except OSError as exc:
        raise DictionaryReadError(f"Unable to read from {path}.") from exc

    at_eof = start + chunk_size >= file_size
    lookback = start - fetch_start
    decoder = codecs.getincrementaldecoder(codec)(errors=DECODE_ERRORS)
    # Output for the replayed bytes belongs to the previous page.
    decoder.decode(data[:lookback])
    pending = len(decoder.getstate()[0])
    text = decoder.decode(data[lookback:], final=at_eof)
    LOGGER.debug(
        "Read page %d of %s: %d bytes fetched, %d chars decoded.",
        page,
        path,
        len(data),
        len(text),
    )
    return Window(
        path=str(path),
        chunk_size=chunk_size,
        page=page,
        encoding=codec,
        start_byte=start - pending,
        end_byte=min(start + chunk_size, file_size),
        text=text,
        at_eof=at_eof,
    )


def iter_windows(
    path: str | Path | None,
    chunk_size: int | None = None,
    encoding: str | None = None,
) -> Iterator[Window]:
    """Yield the non-empty pages of ``path`` in order, one chunk in memory at a time."""
    page = 1
    while True:
        window = read_page(path, chunk_size, page, encoding)
        if window.text:
            yield window
        if window.at_eof:
            return
        page += 1


def read_text(path: str | Path | None, encoding: str | None = None) -> str:
    """Read a whole file as text without newline translation."""
    if path is None or str(path) == "":
        raise InvalidArgumentError("Invalid file path.")
    codec = resolve_encoding(encoding)
    try:
        with open(path, "r", encoding=codec, errors=DECODE_ERRORS, newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise DictionaryReadError(f"Unable to load the dictionary {path}.") from exc
