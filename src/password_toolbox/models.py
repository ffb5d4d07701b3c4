from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Window:
    """A decoded, boundary-safe page of a dictionary file."""

    path: str
    chunk_size: int
    page: int
    encoding: str
    start_byte: int
    end_byte: int
    text: str
    at_eof: bool = False


@dataclass(slots=True)
class LookupResult:
    """Outcome of a dictionary lookup, as reported by the CLI."""

    word: str
    dictionary: str
    found: bool
    cached: bool


@dataclass(slots=True)
class EntropyInfo:
    """Describes the entropy strategy backing a sampler."""

    name: str
    secure: bool
    rank: int
