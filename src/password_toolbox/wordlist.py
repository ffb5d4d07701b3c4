from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidArgumentError
from .windowing import DEFAULT_CHUNK_SIZE, read_text, resolve_encoding

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class WordlistHandle:
    """
    Reference to a newline-delimited dictionary file.

    When ``cache_enabled`` is set the full text can be held in
    ``cached_content``. The cache is only filled by ``load_cache`` (or lazily by
    the matcher and picker) and is never refreshed automatically: reload it
    after the file changes on disk.
    """

    path: str | None = None
    encoding: str | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    cache_enabled: bool = False
    cached_content: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.path is not None:
            self.path = str(self.path) or None
        if self.encoding == "":
            self.encoding = None
        if self.chunk_size is None:
            self.chunk_size = DEFAULT_CHUNK_SIZE
        if self.chunk_size <= 0:
            raise InvalidArgumentError("Invalid chunk size.")

    def set_path(self, path: str | Path | None) -> "WordlistHandle":
        """Point the handle at another file, dropping the cache if the path changes."""
        new_path = str(path) if path is not None and str(path) != "" else None
        if new_path != self.path:
            self.cached_content = None
            self.path = new_path
        return self

    def set_cache_enabled(self, value: bool) -> "WordlistHandle":
        self.cache_enabled = bool(value)
        if not self.cache_enabled:
            self.cached_content = None
        return self

    def set_chunk_size(self, chunk_size: int | None) -> "WordlistHandle":
        if chunk_size is None:
            self.chunk_size = DEFAULT_CHUNK_SIZE
            return self
        if chunk_size <= 0:
            raise InvalidArgumentError("Invalid chunk size.")
        self.chunk_size = chunk_size
        return self

    def set_encoding(self, encoding: str | None) -> "WordlistHandle":
        """Change the codec, dropping the cache if the text would decode differently."""
        new_encoding = resolve_encoding(encoding) if encoding else None
        if _codec_name(new_encoding) != _codec_name(self.encoding):
            self.cached_content = None
        self.encoding = new_encoding
        return self

    @property
    def is_cached(self) -> bool:
        return self.cached_content is not None

    def invalidate_cache(self) -> "WordlistHandle":
        self.cached_content = None
        return self

    def load_cache(self) -> bool:
        """
        Read the whole dictionary into ``cached_content``.

        Returns False without reading when caching is disabled or no path is set.
        """
        if not self.cache_enabled or self.path is None:
            return False
        self.cached_content = read_text(self.path, self.encoding)
        LOGGER.debug(
            "Cached %d characters from dictionary %s.",
            len(self.cached_content),
            self.path,
        )
        return True

    def cached_text(self) -> str:
        """Return the cached text, loading it once if needed."""
        if self.cached_content is None:
            self.load_cache()
        return self.cached_content or ""

    def full_text(self) -> str:
        """Return the whole dictionary, through the cache when it is enabled."""
        if self.cache_enabled:
            return self.cached_text()
        return read_text(self.path, self.encoding)


def _codec_name(encoding: str | None) -> str:
    return codecs.lookup(resolve_encoding(encoding)).name
