from __future__ import annotations


class ToolboxError(Exception):
    """Base class for every error raised by password_toolbox."""


class InvalidArgumentError(ToolboxError, ValueError):
    """Raised before any I/O when an argument cannot be used."""


class DictionaryNotConfiguredError(InvalidArgumentError):
    """Raised when an operation needs a dictionary path and none is set."""


class DictionaryReadError(ToolboxError, OSError):
    """Raised when a dictionary file cannot be opened or read."""


class GenerationError(ToolboxError, RuntimeError):
    """Raised when the entropy source fails or a random pick cannot complete."""


class WordNotFoundError(GenerationError):
    """Raised when no dictionary line of the requested length was sampled."""
