from __future__ import annotations

import logging
import string
from typing import Sequence, TypeVar

from .entropy import EntropyStrategy, select_strategy
from .errors import GenerationError, InvalidArgumentError
from .models import EntropyInfo

DEFAULT_PATTERN = string.ascii_lowercase + string.ascii_uppercase + string.digits
DIGITS = string.digits

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Sampler:
    """Bias-free integer and token sampling on top of an entropy strategy."""

    def __init__(self, strategy: EntropyStrategy | None = None) -> None:
        self._strategy = strategy if strategy is not None else select_strategy()

    @property
    def strategy(self) -> EntropyStrategy:
        return self._strategy

    def describe(self) -> EntropyInfo:
        return EntropyInfo(
            name=self._strategy.name,
            secure=self._strategy.secure,
            rank=self._strategy.rank,
        )

    def random_int(self, minimum: int, maximum: int) -> int:
        """
        Return an integer drawn uniformly from ``[minimum, maximum]``.

        ``minimum`` must be >= 0 and ``maximum`` > 0. When ``minimum >= maximum``
        the range becomes ``[minimum, minimum + 1]``.
        """
        if minimum < 0:
            raise InvalidArgumentError("Minimum value must be greater or equal than zero.")
        if maximum <= 0:
            raise InvalidArgumentError("Maximum value must be greater than zero.")
        if minimum >= maximum:
            maximum = minimum + 1
        try:
            offset = self._strategy.below(maximum - minimum + 1)
        except (NotImplementedError, OSError) as exc:
            raise GenerationError("Unable to generate the number.") from exc
        return minimum + offset

    def random_token(self, length: int, pattern: str | None = None) -> str:
        """Return ``length`` characters drawn independently from ``pattern``."""
        if length <= 0:
            return ""
        if not pattern:
            pattern = DEFAULT_PATTERN
        if len(pattern) == 1:
            return pattern * length
        last = len(pattern) - 1
        return "".join(pattern[self.random_int(0, last)] for _ in range(length))

    def choice(self, items: Sequence[T]) -> T:
        """Return one element of ``items`` chosen uniformly."""
        if not items:
            raise InvalidArgumentError("Cannot choose from an empty sequence.")
        if len(items) == 1:
            return items[0]
        return items[self.random_int(0, len(items) - 1)]


_DEFAULT_SAMPLER: Sampler | None = None


def default_sampler() -> Sampler:
    """Return the process-wide sampler, selecting its strategy on first use."""
    global _DEFAULT_SAMPLER
    if _DEFAULT_SAMPLER is None:
        _DEFAULT_SAMPLER = Sampler()
        LOGGER.debug("Default sampler uses '%s'.", _DEFAULT_SAMPLER.strategy.name)
    return _DEFAULT_SAMPLER


def reset_default_sampler(strategy: EntropyStrategy | None = None) -> None:
    """Replace the default sampler (None re-selects on next use)."""
    global _DEFAULT_SAMPLER
    _DEFAULT_SAMPLER = Sampler(strategy) if strategy is not None else None


def random_int(minimum: int, maximum: int) -> int:
    return default_sampler().random_int(minimum, maximum)


def random_token(length: int, pattern: str | None = None) -> str:
    return default_sampler().random_token(length, pattern)
