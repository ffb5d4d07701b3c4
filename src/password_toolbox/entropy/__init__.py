from __future__ import annotations

import logging
import warnings
from typing import Any, Tuple, Type

from ..errors import GenerationError, InvalidArgumentError
from .base import EntropyStrategy
from .byte_rejection import UrandomStrategy
from .pseudo import PseudoRandomStrategy
from .secure_int import SecretsStrategy

__all__ = [
    "EntropyStrategy",
    "SecretsStrategy",
    "UrandomStrategy",
    "PseudoRandomStrategy",
    "RANKED_STRATEGIES",
    "create_strategy",
    "select_strategy",
]

LOGGER = logging.getLogger(__name__)

# Most preferred first.
RANKED_STRATEGIES: Tuple[Type[EntropyStrategy], ...] = (
    SecretsStrategy,
    UrandomStrategy,
    PseudoRandomStrategy,
)


def select_strategy() -> EntropyStrategy:
    """Instantiate the highest-ranked strategy that is available."""
    for strategy_cls in RANKED_STRATEGIES:
        if strategy_cls.is_available():
            strategy = strategy_cls()
            LOGGER.debug("Selected entropy strategy '%s'.", strategy.name)
            _warn_if_insecure(strategy)
            return strategy
    raise GenerationError("No entropy source is available.")


def create_strategy(name: str, **kwargs: Any) -> EntropyStrategy:
    """Factory for building entropy strategies by name ("auto" picks the best)."""
    normalized = name.lower().strip()
    if normalized == "auto":
        return select_strategy()
    for strategy_cls in RANKED_STRATEGIES:
        if strategy_cls.name == normalized:
            if not strategy_cls.is_available():
                raise GenerationError(
                    f"Entropy strategy '{normalized}' is not available on this platform."
                )
            strategy = strategy_cls(**kwargs)
            _warn_if_insecure(strategy)
            return strategy
    raise InvalidArgumentError(f"Unknown entropy strategy '{name}'.")


def _warn_if_insecure(strategy: EntropyStrategy) -> None:
    if strategy.secure:
        return
    message = (
        f"Entropy strategy '{strategy.name}' is not cryptographically secure; "
        "generated tokens must not be used as secrets."
    )
    LOGGER.warning(message)
    warnings.warn(message, RuntimeWarning, stacklevel=3)
