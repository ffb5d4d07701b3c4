from __future__ import annotations

from abc import ABC, abstractmethod


class EntropyStrategy(ABC):
    """Abstract source of uniformly distributed integers."""

    name: str = "base"
    secure: bool = True
    rank: int = 0

    @classmethod
    def is_available(cls) -> bool:
        """Return True when the backing source can be used on this platform."""
        return True

    @abstractmethod
    def below(self, bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, bound)``."""
        raise NotImplementedError
