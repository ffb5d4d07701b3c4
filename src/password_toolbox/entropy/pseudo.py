from __future__ import annotations

import random

from .base import EntropyStrategy


class PseudoRandomStrategy(EntropyStrategy):
    """
    Mersenne Twister fallback. Not suitable for secrets; only selected when no
    secure source is available, and selecting it raises a RuntimeWarning.
    """

    name = "pseudo"
    secure = False
    rank = 3

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def below(self, bound: int) -> int:
        return self._random.randrange(bound)
