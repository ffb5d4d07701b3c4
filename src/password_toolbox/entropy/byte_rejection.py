from __future__ import annotations

import os
from typing import Callable

from ..errors import GenerationError
from .base import EntropyStrategy

# Each draw is accepted with probability > 1/2.
MAX_REJECTIONS = 128


class UrandomStrategy(EntropyStrategy):
    """
    Turns raw CSPRNG bytes into bounded integers by rejection sampling.

    A draw takes just enough bytes to cover ``bound - 1``, masks them down to the
    next power of two and is thrown away when it lands outside ``[0, bound)``.
    """

    name = "urandom"
    secure = True
    rank = 2

    def __init__(self, source: Callable[[int], bytes] = os.urandom) -> None:
        self._source = source

    @classmethod
    def is_available(cls) -> bool:
        try:
            os.urandom(1)
        except (NotImplementedError, OSError):
            return False
        return True

    def below(self, bound: int) -> int:
        if bound <= 1:
            return 0
        bits = (bound - 1).bit_length()
        width = (bits + 7) // 8
        mask = (1 << bits) - 1
        for _ in range(MAX_REJECTIONS):
            value = int.from_bytes(self._source(width), "big") & mask
            if value < bound:
                return value
        raise GenerationError(
            f"Entropy source produced no value below {bound} after {MAX_REJECTIONS} draws."
        )
