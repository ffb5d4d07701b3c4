from __future__ import annotations

import secrets

from .base import EntropyStrategy


class SecretsStrategy(EntropyStrategy):
    """Uses the operating system CSPRNG through ``secrets.randbelow``."""

    name = "secrets"
    secure = True
    rank = 1

    @classmethod
    def is_available(cls) -> bool:
        try:
            secrets.randbelow(2)
        except (NotImplementedError, OSError):
            return False
        return True

    def below(self, bound: int) -> int:
        return secrets.randbelow(bound)
