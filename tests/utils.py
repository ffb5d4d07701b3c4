from __future__ import annotations

import math
from pathlib import Path
from typing import Sequence

import numpy as np


def write_wordlist(path: Path, text: str, encoding: str = "utf-8") -> Path:
    """Write ``text`` verbatim (no newline translation) to ``path``."""
    path.write_bytes(text.encode(encoding))
    return path


def chi_square(samples: Sequence[int], minimum: int, span: int) -> float:
    """Pearson chi-square statistic of ``samples`` against a uniform distribution."""
    counts = np.bincount(np.asarray(samples) - minimum, minlength=span)
    assert counts.size == span, "sample outside of the expected range"
    expected = len(samples) / span
    return float(((counts - expected) ** 2 / expected).sum())


def chi_square_critical(degrees_of_freedom: int, z: float = 3.719) -> float:
    """Wilson-Hilferty approximation of the chi-square quantile (z=3.719 ~ p=1e-4)."""
    k = float(degrees_of_freedom)
    term = 1.0 - 2.0 / (9.0 * k) + z * math.sqrt(2.0 / (9.0 * k))
    return k * term**3
