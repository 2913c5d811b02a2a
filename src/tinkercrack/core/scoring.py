from __future__ import annotations

import math
from collections import Counter
from types import MappingProxyType
from typing import Mapping

from .utils import normalize_az

# ----------------------------
# English reference profile
# ----------------------------

ENGLISH_FREQ: Mapping[str, float] = MappingProxyType({
    "E": 0.1270, "T": 0.0906, "A": 0.0817, "O": 0.0751, "I": 0.0697, "N": 0.0675,
    "S": 0.0633, "H": 0.0609, "R": 0.0599, "D": 0.0425, "L": 0.0403, "C": 0.0278,
    "U": 0.0276, "M": 0.0241, "W": 0.0236, "F": 0.0223, "G": 0.0202, "Y": 0.0197,
    "P": 0.0193, "B": 0.0149, "V": 0.0098, "K": 0.0077, "J": 0.0015, "X": 0.0015,
    "Q": 0.0010, "Z": 0.0007,
})

WORST_SCORE = math.inf


def letter_frequencies(text: bytes | str) -> dict[str, float]:
    """Relative frequency of each letter A-Z; all zeros when there are no letters."""
    az = normalize_az(text)
    n = len(az)
    counts = Counter(az)
    return {ch: (counts.get(ch, 0) / n if n else 0.0) for ch in ENGLISH_FREQ}


def chi_squared_english(az: str) -> float:
    """
    Chi-squared distance between the letter distribution of an A-Z string and English.

    Uses relative frequencies, so the value does not grow with text length and a
    single rejection threshold works for short and long inputs. Lower is better.
    """
    n = len(az)
    if n == 0:
        return WORST_SCORE

    counts = Counter(az)
    chi2 = 0.0
    for ch, expected in ENGLISH_FREQ.items():
        observed = counts.get(ch, 0) / n
        chi2 += (observed - expected) ** 2 / expected
    return chi2


def score(text: bytes | str) -> float:
    """Score decoded text against English; lower is better, no letters -> inf."""
    return chi_squared_english(normalize_az(text))
