from __future__ import annotations

import logging
from collections import Counter
from typing import Optional

from .config import DEFAULT_CONFIG, CrackConfig
from .results import TextFeatures
from .scoring import chi_squared_english
from .utils import BytesLike, columns, ensure_ascii, normalize_az, printable_ratio

logger = logging.getLogger(__name__)


def index_of_coincidence(az: str) -> float:
    """IoC for an A-Z string; returns 0.0 if too short."""
    n = len(az)
    if n < 2:
        return 0.0
    counts = Counter(az)
    num = sum(c * (c - 1) for c in counts.values())
    return num / (n * (n - 1))


def average_column_ioc(az: str, period: int) -> float:
    cols = columns(az, period)
    return sum(index_of_coincidence(col) for col in cols) / period


def ioc_scan(text: BytesLike, max_len: int = 20) -> list[tuple[int, float]]:
    """Average column IoC for every period 1..max_len, best first."""
    az = normalize_az(ensure_ascii(text))
    if len(az) < 2:
        return []

    scores = [(k, average_column_ioc(az, k)) for k in range(1, max_len + 1)]
    return sorted(scores, key=lambda x: x[1], reverse=True)


def estimate_key_lengths(ciphertext: BytesLike, *, config: Optional[CrackConfig] = None) -> list[int]:
    """
    Rank candidate repeating-key periods, most likely first.

    Only periods whose columns would each receive at least
    ``config.min_column_letters`` letters are returned. Each period is scored by
    its average column IoC minus ``config.length_penalty * period``; the penalty
    is small next to the gap between English and random IoC, but enough to keep
    a period ahead of its own multiples. Equal scores prefer the shorter period.
    """
    cfg = config or DEFAULT_CONFIG
    az = normalize_az(ensure_ascii(ciphertext, what="ciphertext"))

    max_len = min(cfg.max_key_length, len(az) // cfg.min_column_letters)
    ranked: list[tuple[float, int]] = []
    for period in range(1, max_len + 1):
        avg = average_column_ioc(az, period)
        ranked.append((avg - cfg.length_penalty * period, period))

    ranked.sort(key=lambda sp: (-sp[0], sp[1]))
    lengths = [period for _, period in ranked]
    logger.debug("Key length ranking for %d letters: %s", len(az), lengths[:5])
    return lengths


def analyze_text(text: BytesLike) -> dict:
    """Summary statistics used by the `analyze` command."""
    data = ensure_ascii(text)
    az = normalize_az(data)
    n = len(data)

    feats = TextFeatures(
        length=n,
        letters=len(az),
        alpha_ratio=(len(az) / n) if n else 0.0,
        printable_ratio=printable_ratio(data),
        ioc=index_of_coincidence(az),
        chi2=chi_squared_english(az),
    )
    return feats.to_dict()
