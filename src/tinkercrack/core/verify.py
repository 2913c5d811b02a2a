from __future__ import annotations

import math


def accept(score: float, threshold: float) -> bool:
    """True when a decode scored at or below the rejection threshold."""
    return math.isfinite(score) and score <= threshold
