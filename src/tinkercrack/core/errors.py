from __future__ import annotations

from typing import Any


class CrackError(Exception):
    """Base exception for all tinkercrack errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInput(CrackError, ValueError):
    """Raised for non-ASCII data, empty ciphertext or a malformed key."""

    pass


class RecoveryError(CrackError):
    """Base exception for a key search that ran out of candidates."""

    pass


class KeyLengthUnresolved(RecoveryError):
    """No candidate key length produced an accepted decode."""

    def __init__(self, tried: list[int], letters: int):
        super().__init__(
            f"No key length produced an accepted decode (tried {tried or 'none'}, {letters} letters)",
            {"tried": list(tried), "letters": letters},
        )


class NoCandidateAboveThreshold(RecoveryError):
    """The best integer key still scored worse than the rejection threshold."""

    def __init__(self, best_key: int, best_score: float, threshold: float):
        super().__init__(
            f"Best key {best_key} scored {best_score:.3f}, threshold is {threshold:.3f}",
            {"best_key": best_key, "best_score": best_score, "threshold": threshold},
        )
