from __future__ import annotations

from functools import lru_cache

from tinkercrack.core.errors import InvalidInput

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_UPPER = ALPHABET.encode("ascii")
_LOWER = ALPHABET.lower().encode("ascii")


def is_az(b: int) -> bool:
    """True for an ASCII letter byte of either case."""
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A


@lru_cache(maxsize=26)
def _byte_shift_table(shift: int) -> bytes:
    s = shift % 26
    return bytes.maketrans(_UPPER + _LOWER, _UPPER[s:] + _UPPER[:s] + _LOWER[s:] + _LOWER[:s])


@lru_cache(maxsize=26)
def _az_shift_table(shift: int) -> dict[int, int]:
    s = shift % 26
    return str.maketrans(ALPHABET, ALPHABET[s:] + ALPHABET[:s])


def shift_bytes(data: bytes, shift: int) -> bytes:
    """Caesar shift over ASCII bytes; preserves non-letters; preserves case."""
    return data.translate(_byte_shift_table(shift % 26))


def shift_az(az: str, shift: int) -> str:
    """Shift an uppercase A-Z string by 'shift' (can be negative)."""
    return az.translate(_az_shift_table(shift % 26))


def shift_char(b: int, shift: int) -> int:
    """Shift one ASCII letter byte by 'shift'; other bytes are returned unchanged."""
    return _byte_shift_table(shift % 26)[b]


def norm_key_alpha(key: str | bytes) -> str:
    """Uppercase a string key, rejecting empty keys and anything but A-Z."""
    if isinstance(key, (bytes, bytearray)):
        key = bytes(key).decode("ascii", errors="replace")
    k = key.strip().upper()
    if not k:
        raise InvalidInput("String key must contain at least one letter.")
    bad = sorted({ch for ch in k if ch not in ALPHABET})
    if bad:
        raise InvalidInput(f"String key may only contain A-Z (got {''.join(bad)!r}).", {"key": key})
    return k


def reduce_repeating_key(key: str) -> str:
    """
    If a key is a perfect repetition of a shorter pattern, reduce it.
    Example: KEYEDKEYED -> KEYED
    """
    for p in range(1, len(key) // 2 + 1):
        if len(key) % p != 0:
            continue
        base = key[:p]
        if base * (len(key) // p) == key:
            return base
    return key
