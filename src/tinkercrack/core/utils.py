from __future__ import annotations

import re
from typing import Union

from .errors import InvalidInput

BytesLike = Union[bytes, bytearray, memoryview, str]

_AZ_ONLY_RE = re.compile(r"[^A-Z]+")


def ensure_ascii(data: BytesLike, *, what: str = "input") -> bytes:
    """Return `data` as immutable bytes, rejecting anything outside 7-bit ASCII."""
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidInput(f"{what} must be ASCII text.", {"position": e.start}) from e

    raw = bytes(data)
    if not raw.isascii():
        pos = next(i for i, b in enumerate(raw) if b > 0x7F)
        raise InvalidInput(f"{what} must be ASCII text.", {"position": pos})
    return raw


def normalize_az(data: bytes | str) -> str:
    """Keep only A-Z, uppercase."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("ascii", errors="ignore")
    return _AZ_ONLY_RE.sub("", data.upper())


def columns(az: str, period: int) -> list[str]:
    """Split letters into `period` interleaved columns (column i = az[i::period])."""
    return [az[i::period] for i in range(period)]


def printable_ratio(data: bytes) -> float:
    if not data:
        return 0.0
    return sum(1 for b in data if 0x20 <= b < 0x7F or b in b"\t\n\r") / len(data)
