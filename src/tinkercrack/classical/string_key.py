from __future__ import annotations

import logging
from typing import Optional

from tinkercrack.classical.common import ALPHABET, is_az, norm_key_alpha, reduce_repeating_key, shift_az, shift_char
from tinkercrack.core.config import DEFAULT_CONFIG, CrackConfig
from tinkercrack.core.errors import InvalidInput, KeyLengthUnresolved
from tinkercrack.core.features import estimate_key_lengths
from tinkercrack.core.registry import register_plugin
from tinkercrack.core.results import Candidate
from tinkercrack.core.scoring import chi_squared_english, score
from tinkercrack.core.utils import BytesLike, columns, ensure_ascii, normalize_az
from tinkercrack.core.verify import accept

logger = logging.getLogger(__name__)


def _apply_key(data: bytes, key: str, direction: int) -> bytes:
    shifts = [direction * ALPHABET.index(ch) for ch in key]

    out = bytearray()
    j = 0
    for b in data:
        if is_az(b):
            out.append(shift_char(b, shifts[j % len(shifts)]))
            j += 1
        else:
            out.append(b)
    return bytes(out)


def encode_string(plaintext: BytesLike, key: str) -> bytes:
    """
    Repeating-key encryption: the i-th letter is shifted by key[i % len(key)].

    Case is preserved; non-letters are copied and do not advance the key.
    """
    return _apply_key(ensure_ascii(plaintext, what="plaintext"), norm_key_alpha(key), +1)


def decode_string(ciphertext: BytesLike, key: str) -> bytes:
    return _apply_key(ensure_ascii(ciphertext, what="ciphertext"), norm_key_alpha(key), -1)


def best_column_shift(column: str) -> int:
    """Rotation 0..25 that makes one column look most like English (ties -> smaller)."""
    return min(range(26), key=lambda s: (chi_squared_english(shift_az(column, -s)), s))


def solve_columns(az: str, key_length: int) -> str:
    """
    Recover one key letter per column independently.

    Every column of a repeating-key ciphertext is a plain Caesar shift of
    English text, so 26 * key_length trials replace 26 ** key_length.
    """
    return "".join(ALPHABET[best_column_shift(col)] for col in columns(az, key_length))


def crack_string(
    ciphertext: BytesLike,
    key_length: Optional[int] = None,
    *,
    config: Optional[CrackConfig] = None,
) -> Candidate:
    """
    Recover a repeating string key from ciphertext alone.

    With `key_length` given only that length is tried; otherwise lengths come
    from estimate_key_lengths() in ranked order and the first one whose full
    decode passes the rejection threshold wins.
    """
    cfg = config or DEFAULT_CONFIG
    data = ensure_ascii(ciphertext, what="ciphertext")
    if not data:
        raise InvalidInput("Ciphertext is empty.")
    if key_length is not None and key_length <= 0:
        raise InvalidInput("Key length must be a positive integer.", {"key_length": key_length})

    az = normalize_az(data)
    lengths = [key_length] if key_length is not None else estimate_key_lengths(data, config=cfg)

    tried: list[int] = []
    for klen in lengths:
        if len(az) < klen * cfg.min_column_letters:
            logger.debug("Skipping key length %d: only %d letters", klen, len(az))
            continue
        tried.append(klen)

        key = solve_columns(az, klen)
        if key_length is None:
            key = reduce_repeating_key(key)

        text = decode_string(data, key)
        cand = Candidate(key=key, text=text, score=score(text))
        if accept(cand.score, cfg.rejection_threshold):
            logger.info("Recovered string key %s (length %d, score %.3f)", key, len(key), cand.score)
            return cand

        logger.debug("Key length %d gave %s, rejected (score %.3f)", klen, key, cand.score)

    raise KeyLengthUnresolved(tried, len(az))


def recover_string_key(
    ciphertext: BytesLike,
    key_length: Optional[int] = None,
    *,
    config: Optional[CrackConfig] = None,
) -> str:
    return crack_string(ciphertext, key_length, config=config).key


class StringKeyCipher:
    name = "string"

    def encode(self, plaintext: BytesLike, key: str) -> bytes:
        return encode_string(plaintext, key)

    def decode(self, ciphertext: BytesLike, key: str) -> bytes:
        return decode_string(ciphertext, key)

    def crack(
        self,
        ciphertext: BytesLike,
        *,
        config: Optional[CrackConfig] = None,
        key_length: Optional[int] = None,
    ) -> Candidate:
        return crack_string(ciphertext, key_length, config=config)


register_plugin(StringKeyCipher())
