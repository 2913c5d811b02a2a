from __future__ import annotations

import logging
from typing import Iterator, Optional

from tinkercrack.classical.common import shift_bytes
from tinkercrack.core.config import DEFAULT_CONFIG, CrackConfig
from tinkercrack.core.errors import InvalidInput, NoCandidateAboveThreshold
from tinkercrack.core.registry import register_plugin
from tinkercrack.core.results import Candidate
from tinkercrack.core.scoring import score
from tinkercrack.core.utils import BytesLike, ensure_ascii
from tinkercrack.core.verify import accept

logger = logging.getLogger(__name__)

# Every valid integer key; small enough to try them all.
INTEGER_KEYS = range(26)


def _check_key(key: int) -> int:
    if isinstance(key, bool) or not isinstance(key, int) or key not in INTEGER_KEYS:
        raise InvalidInput(
            f"Integer key must be an integer {INTEGER_KEYS.start}..{INTEGER_KEYS.stop - 1}.",
            {"key": key},
        )
    return key


def encode_integer(plaintext: BytesLike, key: int) -> bytes:
    """Rotate every ASCII letter forward by `key`, keeping case and non-letters."""
    return shift_bytes(ensure_ascii(plaintext, what="plaintext"), _check_key(key))


def decode_integer(ciphertext: BytesLike, key: int) -> bytes:
    # Decrypt means shift backwards by key
    return shift_bytes(ensure_ascii(ciphertext, what="ciphertext"), -_check_key(key))


def integer_candidates(ciphertext: bytes) -> Iterator[Candidate]:
    """One scored candidate per key; each is independent of the others."""
    for k in INTEGER_KEYS:
        text = shift_bytes(ciphertext, -k)
        yield Candidate(key=k, text=text, score=score(text))


def crack_integer(ciphertext: BytesLike, *, config: Optional[CrackConfig] = None) -> Candidate:
    """
    Brute-force the integer key: keep the candidate closest to English.

    Raises NoCandidateAboveThreshold when even the best decode is rejected,
    which means the input is not this cipher or not English text.
    """
    cfg = config or DEFAULT_CONFIG
    data = ensure_ascii(ciphertext, what="ciphertext")
    if not data:
        raise InvalidInput("Ciphertext is empty.")

    best = min(integer_candidates(data))
    if not accept(best.score, cfg.rejection_threshold):
        logger.debug("Best integer key %d rejected (score %.3f)", best.key, best.score)
        raise NoCandidateAboveThreshold(best.key, best.score, cfg.rejection_threshold)

    logger.info("Recovered integer key %d (score %.3f)", best.key, best.score)
    return best


def recover_integer_key(ciphertext: BytesLike, *, config: Optional[CrackConfig] = None) -> int:
    return crack_integer(ciphertext, config=config).key


class IntegerKeyCipher:
    name = "integer"

    def parse_key(self, key: int | str) -> int:
        if isinstance(key, str):
            try:
                key = int(key.strip())
            except ValueError as e:
                raise InvalidInput("Integer key must be an integer 0..25.", {"key": key}) from e
        return _check_key(key)

    def encode(self, plaintext: BytesLike, key: int | str) -> bytes:
        return encode_integer(plaintext, self.parse_key(key))

    def decode(self, ciphertext: BytesLike, key: int | str) -> bytes:
        return decode_integer(ciphertext, self.parse_key(key))

    def crack(
        self,
        ciphertext: BytesLike,
        *,
        config: Optional[CrackConfig] = None,
        key_length: Optional[int] = None,
    ) -> Candidate:
        # key_length only applies to string keys
        return crack_integer(ciphertext, config=config)


register_plugin(IntegerKeyCipher())
