"""Keyed text ciphers (integer and repeating string key) and ciphertext-only key recovery."""

from tinkercrack.classical.integer_key import (
    INTEGER_KEYS,
    IntegerKeyCipher,
    crack_integer,
    decode_integer,
    encode_integer,
    recover_integer_key,
)
from tinkercrack.classical.string_key import (
    StringKeyCipher,
    crack_string,
    decode_string,
    encode_string,
    recover_string_key,
)
from tinkercrack.core import (
    DEFAULT_CONFIG,
    Candidate,
    CrackConfig,
    CrackError,
    InvalidInput,
    KeyLengthUnresolved,
    NoCandidateAboveThreshold,
    RecoveryError,
    accept,
    estimate_key_lengths,
    load_config,
    score,
)

__version__ = "0.1.0"

__all__ = [
    "INTEGER_KEYS",
    "IntegerKeyCipher",
    "StringKeyCipher",
    "encode_integer",
    "decode_integer",
    "encode_string",
    "decode_string",
    "crack_integer",
    "crack_string",
    "recover_integer_key",
    "recover_string_key",
    "estimate_key_lengths",
    "score",
    "accept",
    "Candidate",
    "CrackConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "CrackError",
    "InvalidInput",
    "KeyLengthUnresolved",
    "NoCandidateAboveThreshold",
    "RecoveryError",
]
