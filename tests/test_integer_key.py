"""Tests for the integer key cipher and its brute-force recovery."""

import pytest

from tinkercrack import (
    INTEGER_KEYS,
    Candidate,
    CrackConfig,
    InvalidInput,
    NoCandidateAboveThreshold,
    crack_integer,
    decode_integer,
    encode_integer,
    recover_integer_key,
    score,
)
from tinkercrack.classical.integer_key import IntegerKeyCipher, integer_candidates


class TestIntegerKeyCipher:
    def test_known_vector(self, pangram):
        assert encode_integer(pangram, 3) == b"WKHTXLFNEURZQIRAMXPSVRYHUWKHODCBGRJ"

    def test_preserves_case_and_non_letters(self):
        assert encode_integer(b"Hello, World!", 3) == b"Khoor, Zruog!"
        assert decode_integer(b"Khoor, Zruog!", 3) == b"Hello, World!"

    def test_wraps_around_alphabet(self):
        assert encode_integer(b"xyz XYZ", 3) == b"abc ABC"

    def test_roundtrip_every_key(self, english_text):
        for key in INTEGER_KEYS:
            assert decode_integer(encode_integer(english_text, key), key) == english_text

    def test_key_zero_is_identity(self, english_text):
        assert encode_integer(english_text, 0) == english_text

    def test_accepts_str_input(self):
        assert encode_integer("abc", 1) == b"bcd"

    def test_empty_plaintext(self):
        assert encode_integer(b"", 5) == b""

    @pytest.mark.parametrize("key", [-1, 26, 255, "3", 3.0, True])
    def test_invalid_key(self, key):
        with pytest.raises(InvalidInput):
            encode_integer(b"HELLO", key)

    def test_non_ascii_input(self):
        with pytest.raises(InvalidInput):
            encode_integer("café", 1)
        with pytest.raises(InvalidInput):
            decode_integer(b"caf\xc3\xa9", 1)

    def test_plugin_parses_string_keys(self):
        plugin = IntegerKeyCipher()
        assert plugin.encode(b"ABC", " 2 ") == b"CDE"
        assert plugin.decode(b"CDE", "2") == b"ABC"
        with pytest.raises(InvalidInput):
            plugin.encode(b"ABC", "two")


class TestIntegerKeyRecovery:
    def test_recovers_pangram_key(self):
        assert recover_integer_key(b"WKHTXLFNEURZQIRAMXPSVRYHUWKHODCBGRJ") == 3

    @pytest.mark.parametrize("key", [0, 1, 13, 17, 25])
    def test_recovers_key_from_english(self, english_text, key):
        assert recover_integer_key(encode_integer(english_text, key)) == key

    def test_crack_returns_plaintext(self, english_text):
        cand = crack_integer(encode_integer(english_text, 11))
        assert isinstance(cand, Candidate)
        assert cand.key == 11
        assert cand.text == english_text
        assert cand.score == score(english_text)

    def test_correct_key_scores_strictly_best(self, english_text, pangram):
        for plaintext in (english_text, pangram):
            ciphertext = encode_integer(plaintext, 7)
            candidates = {c.key: c.score for c in integer_candidates(ciphertext)}
            assert sorted(candidates) == list(INTEGER_KEYS)
            assert all(candidates[7] < s for k, s in candidates.items() if k != 7)

    def test_candidates_order_by_score_then_key(self):
        a = Candidate(key=4, text=b"", score=1.0)
        b = Candidate(key=2, text=b"", score=1.0)
        c = Candidate(key=0, text=b"", score=2.0)
        assert min([a, b, c]) is b
        assert sorted([c, a, b]) == [b, a, c]

    def test_empty_ciphertext(self):
        with pytest.raises(InvalidInput):
            recover_integer_key(b"")

    def test_letterless_ciphertext_is_rejected(self):
        with pytest.raises(NoCandidateAboveThreshold) as exc_info:
            recover_integer_key(b"1234567890 !?")
        assert exc_info.value.details["best_key"] == 0

    def test_strict_threshold_rejects(self, english_text):
        strict = CrackConfig(rejection_threshold=1e-6)
        with pytest.raises(NoCandidateAboveThreshold) as exc_info:
            recover_integer_key(encode_integer(english_text, 5), config=strict)
        assert exc_info.value.details["best_key"] == 5
        assert exc_info.value.details["threshold"] == 1e-6
