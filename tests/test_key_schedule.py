"""Tests for round key derivation."""

import dataclasses
import hashlib

import pytest

from mixcipher.interfaces import RoundKeySchedule, SCHEDULE_WORDS
from mixcipher.key_schedule import derive_round_keys, key_to_bytes

# SHA-256("") and SHA-256("abc"), split into 8 words
EMPTY_KEY_WORDS = (
    0xE3B0C442, 0x98FC1C14, 0x9AFBF4C8, 0x996FB924,
    0x27AE41E4, 0x649B934C, 0xA495991B, 0x7852B855,
)
ABC_KEY_WORDS = (
    0xBA7816BF, 0x8F01CFEA, 0x414140DE, 0x5DAE2223,
    0xB00361A3, 0x96177A9C, 0xB410FF61, 0xF20015AD,
)


class TestDeriveRoundKeys:
    """Tests for derive_round_keys."""

    def test_empty_key(self) -> None:
        """Empty key must not fail and yields SHA-256('') words."""
        schedule = derive_round_keys(b"")
        assert schedule.words == EMPTY_KEY_WORDS

    def test_abc_key(self) -> None:
        """Key 'abc' yields SHA-256('abc') words."""
        assert derive_round_keys(b"abc").words == ABC_KEY_WORDS

    def test_schedule_length(self) -> None:
        """Schedule always has 8 words."""
        for key in (b"", b"k", b"x" * 1000):
            assert len(derive_round_keys(key)) == SCHEDULE_WORDS

    def test_deterministic(self) -> None:
        """Identical keys give identical schedules."""
        assert derive_round_keys(b"testkey") == derive_round_keys(b"testkey")

    def test_different_keys_differ(self) -> None:
        """Different keys give different schedules."""
        assert derive_round_keys(b"testkey") != derive_round_keys(b"testkey2")

    def test_matches_hashlib(self) -> None:
        """Words are the big-endian 32-bit chunks of the digest."""
        key = bytes(range(40))
        digest = hashlib.sha256(key).hexdigest()
        expected = tuple(int(digest[i:i + 8], 16) for i in range(0, 64, 8))
        assert derive_round_keys(key).words == expected

    def test_str_key_is_utf8(self) -> None:
        """A str key hashes like its UTF-8 encoding."""
        assert derive_round_keys("abc") == derive_round_keys(b"abc")
        assert derive_round_keys("clé") == derive_round_keys("clé".encode("utf-8"))

    def test_bytes_like_keys(self) -> None:
        """bytearray and memoryview keys are accepted."""
        assert derive_round_keys(bytearray(b"abc")).words == ABC_KEY_WORDS
        assert derive_round_keys(memoryview(b"abc")).words == ABC_KEY_WORDS

    def test_invalid_key_type(self) -> None:
        """Non bytes/str keys raise TypeError."""
        with pytest.raises(TypeError, match="Key must be bytes or str"):
            key_to_bytes(12345)


class TestRoundKeySchedule:
    """Tests for the RoundKeySchedule value object."""

    def test_immutable(self) -> None:
        """Schedule cannot be reassigned after construction."""
        schedule = derive_round_keys(b"abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            schedule.words = (0,) * 8

    def test_indexing(self) -> None:
        """Indexing and iteration follow word order."""
        schedule = derive_round_keys(b"abc")
        assert schedule[0] == 0xBA7816BF
        assert schedule[7] == 0xF20015AD
        assert list(schedule) == list(ABC_KEY_WORDS)

    def test_hex(self) -> None:
        """hex() renders 8-char lowercase words."""
        assert derive_round_keys(b"").hex()[0] == "e3b0c442"

    def test_repr_hides_words(self) -> None:
        """repr must not expose key material."""
        assert "e3b0c442" not in repr(derive_round_keys(b"")).lower()

    def test_rejects_out_of_range(self) -> None:
        """Words must fit in 32 bits."""
        with pytest.raises(ValueError, match="out of 32-bit range"):
            RoundKeySchedule((1 << 32,))

    def test_rejects_empty(self) -> None:
        """An empty schedule is invalid."""
        with pytest.raises(ValueError, match="must not be empty"):
            RoundKeySchedule(())
