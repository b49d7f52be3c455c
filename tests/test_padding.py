"""Tests for PKCS#7 padding."""

import pytest
from Crypto.Util.Padding import pad

from mixcipher.errors import InvalidPadding
from mixcipher.padding import pkcs7_pad, pkcs7_unpad


class TestPkcs7Pad:
    """Tests for pkcs7_pad."""

    def test_empty_gets_full_block(self) -> None:
        """Empty input becomes sixteen 0x10 bytes."""
        assert pkcs7_pad(b"") == b"\x10" * 16

    def test_aligned_gets_full_block(self) -> None:
        """Input already a multiple of 16 gains a whole pad block."""
        padded = pkcs7_pad(b"A" * 16)
        assert len(padded) == 32
        assert padded[16:] == b"\x10" * 16

    def test_partial_block(self) -> None:
        """Three bytes get thirteen 0x0d bytes."""
        assert pkcs7_pad(b"abc") == b"abc" + b"\x0d" * 13

    @pytest.mark.parametrize("length", range(0, 40))
    def test_matches_pycryptodome(self, length: int) -> None:
        """Padding agrees with PyCryptodome's pkcs7 style."""
        data = bytes(range(length))
        assert pkcs7_pad(data) == pad(data, 16, style="pkcs7")

    def test_invalid_block_size(self) -> None:
        """Block size must fit in one pad byte."""
        with pytest.raises(ValueError, match="block_size must be 1..255"):
            pkcs7_pad(b"x", block_size=0)


class TestPkcs7Unpad:
    """Tests for pkcs7_unpad."""

    def test_strips_padding(self) -> None:
        """Valid padding is removed."""
        assert pkcs7_unpad(b"abc" + b"\x0d" * 13) == b"abc"

    def test_full_pad_block_to_empty(self) -> None:
        """A lone pad block unpads to empty bytes."""
        assert pkcs7_unpad(b"\x10" * 16) == b""

    def test_zero_pad_length(self) -> None:
        """Pad length byte of 0 is invalid."""
        with pytest.raises(InvalidPadding, match="Pad length byte is 0"):
            pkcs7_unpad(b"A" * 15 + b"\x00")

    def test_pad_length_exceeds_data(self) -> None:
        """Pad length greater than the data length is invalid."""
        with pytest.raises(InvalidPadding, match="exceeds data length"):
            pkcs7_unpad(b"A" * 15 + b"\x20")

    def test_empty_input(self) -> None:
        """Nothing to unpad is invalid."""
        with pytest.raises(InvalidPadding, match="empty"):
            pkcs7_unpad(b"")

    def test_lenient_ignores_pad_bytes(self) -> None:
        """Default mode strips pad_len bytes without checking them."""
        data = b"abcdefghijk" + b"\x01\x02\x03\x04\x05"
        assert pkcs7_unpad(data) == b"abcdefghijk"

    def test_lenient_allows_pad_over_block(self) -> None:
        """Default mode only bounds pad_len by the data length."""
        data = b"B" * 15 + b"\x11" * 17
        assert pkcs7_unpad(data) == b"B" * 15

    def test_strict_rejects_mismatched_bytes(self) -> None:
        """Strict mode checks every pad byte."""
        data = b"abcdefghijk" + b"\x01\x02\x03\x04\x05"
        with pytest.raises(InvalidPadding, match="do not match"):
            pkcs7_unpad(data, strict=True)

    def test_strict_rejects_pad_over_block(self) -> None:
        """Strict mode bounds pad_len by the block size."""
        data = b"B" * 15 + b"\x11" * 17
        with pytest.raises(InvalidPadding, match="exceeds block size"):
            pkcs7_unpad(data, strict=True)

    def test_strict_accepts_valid(self) -> None:
        """Strict mode accepts well-formed padding."""
        assert pkcs7_unpad(pkcs7_pad(b"hello"), strict=True) == b"hello"
