"""PKCS#7 padding.

Padding is always applied: input whose length is already a multiple of
the block size gains a full block of padding.
"""

from __future__ import annotations

from .errors import InvalidPadding
from .interfaces import BLOCK_SIZE


def pkcs7_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Append 1..block_size bytes, each equal to the pad length."""
    if not 1 <= block_size <= 255:
        raise ValueError(f"block_size must be 1..255, got {block_size}")
    pad_len = block_size - (len(data) % block_size)
    return bytes(data) + bytes([pad_len]) * pad_len


def pkcs7_unpad(data: bytes, block_size: int = BLOCK_SIZE, strict: bool = False) -> bytes:
    """Strip PKCS#7 padding.

    The last byte gives the pad length. In the default mode only a zero
    pad length or one longer than the data is rejected, and exactly that
    many bytes are removed. Strict mode also requires the pad length to be
    at most block_size and every pad byte to match.

    Raises:
        InvalidPadding: If the padding is malformed
    """
    if not data:
        raise InvalidPadding("Cannot unpad empty data")

    pad_len = data[-1]
    if pad_len == 0:
        raise InvalidPadding("Pad length byte is 0")
    if pad_len > len(data):
        raise InvalidPadding(
            f"Pad length {pad_len} exceeds data length {len(data)}"
        )

    if strict:
        if pad_len > block_size:
            raise InvalidPadding(
                f"Pad length {pad_len} exceeds block size {block_size}"
            )
        if data[-pad_len:] != bytes([pad_len]) * pad_len:
            raise InvalidPadding("Pad bytes do not match pad length")

    return bytes(data[:-pad_len])
