"""
Utility functions for block/word conversions and hex formatting.

A 16-byte block maps to four unsigned 32-bit little-endian words:
  bytes[0:4]   -> A
  bytes[4:8]   -> B
  bytes[8:12]  -> C
  bytes[12:16] -> D
"""

from __future__ import annotations

import struct
from typing import Iterator

from .errors import InvalidBlockLength
from .interfaces import BLOCK_SIZE, WORD_MASK

_BLOCK_STRUCT = struct.Struct("<4I")

Words = tuple[int, int, int, int]


def bytes_to_words(block: bytes) -> Words:
    """
    Unpack a 16-byte block into (A, B, C, D).

    Raises:
        InvalidBlockLength: If block is not exactly 16 bytes
    """
    if len(block) != BLOCK_SIZE:
        raise InvalidBlockLength(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return _BLOCK_STRUCT.unpack(block)


def words_to_bytes(words: Words) -> bytes:
    """
    Pack (A, B, C, D) into a 16-byte block. Words are masked to 32 bits.
    """
    if len(words) != 4:
        raise ValueError(f"Expected 4 words, got {len(words)}")
    return _BLOCK_STRUCT.pack(*(w & WORD_MASK for w in words))


def split_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> Iterator[bytes]:
    """
    Yield consecutive block_size slices of data.

    The caller guarantees len(data) is a multiple of block_size.
    """
    view = memoryview(data)
    for offset in range(0, len(data), block_size):
        yield bytes(view[offset:offset + block_size])


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert hex string to bytes."""
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return data.hex()


def format_words(words: Words) -> str:
    """
    Format the state as labeled 32-bit words, e.g.
    ``A=00000008 B=00000001 C=00000001 D=00000002``.
    """
    return " ".join(f"{name}={w:08x}" for name, w in zip("ABCD", words))
