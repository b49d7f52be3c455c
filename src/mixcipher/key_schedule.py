"""Round key derivation.

The schedule is the SHA-256 digest of the key, read as a 64-char lowercase
hex string and split into eight 8-char chunks, each parsed as a big-endian
32-bit word. There is no salt and no iteration count.
"""

from __future__ import annotations

from typing import Union

from Crypto.Hash import SHA256

from .interfaces import RoundKeySchedule, SCHEDULE_WORDS

KeyLike = Union[bytes, bytearray, memoryview, str]


def key_to_bytes(key: KeyLike) -> bytes:
    """Normalize a key to bytes (``str`` keys are UTF-8 encoded).

    Raises:
        TypeError: If key is not bytes-like or str
    """
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"Key must be bytes or str, got {type(key).__name__}")


def derive_round_keys(key: KeyLike) -> RoundKeySchedule:
    """Derive the 8-word round key schedule from a key of any length.

    Args:
        key: Cipher key (empty keys are accepted)

    Returns:
        RoundKeySchedule with 8 words, index 0..7
    """
    digest_hex = SHA256.new(key_to_bytes(key)).hexdigest()
    words = tuple(
        int(digest_hex[i * 8:(i + 1) * 8], 16) for i in range(SCHEDULE_WORDS)
    )
    return RoundKeySchedule(words)
