"""Single-block codec: 16 bytes <-> (A, B, C, D) <-> rounds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .rounds import encrypt_words, decrypt_words
from .utils import bytes_to_words, words_to_bytes

if TYPE_CHECKING:
    from .trace import TraceRecorder


def encrypt_block(
    block: bytes,
    schedule: Sequence[int],
    tracer: TraceRecorder | None = None,
) -> bytes:
    """Encrypt a single 16-byte block.

    Args:
        block: 16-byte plaintext block
        schedule: Round keys
        tracer: Optional trace recorder

    Returns:
        16-byte ciphertext block

    Raises:
        InvalidBlockLength: If block is not 16 bytes
    """
    words = bytes_to_words(block)
    if tracer:
        tracer.record(direction="encrypt", operation="load", block=bytes(block), words=list(words))

    out = words_to_bytes(encrypt_words(words, schedule, tracer=tracer))

    if tracer:
        tracer.record(direction="encrypt", operation="store", block=out)
    return out


def decrypt_block(
    block: bytes,
    schedule: Sequence[int],
    tracer: TraceRecorder | None = None,
) -> bytes:
    """Decrypt a single 16-byte block (structural mirror of encrypt_block)."""
    words = bytes_to_words(block)
    if tracer:
        tracer.record(direction="decrypt", operation="load", block=bytes(block), words=list(words))

    out = words_to_bytes(decrypt_words(words, schedule, tracer=tracer))

    if tracer:
        tracer.record(direction="decrypt", operation="store", block=out)
    return out
