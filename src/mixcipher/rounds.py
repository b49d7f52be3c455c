"""
Round function and its exact inverse.

One forward round on state (A, B, C, D) with round key rk:

    A = A ^ rk
    B = (B + A) mod 2^32
    C = rotl32(C ^ B, 3)
    D = rotr32((D + C) mod 2^32, 2)
    swap(A, C)

The inverse replays the steps backwards, starting with the swap. Rounds
are undone in reverse index order, so decryption of round r must use the
same key index r % len(schedule) as encryption did.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .interfaces import NUM_ROUNDS, WORD_MASK
from .rotations import rotl32, rotr32
from .utils import Words

if TYPE_CHECKING:
    from .trace import TraceRecorder

C_ROTATION = 3
D_ROTATION = 2


def encrypt_round(state: Words, round_key: int) -> Words:
    """Apply one forward round and return the new state."""
    a, b, c, d = state
    a = (a ^ round_key) & WORD_MASK
    b = (b + a) & WORD_MASK
    c = rotl32(c ^ b, C_ROTATION)
    d = rotr32((d + c) & WORD_MASK, D_ROTATION)
    a, c = c, a
    return (a, b, c, d)


def decrypt_round(state: Words, round_key: int) -> Words:
    """Undo one forward round and return the previous state."""
    a, b, c, d = state
    a, c = c, a
    d = (rotl32(d, D_ROTATION) - c) & WORD_MASK
    c = rotr32(c, C_ROTATION) ^ b
    b = (b - a) & WORD_MASK
    a = (a ^ round_key) & WORD_MASK
    return (a, b, c, d)


def _check_rounds(num_rounds: int, schedule: Sequence[int]) -> None:
    if num_rounds <= 0:
        raise ValueError(f"num_rounds must be positive, got {num_rounds}")
    if len(schedule) == 0:
        raise ValueError("Round key schedule must not be empty")


def _load(words: Sequence[int]) -> Words:
    if len(words) != 4:
        raise ValueError(f"Expected 4 words, got {len(words)}")
    a, b, c, d = (w & WORD_MASK for w in words)
    return (a, b, c, d)


def encrypt_words(
    words: Sequence[int],
    schedule: Sequence[int],
    num_rounds: int = NUM_ROUNDS,
    tracer: TraceRecorder | None = None,
) -> Words:
    """
    Run the forward rounds over a 4-word state.

    Args:
        words: (A, B, C, D), masked to 32 bits on load
        schedule: Round keys, used cyclically
        num_rounds: Number of rounds (default: 8)
        tracer: Optional trace recorder

    Returns:
        Encrypted (A, B, C, D)
    """
    _check_rounds(num_rounds, schedule)
    state = _load(words)

    for r in range(num_rounds):
        rk = schedule[r % len(schedule)]
        state = encrypt_round(state, rk)
        if tracer:
            tracer.record(
                direction="encrypt",
                round=r,
                operation="round",
                round_key=rk,
                words=list(state),
            )

    return state


def decrypt_words(
    words: Sequence[int],
    schedule: Sequence[int],
    num_rounds: int = NUM_ROUNDS,
    tracer: TraceRecorder | None = None,
) -> Words:
    """
    Run the inverse rounds over a 4-word state, last round first.

    Args:
        words: Encrypted (A, B, C, D)
        schedule: Round keys, same as used for encryption
        num_rounds: Number of rounds (default: 8)
        tracer: Optional trace recorder

    Returns:
        Decrypted (A, B, C, D)
    """
    _check_rounds(num_rounds, schedule)
    state = _load(words)

    for r in range(num_rounds - 1, -1, -1):
        rk = schedule[r % len(schedule)]
        state = decrypt_round(state, rk)
        if tracer:
            tracer.record(
                direction="decrypt",
                round=r,
                operation="inverse_round",
                round_key=rk,
                words=list(state),
            )

    return state
