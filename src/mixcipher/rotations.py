"""
32-bit circular rotations.

Both helpers mask their input to 32 bits and reduce the shift modulo 32,
so a shift of 0 or 32 is the identity.
"""

from .interfaces import WORD_MASK


def rotl32(value: int, shift: int) -> int:
    """Rotate a 32-bit word left by ``shift`` bits."""
    value &= WORD_MASK
    shift %= 32
    if shift == 0:
        return value
    return ((value << shift) | (value >> (32 - shift))) & WORD_MASK


def rotr32(value: int, shift: int) -> int:
    """Rotate a 32-bit word right by ``shift`` bits."""
    value &= WORD_MASK
    shift %= 32
    if shift == 0:
        return value
    return ((value >> shift) | (value << (32 - shift))) & WORD_MASK
