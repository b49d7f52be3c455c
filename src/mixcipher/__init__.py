"""mixcipher: a didactic 16-byte block cipher with PKCS#7 padding."""

__version__ = "0.1.0"

from .interfaces import (
    BLOCK_SIZE,
    NUM_ROUNDS,
    SCHEDULE_WORDS,
    CipherConfig,
    RoundKeySchedule,
)
from .errors import (
    CipherError,
    InvalidBlockLength,
    InvalidCiphertextLength,
    InvalidPadding,
    MalformedTransportEncoding,
)
from .rotations import rotl32, rotr32
from .key_schedule import derive_round_keys
from .block import encrypt_block, decrypt_block
from .padding import pkcs7_pad, pkcs7_unpad
from .cipher import MixCipher
from .trace import TraceRecorder

__all__ = [
    "BLOCK_SIZE",
    "NUM_ROUNDS",
    "SCHEDULE_WORDS",
    "CipherConfig",
    "RoundKeySchedule",
    "CipherError",
    "InvalidBlockLength",
    "InvalidCiphertextLength",
    "InvalidPadding",
    "MalformedTransportEncoding",
    "rotl32",
    "rotr32",
    "derive_round_keys",
    "encrypt_block",
    "decrypt_block",
    "pkcs7_pad",
    "pkcs7_unpad",
    "MixCipher",
    "TraceRecorder",
]
