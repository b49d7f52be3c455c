"""The mixcipher cipher instance: key schedule plus ECB stream wrapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import transport
from .block import encrypt_block, decrypt_block
from .errors import InvalidCiphertextLength
from .interfaces import BLOCK_SIZE, CipherConfig, RoundKeySchedule
from .key_schedule import KeyLike, derive_round_keys
from .padding import pkcs7_pad, pkcs7_unpad
from .utils import split_blocks

if TYPE_CHECKING:
    from .trace import TraceRecorder


class MixCipher:
    """16-byte block cipher with an 8-word SHA-256 key schedule.

    Blocks are encrypted independently (ECB, no IV) after PKCS#7 padding.
    The schedule is derived once in the constructor and never changes, so
    an instance can be shared between threads without locking.

    This is a didactic construction with no security claim.
    """

    block_size = BLOCK_SIZE

    def __init__(self, key: KeyLike, config: CipherConfig | None = None):
        """Derive the round keys.

        Args:
            key: Cipher key, any length (str keys are UTF-8 encoded)
            config: Optional transport/padding configuration
        """
        self._schedule = derive_round_keys(key)
        self._config = config or CipherConfig()

    @property
    def schedule(self) -> RoundKeySchedule:
        return self._schedule

    @property
    def round_keys(self) -> tuple[int, ...]:
        return self._schedule.words

    @property
    def config(self) -> CipherConfig:
        return self._config

    # ---- block level ----

    def encrypt_block(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Encrypt exactly one 16-byte block."""
        return encrypt_block(block, self._schedule, tracer=tracer)

    def decrypt_block(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        """Decrypt exactly one 16-byte block."""
        return decrypt_block(block, self._schedule, tracer=tracer)

    # ---- raw byte streams ----

    def encrypt_bytes(self, plaintext: bytes) -> bytes:
        """Pad and encrypt plaintext; returns raw ciphertext bytes."""
        padded = pkcs7_pad(plaintext, BLOCK_SIZE)
        return b"".join(
            encrypt_block(block, self._schedule) for block in split_blocks(padded)
        )

    def decrypt_bytes(self, ciphertext: bytes) -> bytes:
        """Decrypt raw ciphertext and strip padding.

        Raises:
            InvalidCiphertextLength: If length is 0 or not a multiple of 16
            InvalidPadding: If the recovered padding is malformed
        """
        if len(ciphertext) == 0 or len(ciphertext) % BLOCK_SIZE != 0:
            raise InvalidCiphertextLength(
                f"Ciphertext length must be a positive multiple of {BLOCK_SIZE}, "
                f"got {len(ciphertext)}"
            )
        padded = b"".join(
            decrypt_block(block, self._schedule) for block in split_blocks(ciphertext)
        )
        return pkcs7_unpad(padded, BLOCK_SIZE, strict=self._config.strict_padding)

    # ---- text transport ----

    def encrypt(self, plaintext: bytes | str) -> str:
        """Encrypt and transport-encode (base64 by default).

        str plaintext is UTF-8 encoded first.
        """
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8")
        return transport.encode(self.encrypt_bytes(plaintext), self._config.encoding)

    def decrypt(self, text: str | bytes) -> bytes:
        """Transport-decode and decrypt.

        Raises:
            MalformedTransportEncoding: If text cannot be decoded
            InvalidCiphertextLength: If decoded length is invalid
            InvalidPadding: If the recovered padding is malformed
        """
        return self.decrypt_bytes(transport.decode(text, self._config.encoding))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(encoding={self._config.encoding!r})"
