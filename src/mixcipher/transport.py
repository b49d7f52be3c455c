"""Text-safe transport encoding for ciphertext (base64 or hex)."""

from __future__ import annotations

import base64
import binascii

from .errors import MalformedTransportEncoding
from .interfaces import TRANSPORT_ENCODINGS


def _check_encoding(encoding: str) -> None:
    if encoding not in TRANSPORT_ENCODINGS:
        raise ValueError(
            f"Unknown encoding: {encoding!r} "
            f"(expected one of {', '.join(TRANSPORT_ENCODINGS)})"
        )


def encode(data: bytes, encoding: str = "base64") -> str:
    """Encode raw ciphertext bytes as text."""
    _check_encoding(encoding)
    if encoding == "hex":
        return data.hex()
    return base64.b64encode(data).decode("ascii")


def decode(text: str | bytes, encoding: str = "base64") -> bytes:
    """Decode transport text back to raw ciphertext bytes.

    Raises:
        MalformedTransportEncoding: If text is not valid for the encoding
    """
    _check_encoding(encoding)
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedTransportEncoding(f"Non-ASCII {encoding} input") from e
    text = text.strip()

    try:
        if encoding == "hex":
            return bytes.fromhex(text)
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedTransportEncoding(f"Invalid {encoding} input: {e}") from e
