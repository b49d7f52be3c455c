"""Error taxonomy for the mixcipher block cipher."""


class CipherError(ValueError):
    """Base class for all cipher input errors."""


class InvalidBlockLength(CipherError):
    """A block passed to the block codec is not exactly 16 bytes."""


class InvalidCiphertextLength(CipherError):
    """Ciphertext is empty or not a multiple of the block size."""


class InvalidPadding(CipherError):
    """Trailing PKCS#7 padding is malformed."""


class MalformedTransportEncoding(CipherError):
    """The base64/hex transport text could not be decoded."""
