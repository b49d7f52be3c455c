"""Independent reference checks for self-validation.

The schedule is re-derived with hashlib, and padding is compared against
PyCryptodome's PKCS#7 implementation.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import Callable

from Crypto.Util.Padding import pad, unpad

from .cipher import MixCipher
from .errors import CipherError
from .interfaces import BLOCK_SIZE, SCHEDULE_WORDS, ValidationReport
from .key_schedule import KeyLike, derive_round_keys, key_to_bytes
from .padding import pkcs7_pad, pkcs7_unpad



def reference_round_keys(key: KeyLike) -> tuple[int, ...]:
    """Derive the round keys with hashlib, split from the raw digest."""
    digest = hashlib.sha256(key_to_bytes(key)).digest()
    return tuple(
        int.from_bytes(digest[i * 4:(i + 1) * 4], "big") for i in range(SCHEDULE_WORDS)
    )


def validate_schedule(key: KeyLike) -> tuple[bool, str]:
    """Validate derive_round_keys against the hashlib reference.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = reference_round_keys(key)
    got = derive_round_keys(key).words
    if got == expected:
        return True, ""
    return False, (
        f"Schedule mismatch: expected {[f'{w:08x}' for w in expected]}, "
        f"got {[f'{w:08x}' for w in got]}"
    )


def validate_padding(data: bytes) -> tuple[bool, str]:
    """Validate pkcs7_pad / strict pkcs7_unpad against PyCryptodome."""
    ours = pkcs7_pad(data, BLOCK_SIZE)
    expected = pad(data, BLOCK_SIZE, style="pkcs7")
    if ours != expected:
        return False, f"Pad mismatch: expected {expected.hex()}, got {ours.hex()}"

    stripped = pkcs7_unpad(ours, BLOCK_SIZE, strict=True)
    if stripped != unpad(expected, BLOCK_SIZE, style="pkcs7"):
        return False, f"Unpad mismatch for {data.hex()}"
    return True, ""


def validate_round_trip(cipher: MixCipher, plaintext: bytes) -> tuple[bool, str]:
    """Check decrypt(encrypt(P)) == P and the ciphertext length."""
    try:
        ciphertext = cipher.encrypt_bytes(plaintext)
        expected_len = (len(plaintext) // BLOCK_SIZE + 1) * BLOCK_SIZE
        if len(ciphertext) != expected_len:
            return False, (
                f"Ciphertext length {len(ciphertext)} for {len(plaintext)}-byte "
                f"plaintext, expected {expected_len}"
            )
        recovered = cipher.decrypt_bytes(ciphertext)
    except CipherError as e:
        return False, f"Round trip raised {e.__class__.__name__}: {e}"

    if recovered != plaintext:
        return False, (
            f"Round trip mismatch: expected {plaintext.hex()}, got {recovered.hex()}"
        )
    return True, ""


def run_self_test(
    num_tests: int = 100,
    seed: int | None = None,
    max_len: int = 64,
) -> ValidationReport:
    """Run schedule, padding and round-trip checks on random inputs.

    Args:
        num_tests: Number of random (key, plaintext) pairs
        seed: Optional seed for reproducibility
        max_len: Maximum random key/plaintext length

    Returns:
        ValidationReport with pass/fail counts
    """
    if seed is not None:
        rng = random.Random(seed)
        random_bytes: Callable[[int], bytes] = lambda n: bytes(rng.randrange(256) for _ in range(n))
        random_len: Callable[[], int] = lambda: rng.randint(0, max_len)
    else:
        random_bytes = secrets.token_bytes
        random_len = lambda: secrets.randbelow(max_len + 1)

    report = ValidationReport()

    for i in range(num_tests):
        key = random_bytes(random_len())
        plaintext = random_bytes(random_len())

        ok, detail = validate_schedule(key)
        if ok:
            report.schedule_passed += 1
        else:
            report.schedule_failed += 1
            report.add_failure(f"test {i+1}: {detail}")

        ok, detail = validate_padding(plaintext)
        if ok:
            report.padding_passed += 1
        else:
            report.padding_failed += 1
            report.add_failure(f"test {i+1}: {detail}")

        ok, detail = validate_round_trip(MixCipher(key), plaintext)
        if ok:
            report.round_trip_passed += 1
        else:
            report.round_trip_failed += 1
            report.add_failure(f"test {i+1}: {detail}")

    return report
