"""Command-line interface for the mixcipher block cipher."""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO

import click

from . import __version__
from .cipher import MixCipher
from .errors import CipherError
from .golden import run_self_test
from .interfaces import CipherConfig, TRANSPORT_ENCODINGS
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_hex, hex_to_bytes


def _resolve_key(key: str | None, key_hex: str | None) -> bytes:
    """Pick the key from --key or --key-hex (exactly one is required)."""
    if (key is None) == (key_hex is None):
        raise click.UsageError("Give exactly one of --key or --key-hex")
    if key_hex is not None:
        try:
            return hex_to_bytes(key_hex)
        except ValueError as e:
            raise click.BadParameter(f"Invalid key hex: {e}", param_hint="--key-hex") from e
    return key.encode("utf-8")


def _read_input(text: str | None, input_file: BinaryIO | None) -> bytes:
    if text is not None and input_file is not None:
        raise click.UsageError("Give at most one of --text or --input")
    if text is not None:
        return text.encode("utf-8")
    if input_file is not None:
        return input_file.read()
    return click.get_binary_stream("stdin").read()


key_options = [
    click.option("--key", type=str, default=None, help="Key as text (UTF-8)"),
    click.option("--key-hex", type=str, default=None, help="Key as hex bytes"),
]


def with_key_options(func):
    for option in reversed(key_options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="mixcipher")
def main() -> None:
    """mixcipher: 16-byte block cipher with PKCS#7 padding (ECB).

    Didactic construction; no security claim is made.
    """
    pass


@main.command()
@with_key_options
@click.option("--text", type=str, default=None, help="Plaintext as text (UTF-8)")
@click.option("--input", "input_file", type=click.File("rb"), default=None,
              help="Read plaintext from file (default: stdin)")
@click.option("--encoding", type=click.Choice(TRANSPORT_ENCODINGS), default="base64",
              help="Ciphertext text encoding (default: base64)")
def encrypt(
    key: str | None,
    key_hex: str | None,
    text: str | None,
    input_file: BinaryIO | None,
    encoding: str,
) -> None:
    """Encrypt plaintext and print the encoded ciphertext."""
    cipher = MixCipher(_resolve_key(key, key_hex), CipherConfig(encoding=encoding))
    plaintext = _read_input(text, input_file)
    click.echo(cipher.encrypt(plaintext))


@main.command()
@with_key_options
@click.option("--text", type=str, default=None, help="Encoded ciphertext")
@click.option("--input", "input_file", type=click.File("rb"), default=None,
              help="Read encoded ciphertext from file (default: stdin)")
@click.option("--encoding", type=click.Choice(TRANSPORT_ENCODINGS), default="base64",
              help="Ciphertext text encoding (default: base64)")
@click.option("--output", "output_file", type=click.File("wb"), default=None,
              help="Write plaintext to file (default: stdout)")
@click.option("--strict", is_flag=True, help="Require every pad byte to match")
def decrypt(
    key: str | None,
    key_hex: str | None,
    text: str | None,
    input_file: BinaryIO | None,
    encoding: str,
    output_file: BinaryIO | None,
    strict: bool,
) -> None:
    """Decode and decrypt ciphertext, writing the plaintext bytes."""
    cipher = MixCipher(
        _resolve_key(key, key_hex),
        CipherConfig(encoding=encoding, strict_padding=strict),
    )
    encoded = _read_input(text, input_file)

    try:
        plaintext = cipher.decrypt(encoded)
    except CipherError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    out = output_file or click.get_binary_stream("stdout")
    out.write(plaintext)
    out.flush()


@main.command()
@with_key_options
def schedule(key: str | None, key_hex: str | None) -> None:
    """Print the 8 round keys derived from a key."""
    cipher = MixCipher(_resolve_key(key, key_hex))
    for i, word in enumerate(cipher.schedule.hex()):
        click.echo(f"rk[{i}] = {word}")


@main.command()
@with_key_options
@click.option("--block", "block_hex", type=str, required=True,
              help="Input block as 32 hex chars")
@click.option("--decrypt", "do_decrypt", is_flag=True,
              help="Run the inverse rounds instead")
@click.option("--verbose", "-v", is_flag=True, help="Print per-round state")
@click.option("--trace", "trace_file", type=click.File("w"), default=None,
              help="Output JSON Lines trace to file")
def block(
    key: str | None,
    key_hex: str | None,
    block_hex: str,
    do_decrypt: bool,
    verbose: bool,
    trace_file: TextIO | None,
) -> None:
    """Run a single block through the rounds, with tracing."""
    cipher = MixCipher(_resolve_key(key, key_hex))

    try:
        data = hex_to_bytes(block_hex)
    except ValueError as e:
        click.echo(f"Error: Invalid block hex: {e}", err=True)
        sys.exit(1)

    tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)
    direction = "decrypt" if do_decrypt else "encrypt"

    if verbose:
        print_header(f"mixcipher block {direction}")
        print(f"Input: {block_hex}")

    try:
        if do_decrypt:
            out = cipher.decrypt_block(data, tracer=tracer)
            passed = cipher.encrypt_block(out) == data
        else:
            out = cipher.encrypt_block(data, tracer=tracer)
            passed = cipher.decrypt_block(out) == data
    except CipherError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        print_result("Plaintext" if do_decrypt else "Ciphertext", bytes_to_hex(out), passed)
    else:
        click.echo(bytes_to_hex(out))

    if not passed:
        sys.exit(1)


@main.command()
@click.option("--n", "num_tests", type=int, default=100,
              help="Number of random test vectors (default: 100)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--verbose", "-v", is_flag=True, help="Show each failure")
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Self-test schedule, padding and round trips on random inputs."""
    click.echo(f"Running {num_tests} random tests...")
    report = run_self_test(num_tests, seed=seed)

    click.echo(f"Schedule:   {report.schedule_passed}/{num_tests} passed")
    click.echo(f"Padding:    {report.padding_passed}/{num_tests} passed")
    click.echo(f"Round trip: {report.round_trip_passed}/{num_tests} passed")

    if verbose:
        for failure in report.failures:
            click.echo(f"  FAIL - {failure}")

    click.echo("")
    if report.passed:
        click.echo(f"VALIDATION PASSED: All {report.total} checks passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {report.failed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
