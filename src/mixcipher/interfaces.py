"""Core constants and data structures for the mixcipher block cipher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

# Fixed cipher parameters. These are part of the wire format and are
# not configurable.
BLOCK_SIZE = 16
NUM_ROUNDS = 8
SCHEDULE_WORDS = 8
WORD_MASK = 0xFFFFFFFF

TRANSPORT_ENCODINGS = ("base64", "hex")


@dataclass(frozen=True)
class RoundKeySchedule:
    """Ordered, immutable sequence of 32-bit round keys."""

    words: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate schedule words."""
        if not self.words:
            raise ValueError("Round key schedule must not be empty")
        for w in self.words:
            if not 0 <= w <= WORD_MASK:
                raise ValueError(f"Round key out of 32-bit range: {w:#x}")

    def __getitem__(self, index: int) -> int:
        return self.words[index]

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)

    def hex(self) -> list[str]:
        """Round keys as 8-char lowercase hex strings."""
        return [f"{w:08x}" for w in self.words]

    def __repr__(self) -> str:
        # Round keys are key material; keep them out of reprs and tracebacks.
        return f"RoundKeySchedule(len={len(self.words)})"


@dataclass
class CipherConfig:
    """Configuration for a cipher instance.

    Block size, round count and schedule length are fixed constants;
    only the transport boundary and the padding check are tunable.
    """

    # Text encoding used by encrypt()/decrypt()
    encoding: str = "base64"

    # Also require every pad byte to equal the pad length (and pad <= 16)
    strict_padding: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.encoding not in TRANSPORT_ENCODINGS:
            raise ValueError(
                f"Unknown encoding: {self.encoding!r} "
                f"(expected one of {', '.join(TRANSPORT_ENCODINGS)})"
            )


@dataclass
class ValidationReport:
    """Outcome of a self-validation run."""

    schedule_passed: int = 0
    schedule_failed: int = 0
    padding_passed: int = 0
    padding_failed: int = 0
    round_trip_passed: int = 0
    round_trip_failed: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            self.schedule_passed + self.schedule_failed
            + self.padding_passed + self.padding_failed
            + self.round_trip_passed + self.round_trip_failed
        )

    @property
    def failed(self) -> int:
        return self.schedule_failed + self.padding_failed + self.round_trip_failed

    @property
    def passed(self) -> bool:
        return self.failed == 0

    def add_failure(self, detail: str) -> None:
        """Record a failure message."""
        self.failures.append(detail)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "schedule": {"passed": self.schedule_passed, "failed": self.schedule_failed},
            "padding": {"passed": self.padding_passed, "failed": self.padding_failed},
            "round_trip": {"passed": self.round_trip_passed, "failed": self.round_trip_failed},
            "total": self.total,
            "passed": self.passed,
            "failures": self.failures,
        }
