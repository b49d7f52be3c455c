"""
Trace recording and pretty printing for cipher operations.

Contains:
- TraceRecorder: JSON Lines trace + compact verbose stdout per round
- print_header / print_result: shared formatting helpers
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from .utils import format_words


class TraceRecorder:
    """
    Records and outputs traces of block encryption/decryption.

    Supports:
    - JSON Lines file output  (when trace_file is set; bytes become hex)
    - Compact verbose stdout  (one line per record)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, bytes):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        direction = record.get("direction", "?")[:3].upper()
        operation = record.get("operation", "unknown")

        if "round" in record:
            rk = record.get("round_key", 0)
            words = tuple(record.get("words", (0, 0, 0, 0)))
            print(f"{direction} R{record['round']}  {operation:14s} rk={rk:08x}  {format_words(words)}")
        elif "block" in record:
            print(f"{direction}     {operation:14s} BLOCK:{record['block'].hex()}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str, passed: bool = True) -> None:
    """Print a block result with its inverse-check status."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")

    status = "PASS" if passed else "FAIL"
    marker = "[OK]" if passed else "[ERROR]"
    print(f"Inverse check: {marker} {status}")
    print(f"{'='*70}")
