"""
Timing transcript for timing a sequence of runs and printing a summary.
"""

from __future__ import annotations
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, TextIO


@dataclass
class TimingRecord:
    """One timed run."""
    name: str
    duration_ms: float
    ok: bool = True


class TimingTranscript:
    """Collects TimingRecords; one transcript per program run."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.records: List[TimingRecord] = []
        self._stream = stream

    def _print(self, text: str = "") -> None:
        print(text, file=self._stream if self._stream is not None else sys.stdout)

    def print_separator(self) -> None:
        self._print("=" * 60)

    def stat_exec(self, name: str, fn: Callable[..., Any], *args, **kwargs) -> Any:
        """
        Run fn, print its elapsed time and record it under `name`.

        The run is recorded even if fn raises; the exception propagates.
        """
        start = time.perf_counter()
        ok = False
        try:
            result = fn(*args, **kwargs)
            ok = True
            return result
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            self.records.append(TimingRecord(name, duration_ms, ok))
            self._print(f"Duration: {duration_ms:.2f} ms")
            self.print_separator()

    def summary(self) -> None:
        """Print every recorded run."""
        for record in self.records:
            status = "" if record.ok else " (failed)"
            self._print(f"{record.name} executed in {record.duration_ms:.2f} ms{status}")
