"""External process contract.

Rules:
- `run` blocks until the process exits and never raises for a non-zero exit.
- `stream=True` forwards stdout/stderr to the terminal (nothing is captured).
- `stream=False` captures both: `stdout` alone for parsing, `output` with
  stderr appended for error reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class ProcessResult:
    args: tuple[str, ...]
    returncode: int
    output: str = ""
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command(self) -> str:
        return " ".join(self.args)


@runtime_checkable
class ProcessRunner(Protocol):
    def run(self, args: Sequence[str], *, cwd: Path, stream: bool = False) -> ProcessResult:
        ...
