"""Subprocess runner.

Non-zero exits are returned, not raised. A missing executable is reported as
exit code 127 and an expired timeout as 124, like a POSIX shell would.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from frontkick.core.interfaces.process import ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 127
EXIT_TIMEOUT = 124


class SubprocessRunner(ProcessRunner):
    def __init__(self, *, timeout_seconds: float | None = None) -> None:
        self._timeout = timeout_seconds

    def run(self, args: Sequence[str], *, cwd: Path, stream: bool = False) -> ProcessResult:
        argv = tuple(str(a) for a in args)

        logger.debug("$ %s ... (cwd=%s)", " ".join(argv[:3]), cwd)
        try:
            if stream:
                completed = subprocess.run(argv, cwd=str(cwd), timeout=self._timeout, check=False)
                return ProcessResult(args=argv, returncode=completed.returncode)

            completed = subprocess.run(
                argv,
                cwd=str(cwd),
                timeout=self._timeout,
                check=False,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
            )
            stdout = completed.stdout or ""
            return ProcessResult(
                args=argv,
                returncode=completed.returncode,
                output=stdout + (completed.stderr or ""),
                stdout=stdout,
            )
        except FileNotFoundError:
            return ProcessResult(
                args=argv,
                returncode=EXIT_NOT_FOUND,
                output=f"Command not found: {argv[0]}. Is it installed and in your PATH?",
            )
        except subprocess.TimeoutExpired:
            return ProcessResult(
                args=argv,
                returncode=EXIT_TIMEOUT,
                output=f"Command timed out after {self._timeout}s: {' '.join(argv)}",
            )
        except OSError as exc:
            return ProcessResult(args=argv, returncode=EXIT_NOT_FOUND, output=str(exc))
