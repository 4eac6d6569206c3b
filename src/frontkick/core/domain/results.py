"""Tagged results shared by every step of a run.

Components never raise across their seams: they return either their value or a
`Failure`, and the orchestrator decides (per `FailureKind`) whether the run
aborts or degrades.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from frontkick.core.domain.models import RemoteRepository, RunRequest


class FailureKind(str, Enum):
    GENERATOR = "generator"
    VCS = "vcs"
    MISSING_CREDENTIALS = "missing_credentials"
    REMOTE_API = "remote_api"


@dataclass(frozen=True)
class Failure:
    """A failed step with enough context to act on without re-running."""

    kind: FailureKind
    message: str
    step: str | None = None
    exit_code: int | None = None
    output: str = ""

    def describe(self) -> str:
        parts = [self.message]
        if self.step:
            parts.append(f"step: {self.step}")
        if self.exit_code is not None:
            parts.append(f"exit code: {self.exit_code}")
        text = " | ".join(parts)
        if self.output.strip():
            text += "\n" + self.output.strip()
        return text


class ProvisionState(str, Enum):
    """Terminal states of the remote provisioning machine."""

    SKIPPED = "skipped"
    PUSHED = "pushed"
    FAILED = "failed"


@dataclass
class ProvisionOutcome:
    state: ProvisionState
    remote: RemoteRepository | None = None
    branch: str | None = None
    failure: Failure | None = None


EXIT_OK = 0
EXIT_USAGE = 64
# REMOTE_API leaves the local project valid: it is reported as a warning.
EXIT_CODES: dict[FailureKind, int] = {
    FailureKind.REMOTE_API: EXIT_OK,
    FailureKind.GENERATOR: 2,
    FailureKind.VCS: 3,
    FailureKind.MISSING_CREDENTIALS: 4,
}


@dataclass
class RunReport:
    """Output of an orchestrator run."""

    request: RunRequest | None = None
    project_dir: Path | None = None
    provision: ProvisionOutcome | None = None
    failure: Failure | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)
    exit_code: int = EXIT_OK