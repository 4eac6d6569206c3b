"""Local git repository initialization.

Create React App and create-next-app already run `git init` and make their own
first commit. When the tree is clean on top of an existing commit there is
nothing left to commit, so the commit step is skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

from frontkick.core.config import AppSettings
from frontkick.core.domain.results import Failure, FailureKind
from frontkick.core.interfaces.process import ProcessRunner

logger = logging.getLogger(__name__)


def git_failure(step: str, result_code: int, output: str) -> Failure:
    return Failure(
        kind=FailureKind.VCS,
        message=f"git {step} failed",
        step=f"git {step}",
        exit_code=result_code,
        output=output,
    )


class LocalRepositoryInitializer:
    def __init__(self, *, settings: AppSettings, runner: ProcessRunner) -> None:
        self._settings = settings
        self._runner = runner

    def init_local_repo(self, project_dir: Path) -> Failure | None:
        git = self._settings.git_executable

        for name, argv in (("init", [git, "init"]), ("add", [git, "add", "."])):
            failure = self._step(name, argv, project_dir)
            if failure is not None:
                return failure

        needs_commit = self._needs_commit(project_dir)
        if isinstance(needs_commit, Failure):
            return needs_commit
        if needs_commit:
            failure = self._step(
                "commit",
                [git, "commit", "-m", self._settings.initial_commit_message],
                project_dir,
            )
            if failure is not None:
                return failure
        else:
            logger.info("Generator already committed %s; keeping its history", project_dir)

        failure = self._step("branch", [git, "branch", "-M", self._settings.canonical_branch], project_dir)
        if failure is not None:
            return failure
        logger.info("Initialized git repository in %s", project_dir)
        return None

    def _needs_commit(self, project_dir: Path) -> bool | Failure:
        git = self._settings.git_executable
        head = self._runner.run([git, "rev-parse", "--verify", "HEAD"], cwd=project_dir)
        if not head.ok:
            # No commit yet.
            return True
        status = self._runner.run([git, "status", "--porcelain"], cwd=project_dir)
        if not status.ok:
            return git_failure("status", status.returncode, status.output)
        return bool(status.stdout.strip())

    def _step(self, name: str, argv: list[str], project_dir: Path) -> Failure | None:
        result = self._runner.run(argv, cwd=project_dir)
        if result.ok:
            return None
        logger.error("git %s failed in %s (exit %s)", name, project_dir, result.returncode)
        return git_failure(name, result.returncode, result.output)
