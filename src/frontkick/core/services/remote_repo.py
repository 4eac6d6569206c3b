"""Remote repository provisioning.

State machine:

    Prompted -> Skipped
    Prompted -> Provisioning -> Created -> Remoted -> Pushed
                             -> Failed (at any point after Prompted)

Nothing is rolled back: a repository created on the host stays there even if
the remote-add or push fails, and the local commit is never touched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from frontkick.core.config import AppSettings, BranchPolicy
from frontkick.core.domain.models import RemoteRepository
from frontkick.core.domain.results import Failure, ProvisionOutcome, ProvisionState
from frontkick.core.interfaces.hosting import RepositoryHost
from frontkick.core.interfaces.process import ProcessRunner
from frontkick.core.interfaces.prompter import Prompter
from frontkick.core.services.credentials import CredentialResolver
from frontkick.core.services.hooks import PipelineHooks
from frontkick.core.services.local_repo import git_failure

logger = logging.getLogger(__name__)


class RemoteProvisioner:
    def __init__(
        self,
        *,
        settings: AppSettings,
        runner: ProcessRunner,
        prompter: Prompter,
        host: RepositoryHost,
        resolver: CredentialResolver,
        hooks: PipelineHooks | None = None,
    ) -> None:
        self._settings = settings
        self._runner = runner
        self._prompter = prompter
        self._host = host
        self._resolver = resolver
        self._hooks = hooks or PipelineHooks()

    def provision(self, name: str, project_dir: Path) -> ProvisionOutcome:
        if not self._prompter.ask_confirm("Do you want to create a GitHub repository?", default=False):
            return ProvisionOutcome(state=ProvisionState.SKIPPED)

        credentials = self._resolver.resolve()
        if isinstance(credentials, Failure):
            return ProvisionOutcome(state=ProvisionState.FAILED, failure=credentials)

        self._hooks.emit_step(f"Creating repository {credentials.username}/{name} on GitHub...")
        created = self._host.create_repository(
            name,
            private=self._settings.repo_private,
            credentials=credentials,
        )
        if isinstance(created, Failure):
            logger.warning("Repository creation failed: %s", created.describe())
            return ProvisionOutcome(state=ProvisionState.FAILED, failure=created)
        self._hooks.emit_done(f"Repository created: {created.html_url or created.clone_url}")

        return self._push(created, project_dir)

    def target_branch(self, remote: RemoteRepository) -> str:
        if self._settings.branch_policy is BranchPolicy.REMOTE:
            return remote.default_branch
        return self._settings.canonical_branch

    def _push(self, remote: RemoteRepository, project_dir: Path) -> ProvisionOutcome:
        git = self._settings.git_executable
        origin = self._settings.remote_name
        branch = self.target_branch(remote)

        added = self._runner.run([git, "remote", "add", origin, remote.clone_url], cwd=project_dir)
        if not added.ok:
            return ProvisionOutcome(
                state=ProvisionState.FAILED,
                remote=remote,
                failure=git_failure("remote add", added.returncode, added.output),
            )

        if branch != self._settings.canonical_branch:
            renamed = self._runner.run([git, "branch", "-M", branch], cwd=project_dir)
            if not renamed.ok:
                return ProvisionOutcome(
                    state=ProvisionState.FAILED,
                    remote=remote,
                    failure=git_failure("branch", renamed.returncode, renamed.output),
                )

        self._hooks.emit_step(f"Pushing {branch} to {origin}...")
        pushed = self._runner.run([git, "push", "-u", origin, branch], cwd=project_dir, stream=True)
        if not pushed.ok:
            return ProvisionOutcome(
                state=ProvisionState.FAILED,
                remote=remote,
                branch=branch,
                failure=git_failure("push", pushed.returncode, pushed.output),
            )

        return ProvisionOutcome(state=ProvisionState.PUSHED, remote=remote, branch=branch)
