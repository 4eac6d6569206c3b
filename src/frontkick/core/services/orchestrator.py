"""Run orchestration: generate -> local repo -> (optional) remote repo.

The CLI only builds the collaborators and renders the `RunReport`; every
decision about which failure aborts the run and which one degrades it lives
in `Orchestrator._apply_policy`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from frontkick.core.domain.models import RunRequest
from frontkick.core.domain.results import (
    EXIT_CODES,
    EXIT_OK,
    EXIT_USAGE,
    Failure,
    ProvisionState,
    RunReport,
)
from frontkick.core.services.generator import ProjectGenerator
from frontkick.core.services.hooks import PipelineHooks
from frontkick.core.services.local_repo import LocalRepositoryInitializer
from frontkick.core.services.remote_repo import RemoteProvisioner

logger = logging.getLogger(__name__)


class InvalidProjectName(ValueError):
    """The positional project name cannot be used as a directory name."""


def validate_project_name(name: str) -> str:
    # RunRequest carries the name rules; the template is irrelevant here.
    try:
        return RunRequest(project_name=name, template="cra").project_name
    except ValidationError as exc:
        errors = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidProjectName(f"invalid project name {name!r}: {errors}") from exc


class Orchestrator:
    def __init__(
        self,
        *,
        generator: ProjectGenerator,
        local_repo: LocalRepositoryInitializer,
        provisioner: RemoteProvisioner,
        hooks: PipelineHooks | None = None,
    ) -> None:
        self._generator = generator
        self._local_repo = local_repo
        self._provisioner = provisioner
        self._hooks = hooks or PipelineHooks()

    def run(self, project_name: str, workdir: Path) -> RunReport:
        report = RunReport()
        try:
            name = validate_project_name(project_name)
        except InvalidProjectName as exc:
            report.error = str(exc)
            report.exit_code = EXIT_USAGE
            return report

        template = self._generator.choose_template()
        options = self._generator.choose_options(template)
        request = RunRequest(project_name=name, template=template, options=options)
        report.request = request

        self._hooks.emit_step(f"Creating {template.label()} project {name}...")
        generated = self._generator.generate(request, workdir)
        if isinstance(generated, Failure):
            return self._apply_policy(report, generated)
        report.project_dir = generated
        self._hooks.emit_done(f"{template.label()} project created at {generated}")

        self._hooks.emit_step("Initializing git repository...")
        vcs_failure = self._local_repo.init_local_repo(generated)
        if vcs_failure is not None:
            return self._apply_policy(report, vcs_failure)
        self._hooks.emit_done("Git repository initialized with the initial commit")

        outcome = self._provisioner.provision(name, generated)
        report.provision = outcome
        if outcome.state is ProvisionState.FAILED and outcome.failure is not None:
            return self._apply_policy(report, outcome.failure)
        if outcome.state is ProvisionState.SKIPPED:
            self._hooks.emit_done("No GitHub repository created")
        else:
            self._hooks.emit_done(f"Pushed {outcome.branch} to GitHub")
        return report

    def _apply_policy(self, report: RunReport, failure: Failure) -> RunReport:
        report.failure = failure
        report.exit_code = EXIT_CODES[failure.kind]
        if report.exit_code == EXIT_OK:
            message = f"GitHub repository was not created; the local project is ready. {failure.describe()}"
            report.warnings.append(message)
            self._hooks.emit_warning(message)
        else:
            logger.error("Run failed (%s): %s", failure.kind.value, failure.message)
        return report
