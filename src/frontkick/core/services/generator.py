"""Project generator invocation (CRA, Vite, Next.js)."""

from __future__ import annotations

import logging
from pathlib import Path

from frontkick.core.config import AppSettings
from frontkick.core.domain.models import NextOption, RunRequest, Template
from frontkick.core.domain.results import Failure, FailureKind
from frontkick.core.interfaces.process import ProcessRunner
from frontkick.core.interfaces.prompter import Prompter

logger = logging.getLogger(__name__)


class ProjectGenerator:
    """Asks which template to use and runs the matching external generator.

    The generator's output is streamed to the terminal: scaffolding can take
    minutes (dependency installs) and may ask its own questions.
    """

    def __init__(self, *, settings: AppSettings, runner: ProcessRunner, prompter: Prompter) -> None:
        self._settings = settings
        self._runner = runner
        self._prompter = prompter

    def choose_template(self) -> Template:
        label = self._prompter.ask_choice("Choose a template", [t.label() for t in Template])
        return Template.from_label(label)

    def choose_options(self, template: Template) -> list[NextOption]:
        if template is not Template.NEXTJS:
            return []
        selected = self._prompter.ask_multi_choice(
            "Select options",
            [(option.value, option.checked_by_default) for option in NextOption],
        )
        return [NextOption(name) for name in selected]

    def build_command(self, request: RunRequest) -> list[str]:
        if request.template is Template.CRA:
            return [*self._settings.cra_command, request.project_name]
        if request.template is Template.VITE:
            return [
                *self._settings.vite_command,
                request.project_name,
                "--template",
                self._settings.vite_template,
            ]
        return [
            *self._settings.nextjs_command,
            request.project_name,
            *(option.flag for option in request.options),
        ]

    def generate(self, request: RunRequest, workdir: Path) -> Path | Failure:
        command = self.build_command(request)
        target = (workdir / request.project_name).resolve()
        logger.info("Running generator: %s", " ".join(command))

        result = self._runner.run(command, cwd=workdir, stream=True)
        if not result.ok:
            return Failure(
                kind=FailureKind.GENERATOR,
                message=f"{request.template.label()} generator failed",
                step=result.command,
                exit_code=result.returncode,
                output=result.output,
            )

        if self._settings.verify_manifest:
            manifest = target / self._settings.manifest_filename
            if not manifest.is_file():
                return Failure(
                    kind=FailureKind.GENERATOR,
                    message=(
                        f"generator exited 0 but {manifest} is missing; "
                        "the project was not created"
                    ),
                    step=result.command,
                    exit_code=result.returncode,
                )
        elif not target.is_dir():
            return Failure(
                kind=FailureKind.GENERATOR,
                message=f"generator exited 0 but {target} does not exist",
                step=result.command,
                exit_code=result.returncode,
            )

        return target
