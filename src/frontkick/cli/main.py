"""frontkick CLI: `frontkick <projectName>`.

This module only wires adapters into the orchestrator and renders the
resulting `RunReport`; the run itself lives in `core.services.orchestrator`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import typer
from rich.console import Console
from rich.logging import RichHandler

from frontkick import __version__
from frontkick.adapters import GitConfigCredentialStore, GitHubHost, SubprocessRunner, TerminalPrompter
from frontkick.cli.ui_components import build_failure_panel, build_summary_table, print_banner
from frontkick.core.config import AppSettings
from frontkick.core.domain.results import FailureKind
from frontkick.core.interfaces.credential_store import CredentialStore
from frontkick.core.interfaces.hosting import RepositoryHost
from frontkick.core.interfaces.process import ProcessRunner
from frontkick.core.interfaces.prompter import Prompter
from frontkick.core.services.credentials import CredentialResolver
from frontkick.core.services.generator import ProjectGenerator
from frontkick.core.services.hooks import PipelineHooks
from frontkick.core.services.local_repo import LocalRepositoryInitializer
from frontkick.core.services.orchestrator import Orchestrator
from frontkick.core.services.remote_repo import RemoteProvisioner

app = typer.Typer(
    add_completion=False,
    help="Create a new React / Vite / Next.js project and its Git repository.",
)

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def build_orchestrator(
    settings: AppSettings,
    *,
    environ: Mapping[str, str],
    runner: ProcessRunner | None = None,
    prompter: Prompter | None = None,
    store: CredentialStore | None = None,
    host: RepositoryHost | None = None,
    hooks: PipelineHooks | None = None,
) -> Orchestrator:
    """Assemble the production collaborators; any of them can be overridden."""

    runner = runner or SubprocessRunner(timeout_seconds=settings.command_timeout_seconds)
    prompter = prompter or TerminalPrompter(_console)
    store = store or GitConfigCredentialStore(runner, git=settings.git_executable)
    host = host or GitHubHost(settings)
    hooks = hooks or PipelineHooks()

    resolver = CredentialResolver(settings=settings, store=store, prompter=prompter, environ=environ)
    return Orchestrator(
        generator=ProjectGenerator(settings=settings, runner=runner, prompter=prompter),
        local_repo=LocalRepositoryInitializer(settings=settings, runner=runner),
        provisioner=RemoteProvisioner(
            settings=settings,
            runner=runner,
            prompter=prompter,
            host=host,
            resolver=resolver,
            hooks=hooks,
        ),
        hooks=hooks,
    )


def console_hooks() -> PipelineHooks:
    return PipelineHooks(
        step=lambda message: _console.print(f"[cyan]→[/cyan] {message}"),
        done=lambda message: _console.print(f"[green]✓[/green] {message}"),
        warning=lambda message: _err_console.print(f"[yellow]Warning:[/yellow] {message}"),
    )


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"frontkick {__version__}")
        raise typer.Exit()


@app.command()
def create(
    project_name: str = typer.Argument(..., help="Name of the project directory and repository."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Scaffold PROJECT_NAME, commit it, and optionally push it to a new GitHub repository."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    print_banner(_console)

    orchestrator = build_orchestrator(settings, environ=os.environ, hooks=console_hooks())
    report = orchestrator.run(project_name, Path.cwd())

    if report.error:
        _err_console.print(f"[red]Error:[/red] {report.error}")
    elif report.failure is not None and report.failure.kind is not FailureKind.REMOTE_API:
        _err_console.print(build_failure_panel(report.failure))
        if report.project_dir is not None:
            _err_console.print(f"[dim]Generated files were left in {report.project_dir}[/dim]")
    else:
        _console.print(build_summary_table(report))

    raise typer.Exit(code=report.exit_code)


def run() -> None:
    app()
