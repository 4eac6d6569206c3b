"""Doctor command for environment diagnostics (`frontkick-doctor`)."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from frontkick.adapters import GitConfigCredentialStore, GitHubHost, SubprocessRunner, TerminalPrompter
from frontkick.core.config import AppSettings, get_user_env_file
from frontkick.core.interfaces.credential_store import CredentialStoreError
from frontkick.core.services.credentials import CredentialResolver

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and GitHub credential setup.")

_console = Console()


def _check_executable(name: str) -> tuple[bool, str]:
    path = shutil.which(name)
    return (path is not None, path or "not found in PATH")


def _check_git_version(settings: AppSettings) -> tuple[bool, str]:
    result = SubprocessRunner().run([settings.git_executable, "--version"], cwd=Path.cwd())
    return result.ok, (result.stdout or result.output).strip()


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    runner = SubprocessRunner()
    resolver = CredentialResolver(
        settings=settings,
        store=GitConfigCredentialStore(runner, git=settings.git_executable),
        prompter=TerminalPrompter(_console),
        environ=os.environ,
    )

    table = Table(title="frontkick doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_git, detail_git = _check_git_version(settings)
    table.add_row("git", "OK" if ok_git else "FAIL", detail_git)

    for tool in ("node", "npx"):
        ok, detail = _check_executable(tool)
        table.add_row(tool, "OK" if ok else "FAIL", detail)

    source = resolver.locate()
    if source is not None:
        table.add_row("GitHub credentials", "OK", f"from {source.value}")
    else:
        table.add_row(
            "GitHub credentials",
            "OPTIONAL",
            f"set ${settings.username_env_var}/${settings.token_env_var} or run `frontkick-doctor setup-github`",
        )

    ok_http, detail_http = GitHubHost(settings).check_reachable()
    table.add_row("GitHub API", "OK" if ok_http else "FAIL", f"{settings.github_api_url} -> {detail_http}")

    table.add_row("Settings file", "OK", str(get_user_env_file()))
    table.add_row("Branch policy", "OK", settings.branch_policy.value)
    table.add_row("Repository visibility", "OK", "private" if settings.repo_private else "public")

    _console.print(table)

    if not ok_git:
        _console.print("\n[yellow]Note:[/yellow] git is required to initialize the local repository.")


@app.command(name="setup-github")
def setup_github() -> None:
    """Interactive GitHub setup (stores the username and token in global git config)."""

    settings = AppSettings()
    store = GitConfigCredentialStore(SubprocessRunner(), git=settings.git_executable)

    username = typer.prompt("GitHub username").strip()
    token = typer.prompt("GitHub personal access token", hide_input=True, confirmation_prompt=False).strip()
    if not username or not token:
        raise typer.BadParameter("username and token are required")

    try:
        store.set(settings.username_config_key, username)
        store.set(settings.token_config_key, token)
    except CredentialStoreError as exc:
        _console.print(f"[red]Could not save credentials:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    _console.print(
        f"[green]Saved GitHub credentials to git config:[/green] "
        f"{settings.username_config_key}, {settings.token_config_key}"
    )
