"""Pytest fixtures: in-memory doubles for every injected capability."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

import pytest

from frontkick.core.config import AppSettings
from frontkick.core.domain.models import Credentials, RemoteRepository
from frontkick.core.domain.results import Failure
from frontkick.core.interfaces.credential_store import CredentialStoreError
from frontkick.core.interfaces.process import ProcessResult


@dataclass
class Call:
    args: tuple[str, ...]
    cwd: Path
    stream: bool


class FakeRunner:
    """Records every command; commands succeed unless a rule says otherwise.

    The project directory starts without commits: `git rev-parse --verify HEAD`
    fails until a test says otherwise.
    """

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self._rules: list[tuple[tuple[str, ...], int, str, str]] = [
            (("git", "rev-parse", "--verify", "HEAD"), 128, "fatal: Needed a single revision\n", ""),
        ]
        self._hooks: list[Callable[[tuple[str, ...], Path], None]] = []

    def respond(self, prefix: Sequence[str], returncode: int = 0, output: str = "", stdout: str = "") -> None:
        self._rules.insert(0, (tuple(prefix), returncode, output or stdout, stdout))

    def on_call(self, hook: Callable[[tuple[str, ...], Path], None]) -> None:
        self._hooks.append(hook)

    def run(self, args: Sequence[str], *, cwd: Path, stream: bool = False) -> ProcessResult:
        argv = tuple(args)
        self.calls.append(Call(argv, Path(cwd), stream))
        for hook in self._hooks:
            hook(argv, Path(cwd))
        for prefix, returncode, output, stdout in self._rules:
            if argv[: len(prefix)] == prefix:
                return ProcessResult(args=argv, returncode=returncode, output=output, stdout=stdout)
        return ProcessResult(args=argv, returncode=0)

    def commands(self, executable: str) -> list[tuple[str, ...]]:
        return [call.args for call in self.calls if call.args[0] == executable]


def scaffold_on_npx(argv: tuple[str, ...], cwd: Path) -> None:
    """Behave like a generator: `npx <tool> <name> ...` creates <name>/package.json."""

    if argv[0] == "npx":
        project = cwd / argv[2]
        project.mkdir(parents=True, exist_ok=True)
        (project / "package.json").write_text('{"name": "%s"}\n' % argv[2], encoding="utf-8")


@dataclass
class ScriptedPrompter:
    choice: str = "CRA (Create React App)"
    multi: list[str] | None = None
    confirm: bool = False
    text: str = ""
    secret: str = ""
    asked: list[str] = field(default_factory=list)
    multi_choices: list[tuple[str, bool]] = field(default_factory=list)

    def ask_choice(self, message: str, choices: Sequence[str]) -> str:
        self.asked.append(f"choice:{message}")
        assert self.choice in choices
        return self.choice

    def ask_multi_choice(self, message: str, choices: Sequence[tuple[str, bool]]) -> list[str]:
        self.asked.append(f"multi:{message}")
        self.multi_choices = list(choices)
        if self.multi is None:
            return [name for name, checked in choices if checked]
        return list(self.multi)

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        self.asked.append(f"confirm:{message}")
        return self.confirm

    def ask_text(self, message: str) -> str:
        self.asked.append(f"text:{message}")
        return self.text

    def ask_secret(self, message: str) -> str:
        self.asked.append(f"secret:{message}")
        return self.secret


class InMemoryCredentialStore:
    def __init__(self, values: dict[str, str] | None = None, *, fail_writes: bool = False) -> None:
        self.values = dict(values or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> str | None:
        return self.values.get(key) or None

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise CredentialStoreError(f"cannot write {key}")
        self.values[key] = value


@dataclass
class FakeHost:
    result: RemoteRepository | Failure = field(
        default_factory=lambda: RemoteRepository(clone_url="https://host/x.git", default_branch="main")
    )
    calls: list[tuple[str, bool, Credentials]] = field(default_factory=list)

    def create_repository(self, name: str, *, private: bool, credentials: Credentials) -> RemoteRepository | Failure:
        self.calls.append((name, private, credentials))
        return self.result


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def github_env() -> dict[str, str]:
    return {"GITHUB_USERNAME": "octocat", "GITHUB_TOKEN": "ghp_secret"}
