"""Tests for the remote provisioning state machine."""

from conftest import FakeHost, InMemoryCredentialStore, ScriptedPrompter

from frontkick.core.config import AppSettings
from frontkick.core.domain.models import RemoteRepository
from frontkick.core.domain.results import Failure, FailureKind, ProvisionState
from frontkick.core.services.credentials import CredentialResolver
from frontkick.core.services.remote_repo import RemoteProvisioner


def _provisioner(settings, runner, prompter, host, environ, store=None):
    resolver = CredentialResolver(
        settings=settings,
        store=store or InMemoryCredentialStore(),
        prompter=prompter,
        environ=environ,
    )
    return RemoteProvisioner(settings=settings, runner=runner, prompter=prompter, host=host, resolver=resolver)


def test_declined_confirmation_skips_everything(settings, runner, host, github_env, tmp_path):
    prompter = ScriptedPrompter(confirm=False)
    outcome = _provisioner(settings, runner, prompter, host, github_env).provision("app", tmp_path)

    assert outcome.state is ProvisionState.SKIPPED
    assert host.calls == []
    assert runner.calls == []


def test_missing_credentials_adds_no_remote(settings, runner, host, tmp_path):
    prompter = ScriptedPrompter(confirm=True)
    outcome = _provisioner(settings, runner, prompter, host, {}).provision("app", tmp_path)

    assert outcome.state is ProvisionState.FAILED
    assert outcome.failure.kind is FailureKind.MISSING_CREDENTIALS
    assert host.calls == []
    assert not any(c.args[:3] == ("git", "remote", "add") for c in runner.calls)


def test_created_repo_is_wired_and_pushed_once(settings, runner, host, github_env, tmp_path):
    prompter = ScriptedPrompter(confirm=True)
    outcome = _provisioner(settings, runner, prompter, host, github_env).provision("app", tmp_path)

    assert outcome.state is ProvisionState.PUSHED
    assert outcome.branch == "main"
    name, private, creds = host.calls[0]
    assert (name, private, creds.username) == ("app", False, "octocat")

    args = [c.args for c in runner.calls]
    assert args == [
        ("git", "remote", "add", "origin", "https://host/x.git"),
        ("git", "push", "-u", "origin", "main"),
    ]
    assert all(c.cwd == tmp_path for c in runner.calls)


def test_private_setting_is_forwarded(runner, host, github_env, tmp_path):
    settings = AppSettings(_env_file=None, repo_private=True)
    _provisioner(settings, runner, ScriptedPrompter(confirm=True), host, github_env).provision("app", tmp_path)
    assert host.calls[0][1] is True


def test_api_failure_touches_nothing_locally(settings, runner, github_env, tmp_path):
    host = FakeHost(result=Failure(kind=FailureKind.REMOTE_API, message="GitHub answered HTTP 422"))
    outcome = _provisioner(settings, runner, ScriptedPrompter(confirm=True), host, github_env).provision("app", tmp_path)

    assert outcome.state is ProvisionState.FAILED
    assert outcome.failure.kind is FailureKind.REMOTE_API
    assert runner.calls == []


def test_remote_add_failure_is_reported_without_push(settings, runner, host, github_env, tmp_path):
    runner.respond(["git", "remote", "add"], returncode=3, output="remote origin already exists")
    outcome = _provisioner(settings, runner, ScriptedPrompter(confirm=True), host, github_env).provision("app", tmp_path)

    assert outcome.state is ProvisionState.FAILED
    assert outcome.failure.kind is FailureKind.VCS
    assert outcome.failure.step == "git remote add"
    assert outcome.remote is not None
    assert runner.commands("git")[-1][:2] != ("git", "push")


def test_push_failure_keeps_remote(settings, runner, host, github_env, tmp_path):
    runner.respond(["git", "push"], returncode=1)
    outcome = _provisioner(settings, runner, ScriptedPrompter(confirm=True), host, github_env).provision("app", tmp_path)

    assert outcome.state is ProvisionState.FAILED
    assert outcome.failure.step == "git push"
    assert outcome.remote.clone_url == "https://host/x.git"
    assert len([c for c in runner.calls if c.args[1] == "push"]) == 1


def test_remote_branch_policy_renames_before_push(runner, github_env, tmp_path):
    settings = AppSettings(_env_file=None, branch_policy="remote")
    host = FakeHost(result=RemoteRepository(clone_url="https://host/x.git", default_branch="trunk"))
    outcome = _provisioner(settings, runner, ScriptedPrompter(confirm=True), host, github_env).provision("app", tmp_path)

    assert outcome.branch == "trunk"
    assert [c.args for c in runner.calls][1:] == [
        ("git", "branch", "-M", "trunk"),
        ("git", "push", "-u", "origin", "trunk"),
    ]


def test_canonical_policy_ignores_remote_default_branch(settings, runner, github_env, tmp_path):
    host = FakeHost(result=RemoteRepository(clone_url="https://host/x.git", default_branch="trunk"))
    outcome = _provisioner(settings, runner, ScriptedPrompter(confirm=True), host, github_env).provision("app", tmp_path)

    assert outcome.branch == "main"
    assert runner.calls[-1].args == ("git", "push", "-u", "origin", "main")
