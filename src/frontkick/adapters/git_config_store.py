"""Credential store backed by `git config --global`."""

from __future__ import annotations

import logging
from pathlib import Path

from frontkick.core.interfaces.credential_store import CredentialStore, CredentialStoreError
from frontkick.core.interfaces.process import ProcessRunner

logger = logging.getLogger(__name__)


class GitConfigCredentialStore(CredentialStore):
    def __init__(self, runner: ProcessRunner, *, git: str = "git", scope: str = "--global") -> None:
        self._runner = runner
        self._git = git
        self._scope = scope

    def get(self, key: str) -> str | None:
        # `git config --get` exits 1 when the key is unset.
        result = self._runner.run([self._git, "config", self._scope, "--get", key], cwd=Path.home())
        if not result.ok:
            return None
        value = result.stdout.strip()
        return value or None

    def set(self, key: str, value: str) -> None:
        result = self._runner.run([self._git, "config", self._scope, key, value], cwd=Path.home())
        if not result.ok:
            # argv holds the value (possibly a token): report the key only.
            raise CredentialStoreError(f"git config {self._scope} {key} failed (exit {result.returncode})")
        logger.debug("Stored %s in git config", key)
