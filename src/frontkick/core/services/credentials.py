"""GitHub credential resolution.

Order:
1) environment variables (`GITHUB_USERNAME` / `GITHUB_TOKEN` by default)
2) the credential store (global git config in production)
3) an interactive prompt, token masked; the answers are written back to the store

A source is only used when it provides both values.
"""

from __future__ import annotations

import logging
from typing import Mapping

from frontkick.core.config import AppSettings
from frontkick.core.domain.models import CredentialSource, Credentials
from frontkick.core.domain.results import Failure, FailureKind
from frontkick.core.interfaces.credential_store import CredentialStore, CredentialStoreError
from frontkick.core.interfaces.prompter import Prompter

logger = logging.getLogger(__name__)


class CredentialResolver:
    def __init__(
        self,
        *,
        settings: AppSettings,
        store: CredentialStore,
        prompter: Prompter,
        environ: Mapping[str, str],
    ) -> None:
        self._settings = settings
        self._store = store
        self._prompter = prompter
        self._environ = environ

    def resolve(self) -> Credentials | Failure:
        for source, lookup in (
            (CredentialSource.ENVIRONMENT, self._from_environment),
            (CredentialSource.STORE, self._from_store),
        ):
            username, token = lookup()
            if username and token:
                logger.debug("GitHub credentials resolved from %s", source.value)
                return Credentials(username=username, token=token, source=source)

        if self._settings.prompt_for_credentials:
            username, token = self._from_prompt()
            if username and token:
                try:
                    self._store.set(self._settings.username_config_key, username)
                    self._store.set(self._settings.token_config_key, token)
                    logger.info("GitHub credentials saved to the credential store")
                except CredentialStoreError as exc:
                    logger.warning("Could not persist GitHub credentials: %s", exc)
                return Credentials(username=username, token=token, source=CredentialSource.PROMPT)

        return Failure(
            kind=FailureKind.MISSING_CREDENTIALS,
            message=(
                "GitHub username or token is not set "
                f"(checked ${self._settings.username_env_var}/${self._settings.token_env_var}, "
                f"git config {self._settings.username_config_key}/{self._settings.token_config_key})"
            ),
            step="resolve credentials",
        )

    def locate(self) -> CredentialSource | None:
        """Non-interactive lookup: which source would provide credentials, if any."""

        if all(self._from_environment()):
            return CredentialSource.ENVIRONMENT
        if all(self._from_store()):
            return CredentialSource.STORE
        return None

    def _from_environment(self) -> tuple[str, str]:
        return (
            (self._environ.get(self._settings.username_env_var) or "").strip(),
            (self._environ.get(self._settings.token_env_var) or "").strip(),
        )

    def _from_store(self) -> tuple[str, str]:
        return (
            (self._store.get(self._settings.username_config_key) or "").strip(),
            (self._store.get(self._settings.token_config_key) or "").strip(),
        )

    def _from_prompt(self) -> tuple[str, str]:
        username = self._prompter.ask_text("GitHub username").strip()
        if not username:
            return "", ""
        token = self._prompter.ask_secret("GitHub personal access token").strip()
        return username, token
