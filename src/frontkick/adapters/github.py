"""GitHub repository host.

Uses the official REST API (`POST /user/repos`). Only HTTP 201 counts as
created; every other status, and every transport error, becomes a REMOTE_API
failure carrying the response body.
"""

from __future__ import annotations

import logging

import httpx

from frontkick.adapters.http_client import build_client
from frontkick.core.config import AppSettings
from frontkick.core.domain.models import Credentials, RemoteRepository
from frontkick.core.domain.results import Failure, FailureKind
from frontkick.core.interfaces.hosting import RepositoryHost

logger = logging.getLogger(__name__)

_API_VERSION = "2022-11-28"


class GitHubHost(RepositoryHost):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def create_repository(
        self,
        name: str,
        *,
        private: bool,
        credentials: Credentials,
    ) -> RemoteRepository | Failure:
        headers = {
            "Authorization": f"token {credentials.token.get_secret_value()}",
            "X-GitHub-Api-Version": _API_VERSION,
        }
        payload = {"name": name, "private": private}
        step = "POST /user/repos"

        try:
            with build_client(self._settings, extra_headers=headers, transport=self._transport) as client:
                resp = client.post("/user/repos", json=payload)
        except httpx.HTTPError as exc:
            logger.warning("GitHub request failed: %s", exc)
            return Failure(
                kind=FailureKind.REMOTE_API,
                message=f"could not reach GitHub: {exc}",
                step=step,
            )

        if resp.status_code != 201:
            return Failure(
                kind=FailureKind.REMOTE_API,
                message=f"GitHub answered HTTP {resp.status_code}",
                step=step,
                exit_code=resp.status_code,
                output=resp.text,
            )

        try:
            return RemoteRepository.model_validate(resp.json())
        except ValueError as exc:
            return Failure(
                kind=FailureKind.REMOTE_API,
                message=f"unexpected GitHub response: {exc}",
                step=step,
                exit_code=resp.status_code,
                output=resp.text,
            )

    def check_reachable(self) -> tuple[bool, str]:
        """Anonymous GET on the API root, for diagnostics."""

        try:
            with build_client(self._settings, transport=self._transport) as client:
                resp = client.get("/")
            return True, f"HTTP {resp.status_code}"
        except httpx.HTTPError as exc:
            return False, str(exc)
