"""Hosting provider contract (GitHub in production)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from frontkick.core.domain.models import Credentials, RemoteRepository
from frontkick.core.domain.results import Failure


@runtime_checkable
class RepositoryHost(Protocol):
    def create_repository(
        self,
        name: str,
        *,
        private: bool,
        credentials: Credentials,
    ) -> RemoteRepository | Failure:
        """Create a repository owned by the authenticated user.

        Returns a `Failure` of kind REMOTE_API for any non-201 response or
        transport error.
        """

        ...
