"""Persistent key/value store used as a credential cache."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class CredentialStoreError(RuntimeError):
    """A value could not be written to the store."""


@runtime_checkable
class CredentialStore(Protocol):
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is unset or empty."""

        ...

    def set(self, key: str, value: str) -> None:
        """Persist `value`; raises `CredentialStoreError` on failure."""

        ...
