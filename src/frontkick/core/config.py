"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP, git, generadores) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BranchPolicy(str, Enum):
    """Which branch name is pushed after the remote repository is created."""

    CANONICAL = "canonical"
    REMOTE = "remote"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "frontkick"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "frontkick"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "frontkick"
    return Path.home() / ".config" / "frontkick"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Every field can be overridden with a `FRONTKICK_<FIELD>` environment
    variable, the project `.env`, or the user config `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRONTKICK_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    github_api_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of the GitHub REST API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per HTTP request (seconds).",
    )
    user_agent: str = Field(
        default="frontkick/1.0",
        min_length=1,
        description="User-Agent sent to the hosting provider.",
    )

    repo_private: bool = Field(
        default=False,
        description="Create the remote repository as private.",
    )
    branch_policy: BranchPolicy = Field(
        default=BranchPolicy.CANONICAL,
        description="Push the canonical branch, or rename to the remote default branch first.",
    )
    canonical_branch: str = Field(default="main", min_length=1)
    remote_name: str = Field(default="origin", min_length=1)
    initial_commit_message: str = Field(default="Initial commit", min_length=1)
    git_executable: str = Field(default="git", min_length=1)

    cra_command: list[str] = Field(
        default_factory=lambda: ["npx", "create-react-app"],
        description="Generator invocation for Create React App (project name is appended).",
    )
    vite_command: list[str] = Field(
        default_factory=lambda: ["npx", "create-vite@latest"],
        description="Generator invocation for Vite (project name is appended).",
    )
    vite_template: str = Field(
        default="react",
        min_length=1,
        description="Value passed to `--template` for Vite projects.",
    )
    nextjs_command: list[str] = Field(
        default_factory=lambda: ["npx", "create-next-app@latest"],
        description="Generator invocation for Next.js (project name and option flags are appended).",
    )
    verify_manifest: bool = Field(
        default=True,
        description="Fail when the generator exits 0 but leaves no manifest behind.",
    )
    manifest_filename: str = Field(default="package.json", min_length=1)

    prompt_for_credentials: bool = Field(
        default=True,
        description="Ask for GitHub credentials when neither env nor store has them.",
    )
    username_env_var: str = Field(default="GITHUB_USERNAME", min_length=1)
    token_env_var: str = Field(default="GITHUB_TOKEN", min_length=1)
    username_config_key: str = Field(default="github.user", min_length=1)
    token_config_key: str = Field(default="github.token", min_length=1)

    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Optional timeout per external command; unset means wait forever.",
    )
    log_level: str = Field(default="WARNING", min_length=1)

    @field_validator("github_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level
