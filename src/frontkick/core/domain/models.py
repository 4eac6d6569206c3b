"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde (nombre del proyecto, opciones de plantilla)
  con `Field`s autodocumentados, sin acoplar el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* compone una ejecución, no *cómo* corre cada paso.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from pydantic.config import ConfigDict

_SAFE_NAME = re.compile(r"^[A-Za-z0-9._][A-Za-z0-9._-]*$")


class Template(str, Enum):
    """Front-end project templates offered to the user."""

    CRA = "cra"
    VITE = "vite"
    NEXTJS = "nextjs"

    def label(self) -> str:
        """Human readable label for prompts."""

        return {
            Template.CRA: "CRA (Create React App)",
            Template.VITE: "Vite",
            Template.NEXTJS: "Next.js",
        }[self]

    @classmethod
    def from_label(cls, label: str) -> "Template":
        for template in cls:
            if template.label() == label:
                return template
        raise ValueError(f"unknown template: {label}")


class NextOption(str, Enum):
    """Boolean Next.js generator options, each passed as `--<value>`."""

    TYPESCRIPT = "typescript"
    TAILWINDCSS = "tailwindcss"
    SRC_DIR = "srcDir"
    APP_ROUTER = "appRouter"
    CUSTOMIZE_ALIAS = "customizeAlias"

    @property
    def checked_by_default(self) -> bool:
        return self in (NextOption.APP_ROUTER, NextOption.CUSTOMIZE_ALIAS)

    @property
    def flag(self) -> str:
        return f"--{self.value}"


class RunRequest(BaseModel):
    """What the user asked for: a project name plus the chosen template."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        ...,
        min_length=1,
        max_length=214,
        description="Directory and repository name (filesystem-safe).",
    )
    template: Template = Field(..., description="Selected scaffolding template.")
    options: list[NextOption] = Field(
        default_factory=list,
        description="Next.js options in prompt order; empty for other templates.",
    )

    @field_validator("project_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        name = value.strip()
        if name in {".", ".."} or not _SAFE_NAME.match(name):
            raise ValueError(
                "project name may only contain letters, digits, '.', '_' and '-' "
                "and must not start with '-'"
            )
        return name

    @field_validator("options")
    @classmethod
    def _dedupe(cls, value: list[NextOption]) -> list[NextOption]:
        return list(dict.fromkeys(value))

    @model_validator(mode="after")
    def _options_only_for_nextjs(self) -> "RunRequest":
        if self.options and self.template is not Template.NEXTJS:
            raise ValueError("template options are only meaningful for Next.js")
        return self


class CredentialSource(str, Enum):
    ENVIRONMENT = "environment"
    STORE = "store"
    PROMPT = "prompt"


class Credentials(BaseModel):
    """GitHub identity used for the repository-creation call."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    token: SecretStr = Field(..., description="Personal access token (never logged).")
    source: CredentialSource = Field(default=CredentialSource.ENVIRONMENT)

    @field_validator("token")
    @classmethod
    def _non_empty_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("token must not be empty")
        return value


class RemoteRepository(BaseModel):
    """Repository created on the hosting provider (from its API response)."""

    model_config = ConfigDict(extra="ignore")

    clone_url: str = Field(..., min_length=1)
    default_branch: str = Field(default="main", min_length=1)
    html_url: str | None = None

    @field_validator("default_branch", mode="before")
    @classmethod
    def _fallback_branch(cls, value: object) -> object:
        if value is None or value == "":
            return "main"
        return value
