"""Contrato de preguntas interactivas.

Por qué Protocol:
- El orquestador pregunta sin saber si responde una terminal real o un doble
  de test con respuestas guionizadas.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Prompter(Protocol):
    def ask_choice(self, message: str, choices: Sequence[str]) -> str:
        """Single choice; returns one of `choices`."""

        ...

    def ask_multi_choice(self, message: str, choices: Sequence[tuple[str, bool]]) -> list[str]:
        """Checkbox-style choice over `(name, checked_by_default)` pairs.

        Returns the selected names in the order of `choices`.
        """

        ...

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        ...

    def ask_text(self, message: str) -> str:
        ...

    def ask_secret(self, message: str) -> str:
        """Like `ask_text`, with the input masked."""

        ...
