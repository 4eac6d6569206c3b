"""Terminal prompts (typer + Rich).

Choices are shown as numbered lists; checkbox prompts accept space or comma
separated numbers, `all`, `none`, or an empty answer to keep the pre-checked
defaults.
"""

from __future__ import annotations

import re
from typing import Sequence

import typer
from rich.console import Console

from frontkick.core.interfaces.prompter import Prompter

_SEPARATORS = re.compile(r"[\s,]+")


class TerminalPrompter(Prompter):
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def ask_choice(self, message: str, choices: Sequence[str]) -> str:
        self._console.print(f"[bold cyan]?[/bold cyan] {message}:")
        for index, choice in enumerate(choices, 1):
            self._console.print(f"  [cyan]{index})[/cyan] {choice}")
        while True:
            answer = typer.prompt("  Enter number", default="1", show_default=True).strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            self._console.print("  [red]Invalid choice. Please try again.[/red]")

    def ask_multi_choice(self, message: str, choices: Sequence[tuple[str, bool]]) -> list[str]:
        self._console.print(f"[bold cyan]?[/bold cyan] {message}:")
        for index, (name, checked) in enumerate(choices, 1):
            mark = "[green]x[/green]" if checked else " "
            self._console.print(f"  [cyan]{index})[/cyan] [{mark}] {name}")
        defaults = [name for name, checked in choices if checked]
        while True:
            raw = typer.prompt(
                "  Numbers to enable (empty keeps the checked ones, 'all', 'none')",
                default="",
                show_default=False,
            )
            selected = _parse_selection(raw, choices, defaults)
            if selected is not None:
                return selected
            self._console.print("  [red]Invalid selection. Please try again.[/red]")

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        return typer.confirm(message, default=default)

    def ask_text(self, message: str) -> str:
        return typer.prompt(message, default="", show_default=False)

    def ask_secret(self, message: str) -> str:
        return typer.prompt(message, default="", show_default=False, hide_input=True)


def _parse_selection(
    raw: str,
    choices: Sequence[tuple[str, bool]],
    defaults: list[str],
) -> list[str] | None:
    answer = raw.strip().lower()
    names = [name for name, _ in choices]
    if not answer:
        return defaults
    if answer == "all":
        return names
    if answer == "none":
        return []

    picked: set[int] = set()
    for token in _SEPARATORS.split(answer):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= len(names):
            return None
        picked.add(int(token) - 1)
    return [name for index, name in enumerate(names) if index in picked]
