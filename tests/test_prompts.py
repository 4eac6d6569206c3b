"""Tests for the terminal prompter."""

import pytest
from rich.console import Console

from frontkick.adapters import prompts
from frontkick.adapters.prompts import TerminalPrompter, _parse_selection

CHOICES = [("typescript", False), ("tailwindcss", False), ("srcDir", False), ("appRouter", True), ("customizeAlias", True)]
DEFAULTS = ["appRouter", "customizeAlias"]


class TestParseSelection:
    def test_empty_keeps_defaults(self):
        assert _parse_selection("", CHOICES, DEFAULTS) == DEFAULTS

    def test_numbers_keep_choice_order(self):
        assert _parse_selection("4 1", CHOICES, DEFAULTS) == ["typescript", "appRouter"]

    def test_commas_and_duplicates(self):
        assert _parse_selection("2,2, 3", CHOICES, DEFAULTS) == ["tailwindcss", "srcDir"]

    def test_all_and_none(self):
        assert _parse_selection("ALL", CHOICES, DEFAULTS) == [name for name, _ in CHOICES]
        assert _parse_selection("none", CHOICES, DEFAULTS) == []

    @pytest.mark.parametrize("raw", ["0", "6", "x", "1 two"])
    def test_invalid(self, raw):
        assert _parse_selection(raw, CHOICES, DEFAULTS) is None


class TestTerminalPrompter:
    def _prompter(self):
        return TerminalPrompter(Console(quiet=True))

    def test_ask_choice_retries_until_valid(self, monkeypatch):
        answers = iter(["9", "abc", "2"])
        monkeypatch.setattr(prompts.typer, "prompt", lambda *a, **k: next(answers))
        assert self._prompter().ask_choice("Choose a template", ["CRA", "Vite", "Next.js"]) == "Vite"

    def test_ask_multi_choice_retries_until_valid(self, monkeypatch):
        answers = iter(["7", "1 4"])
        monkeypatch.setattr(prompts.typer, "prompt", lambda *a, **k: next(answers))
        assert self._prompter().ask_multi_choice("Select options", CHOICES) == ["typescript", "appRouter"]

    def test_ask_secret_hides_input(self, monkeypatch):
        seen = {}

        def fake_prompt(message, **kwargs):
            seen.update(kwargs)
            return "ghp_x"

        monkeypatch.setattr(prompts.typer, "prompt", fake_prompt)
        assert self._prompter().ask_secret("token") == "ghp_x"
        assert seen["hide_input"] is True

    def test_ask_confirm_defaults_to_no(self, monkeypatch):
        seen = {}

        def fake_confirm(message, default=False):
            seen["default"] = default
            return default

        monkeypatch.setattr(prompts.typer, "confirm", fake_confirm)
        assert self._prompter().ask_confirm("Create?") is False
        assert seen["default"] is False
