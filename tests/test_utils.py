"""Unit tests for shared utilities and the rich prompter.

Tests cover:
- JSON load / write helpers
- remove_path for files, directories and missing paths
- format_duration
- Console helpers escape user-supplied text
- RichPrompter answers, re-validation and cancellation
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from dapp_scaffold.prompts import CANCELLED, Choice, RichPrompter, is_cancel
from dapp_scaffold.utils import (
    format_duration,
    load_json,
    print_error,
    print_warning,
    remove_path,
    write_json,
)

pytestmark = pytest.mark.unit


class TestJson:
    def test_round_trip_format(self, tmp_path: Path):
        path = tmp_path / "data.json"
        write_json({"name": "dapp", "emoji": "✓"}, path)
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "name": "dapp",\n  "emoji": "✓"\n}\n'
        assert load_json(path) == {"name": "dapp", "emoji": "✓"}

    def test_rejects_non_object(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


class TestRemovePath:
    def test_file(self, tmp_path: Path):
        target = tmp_path / "f.txt"
        target.write_text("x")
        remove_path(target)
        assert not target.exists()

    def test_directory(self, tmp_path: Path):
        target = tmp_path / "d" / "e"
        target.mkdir(parents=True)
        (target / "f").write_text("x")
        remove_path(tmp_path / "d")
        assert not (tmp_path / "d").exists()

    def test_missing(self, tmp_path: Path):
        remove_path(tmp_path / "nothing")


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "0.0s"), (3.7, "3.7s"), (65.2, "1m 5s"), (-1, "0.0s")],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected


class TestConsoleHelpers:
    def test_warning_escapes_markup(self, capsys):
        print_warning("Directory contains [bold]files[/bold]")
        assert "[bold]files[/bold]" in capsys.readouterr().out

    def test_error_goes_to_stderr(self, capsys):
        print_error("Something [red]broke[/red]", hint="Try again.")
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "[red]broke[/red]" in captured.err
        assert "Try again." in captured.err
        assert captured.out == ""


class TestRichPrompter:
    @pytest.fixture
    def prompter(self) -> RichPrompter:
        return RichPrompter(Console(file=io.StringIO(), width=100))

    def test_text_revalidates(self, prompter):
        with patch("dapp_scaffold.prompts.Prompt.ask", side_effect=["Bad", "good"]) as ask:
            answer = prompter.text(
                "Name?", default="my-dapp", validate=lambda v: None if v.islower() else "lowercase only"
            )
        assert answer == "good"
        assert ask.call_count == 2
        assert ask.call_args.kwargs["default"] == "my-dapp"
        assert "lowercase only" in prompter.console.file.getvalue()

    def test_text_without_default(self, prompter):
        with patch("dapp_scaffold.prompts.Prompt.ask", return_value="x") as ask:
            prompter.text("Name?")
        assert "default" not in ask.call_args.kwargs

    def test_select_returns_value(self, prompter):
        options = [Choice("a", "Alpha"), Choice("b", "Beta", hint="second")]
        with patch("dapp_scaffold.prompts.IntPrompt.ask", return_value=2) as ask:
            assert prompter.select("Pick", options, default="b") == "b"
        assert ask.call_args.kwargs["default"] == 2
        assert "Beta" in prompter.console.file.getvalue()

    def test_confirm(self, prompter):
        with patch("dapp_scaffold.prompts.Confirm.ask", return_value=True):
            assert prompter.confirm("Overwrite?") is True

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_interrupts_cancel(self, prompter, interrupt):
        with patch("dapp_scaffold.prompts.Prompt.ask", side_effect=interrupt), \
             patch("dapp_scaffold.prompts.IntPrompt.ask", side_effect=interrupt), \
             patch("dapp_scaffold.prompts.Confirm.ask", side_effect=interrupt):
            assert prompter.text("Name?") is CANCELLED
            assert prompter.select("Pick", [Choice("a", "Alpha")]) is CANCELLED
            assert is_cancel(prompter.confirm("Overwrite?"))
