"""Interactive prompt collaborator.

Every prompt either returns the user's answer or the :data:`CANCELLED`
sentinel.  Cancellation is a value rather than an exception so the
orchestrator can handle it the same way at every step.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar, Union

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from .utils import console as default_console

T = TypeVar("T")


class _Cancelled(Enum):
    CANCELLED = "cancelled"

    def __repr__(self) -> str:
        return "CANCELLED"


CANCELLED = _Cancelled.CANCELLED
Cancelled = _Cancelled

# Return type of every prompt: the answer or CANCELLED.
PromptResult = Union[T, _Cancelled]


def is_cancel(value: object) -> bool:
    """Return ``True`` if *value* is the cancellation sentinel."""
    return value is CANCELLED


@dataclass(frozen=True)
class Choice(Generic[T]):
    """One entry of a single-choice selection."""

    value: T
    label: str
    hint: str = ""


class Prompter(Protocol):
    """What the orchestrator needs from an interactive front end."""

    def text(
        self,
        message: str,
        default: str = "",
        validate: Callable[[str], str | None] | None = None,
    ) -> PromptResult[str]:
        """Ask for free text.  *validate* returns an error message or ``None``."""
        ...

    def select(
        self, message: str, options: Sequence[Choice[T]], default: T | None = None
    ) -> PromptResult[T]:
        """Ask the user to pick one of *options*."""
        ...

    def confirm(self, message: str, default: bool = False) -> PromptResult[bool]:
        """Ask a yes/no question."""
        ...


class RichPrompter:
    """Terminal prompts built on ``rich.prompt``.

    Ctrl-C and end-of-input are reported as :data:`CANCELLED`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def text(
        self,
        message: str,
        default: str = "",
        validate: Callable[[str], str | None] | None = None,
    ) -> PromptResult[str]:
        extra = {"default": default} if default else {}
        while True:
            try:
                answer = Prompt.ask(
                    f"[bold]{escape(message)}[/bold]", console=self.console, **extra
                )
            except (KeyboardInterrupt, EOFError):
                return CANCELLED
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(f"  [red]{escape(error)}[/red]")

    def select(
        self, message: str, options: Sequence[Choice[T]], default: T | None = None
    ) -> PromptResult[T]:
        self.console.print(f"[bold]{escape(message)}[/bold]")
        default_index = 1
        for index, option in enumerate(options, start=1):
            if option.value == default:
                default_index = index
            hint = f" [dim]({escape(option.hint)})[/dim]" if option.hint else ""
            self.console.print(f"  [cyan]{index}.[/cyan] {escape(option.label)}{hint}")
        try:
            picked = IntPrompt.ask(
                "Select",
                choices=[str(i) for i in range(1, len(options) + 1)],
                default=default_index,
                show_choices=False,
                console=self.console,
            )
        except (KeyboardInterrupt, EOFError):
            return CANCELLED
        return options[picked - 1].value

    def confirm(self, message: str, default: bool = False) -> PromptResult[bool]:
        try:
            return Confirm.ask(
                f"[bold]{escape(message)}[/bold]", default=default, console=self.console
            )
        except (KeyboardInterrupt, EOFError):
            return CANCELLED
