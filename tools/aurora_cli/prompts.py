"""Interactive prompt layer.

Commands never call input() directly; they ask a Prompter. The default
implementation renders questions with rich, and tests substitute a scripted
prompter with the same four methods.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

from aurora_cli.errors import PromptUnavailableError, UserCancelledError
from aurora_cli.output import console as default_console

T = TypeVar("T")

Validator = Callable[[str], "str | None"]
"""Returns an error message for invalid input, or None when it is acceptable."""


def required(message: str) -> Validator:
    """Validator rejecting blank input with the given message."""
    def check(value: str) -> str | None:
        return None if value.strip() else message
    return check


class Prompter:
    """Rich-backed terminal prompts.

    Ctrl+C becomes UserCancelledError and a closed stdin becomes
    PromptUnavailableError, so the command wrapper can report both cleanly.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def _guard(self, ask: Callable[[], T]) -> T:
        try:
            return ask()
        except KeyboardInterrupt as exc:
            raise UserCancelledError() from exc
        except EOFError as exc:
            raise PromptUnavailableError() from exc

    def _error(self, message: str) -> None:
        self.console.print(message, style="red", markup=False)

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        validate: Validator | None = None,
    ) -> str:
        """Ask for free text, re-asking until validate accepts it."""
        while True:
            if default is None:
                answer = self._guard(lambda: Prompt.ask(message, console=self.console))
            else:
                answer = self._guard(
                    lambda: Prompt.ask(message, console=self.console, default=default)
                )
            answer = answer.strip()
            problem = validate(answer) if validate else None
            if problem is None:
                return answer
            self._error(problem)

    def select(self, message: str, choices: Sequence[str]) -> str:
        """Ask for exactly one of choices."""
        return self._guard(
            lambda: Prompt.ask(
                message,
                console=self.console,
                choices=list(choices),
                default=choices[0],
            )
        )

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        *,
        error: str = "At least one option must be selected.",
    ) -> list[str]:
        """Ask for one or more choices by number (e.g. "1,3").

        Returns the selected values in the order they appear in choices.
        """
        self.console.print(message, markup=False)
        for index, choice in enumerate(choices, start=1):
            self.console.print(f"  {index}. {choice}", markup=False)
        while True:
            raw = self._guard(
                lambda: Prompt.ask("Enter numbers separated by commas", console=self.console)
            )
            picked = _parse_selection(raw, len(choices))
            if picked:
                return [choices[index] for index in sorted(picked)]
            self._error(error)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        return self._guard(lambda: Confirm.ask(message, console=self.console, default=default))


def _parse_selection(raw: str, count: int) -> set[int]:
    """Parse "1, 3" into zero-based indices; any bad token rejects the whole answer."""
    picked: set[int] = set()
    for token in raw.replace(" ", ",").split(","):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            return set()
        picked.add(int(token) - 1)
    return picked
