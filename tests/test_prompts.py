from __future__ import annotations

import pytest

from aurora_cli.errors import PromptUnavailableError, UserCancelledError
from aurora_cli.prompts import Prompter, _parse_selection, required


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", {0}),
        ("1,3", {0, 2}),
        ("3, 1", {0, 2}),
        ("2 2", {1}),
        ("", set()),
        ("0", set()),
        ("4", set()),
        ("1,x", set()),
    ],
)
def test_parse_selection(raw, expected):
    assert _parse_selection(raw, 3) == expected


def test_required_rejects_blank_input():
    check = required("Name is required.")

    assert check("  ") == "Name is required."
    assert check("demo") is None


def test_interrupt_becomes_cancellation():
    def interrupted():
        raise KeyboardInterrupt

    with pytest.raises(UserCancelledError):
        Prompter()._guard(interrupted)


def test_closed_stdin_is_reported():
    def closed():
        raise EOFError

    with pytest.raises(PromptUnavailableError):
        Prompter()._guard(closed)
