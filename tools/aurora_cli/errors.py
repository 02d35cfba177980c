"""Typed error hierarchy with explicit failure states.

- All domain errors extend CliError and carry structured context
- User-facing messages are derived from error type and context
- Errors are caught at the command boundary by with_error_handling()
"""

from __future__ import annotations

from collections.abc import Sequence


class CliError(RuntimeError):
    """Base error for all CLI operations.

    Subclasses provide structured context; the __str__ method formats
    user-facing messages. Never use raw CliError; always use a specific subclass.
    """


class ValidationError(CliError):
    """Manifest failed schema validation.

    Attributes:
        issues: Every violation found, as "<field-path> <reason>" strings
    """
    def __init__(self, issues: Sequence[str]) -> None:
        self.issues = list(issues)
        super().__init__(f"Validation failed: {', '.join(self.issues)}")


class AlreadyExistsError(CliError):
    """Destination path is already taken.

    Attributes:
        path: The path that already exists
    """
    def __init__(self, path: str, label: str = "Directory") -> None:
        self.path = path
        self.label = label
        super().__init__(f'{label} "{path}" already exists.')


class NotFoundError(CliError):
    """An expected file, directory or extension does not exist.

    Attributes:
        entity_type: What was looked for (e.g. "Extension", "Manifest")
        entity_id: The id or path that was searched for
    """
    def __init__(self, entity_type: str, entity_id: str, detail: str | None = None) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(detail or f"{entity_type} '{entity_id}' not found")


class PlatformUnsupportedError(CliError):
    """Operation is gated to an operating system other than the current one.

    Attributes:
        operation: The command that was refused
        required: Human-readable name of the supported platform
    """
    def __init__(self, operation: str, required: str = "macOS") -> None:
        self.operation = operation
        self.required = required
        super().__init__(f"The {operation} command is only supported on {required}.")


class ExternalToolError(CliError):
    """An external process exited unsuccessfully or could not be started.

    Attributes:
        command: The argv that was run
        returncode: Exit status (None when the binary could not be launched)
        output: Captured stderr/stdout, stripped
    """
    def __init__(self, command: Sequence[str], returncode: int | None, output: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        joined = " ".join(self.command)
        if returncode is None:
            message = f'Command "{joined}" could not be started'
        else:
            message = f'Command "{joined}" exited with code {returncode}'
        if output:
            message += f": {output}"
        super().__init__(message)


class InvalidJsonError(CliError):
    """JSON parsing failed.

    Attributes:
        path: The file that failed to parse
        detail: Parser error message
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid JSON in {path}: {detail}")


class InvalidValueError(CliError):
    """CLI value could not be accepted.

    Attributes:
        raw_value: The original string
        detail: Explanation of the problem
    """
    def __init__(self, raw_value: str, detail: str) -> None:
        self.raw_value = raw_value
        self.detail = detail
        super().__init__(f"Invalid value '{raw_value}': {detail}")


class UserCancelledError(CliError):
    """The user aborted an interactive prompt (Ctrl+C / Ctrl+D)."""
    def __init__(self) -> None:
        super().__init__("Operation cancelled by the user.")


class PromptUnavailableError(CliError):
    """Prompts cannot be rendered because stdin is not interactive."""
    def __init__(self) -> None:
        super().__init__("Prompt couldn't be rendered in the current environment.")
