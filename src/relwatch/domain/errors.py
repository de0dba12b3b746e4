"""Error types for option validation.

Validation never stops at the first problem: each bad field becomes a
:class:`ValidationError`, and related errors are grouped under an
:class:`ErrorList` so a whole configuration can be reported in one go.
"""

from __future__ import annotations

import json
from collections.abc import Iterable


class RelwatchError(Exception):
    """Base class for all relwatch errors."""


class DurationError(RelwatchError, ValueError):
    """Raised when a duration expression cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid duration {text!r}")
        self.text = text


class ValidationError(RelwatchError):
    """A single field that failed validation."""

    def __init__(self, field: str, value: str, *, prefix: str = "", hint: str = "") -> None:
        self.field = field
        self.value = value
        self.prefix = prefix
        self.hint = hint
        message = f"{prefix}{field}: {json.dumps(value, ensure_ascii=False)} <invalid>"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)


class ErrorList(RelwatchError):
    """Several errors combined into one value.

    ``str()`` renders the optional header, then each child error on its
    own line.  Children carry their own indentation in their prefix.
    """

    def __init__(self, errors: Iterable[Exception] = (), *, header: str = "") -> None:
        self.errors: list[Exception] = list(errors)
        self.header = header
        super().__init__(header)

    def append(self, error: Exception) -> None:
        self.errors.append(error)

    def extend(self, errors: Iterable[Exception]) -> None:
        self.errors.extend(errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        lines: list[str] = []
        if self.header:
            lines.append(self.header)
        lines.extend(str(error) for error in self.errors)
        return "\n".join(lines)


def error_to_string(err: BaseException | None) -> str:
    """Render *err* as text, or ``""`` when there is no error."""
    if err is None:
        return ""
    return str(err)
