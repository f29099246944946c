"""Diagnostic model: structured warnings produced while compiling class names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a class token or configuration entry.

    Attributes:
        code: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        token: The class token involved, if applicable.
    """

    code: str
    severity: Severity
    message: str
    token: str | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [class={self.token}]" if self.token else ""
        return f"{self.severity.value}{location}: {self.message}"


def warning(code: str, message: str, token: str | None = None) -> Diagnostic:
    """Shorthand for a WARNING-severity diagnostic."""
    return Diagnostic(code=code, severity=Severity.WARNING, message=message, token=token)
