"""Diagnostic model: structured warnings produced while processing a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the processed stylesheet.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The owning selector, if applicable.
        variable: The custom property involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    variable: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.selector:
            location = f" [selector={self.selector}]"
        return f"{self.severity.value}{location}: {self.message}"
