"""Validation results shared by all configuration validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from patioroof.application.config.schemas import PatioRoofConfiguration


class Severity(str, Enum):
    """ERROR blocks the quote; WARNING is advisory."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """One finding about a configuration.

    Attributes:
        path: JSON path of the field concerned (e.g. "configuration.depth")
        message: What is wrong or worth checking
        severity: Whether the issue blocks the quote
        value: Offending value, for errors
        suggestion: Suggested remedy, for warnings
    """

    path: str
    message: str
    severity: Severity = Severity.ERROR
    value: Any = None
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Issues collected by one or more validators."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def is_valid(self) -> bool:
        """True when nothing blocks the quote."""
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.issues.append(ValidationIssue(path, message, Severity.ERROR, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.issues.append(
            ValidationIssue(path, message, Severity.WARNING, suggestion=suggestion)
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        self.issues.extend(other.issues)
        return self


@runtime_checkable
class Validator(Protocol):
    """A named check over a schema-valid configuration."""

    @property
    def name(self) -> str: ...

    def validate(self, config: PatioRoofConfiguration) -> ValidationResult: ...
