"""Error Hierarchy — typed, categorized exceptions for all pureops failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The four core functions never raise under UNBOUNDED or WRAP with a valid width
    - A failed check is CRITICAL: the running program aborts, nothing is retried
    - to_dict() produces the same envelope for every error type

Design Decisions:
    - Single hierarchy with PureOpsError base: the CLI catches one type and maps it to an exit code
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and exit-status mapping."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ASSERTION = "assertion"
    OVERFLOW = "overflow"
    RESOURCE_NOT_FOUND = "resource_not_found"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    program: str | None = None
    check: str | None = None
    operation: str | None = None


class PureOpsError(Exception):
    """Base exception for all pureops errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        exit_code: int = 1,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.exit_code = exit_code

    def to_dict(self) -> dict:
        """Convert to a serializable error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "program": self.context.program,
                    "check": self.context.check,
                    "operation": self.context.operation,
                },
            }
        }

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        extra: dict[str, Any] = {"error_code": self.code}
        if self.context.program is not None:
            extra["program"] = self.context.program
        if self.context.check is not None:
            extra["check"] = self.context.check
        if self.context.operation is not None:
            extra["operation"] = self.context.operation
        return extra


# ─── Check Errors ───────────────────────────────────────────────

class CheckFailedError(PureOpsError):
    """A check produced a value different from its expected value."""
    def __init__(
        self, program: str, label: str, expected: Any, actual: Any,
    ):
        super().__init__(
            f"{program}: check failed: {label} == {expected!r} (got {actual!r})",
            "CHECK_FAILED", ErrorCategory.ASSERTION,
            ErrorSeverity.CRITICAL,
            ErrorContext(program=program, check=label),
            1,
        )
        self.program = program
        self.label = label
        self.expected = expected
        self.actual = actual


class UnknownProgramError(PureOpsError):
    """Requested check program does not exist."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Check program '{name}' not found",
            "PROGRAM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context or ErrorContext(program=name), 2,
        )
        self.name = name


# ─── Integer Errors ─────────────────────────────────────────────

class IntegerOverflowError(PureOpsError):
    """Exact result does not fit the signed range under the TRAP policy."""
    def __init__(self, operation: str, value: int, bits: int):
        super().__init__(
            f"{operation} result {value} overflows a {bits}-bit signed integer",
            "INTEGER_OVERFLOW", ErrorCategory.OVERFLOW,
            ErrorSeverity.ERROR, ErrorContext(operation=operation), 1,
        )
        self.operation = operation
        self.value = value
        self.bits = bits


class InvalidWidthError(PureOpsError):
    """Integer width is not a positive number of bits."""
    def __init__(self, bits: int):
        super().__init__(
            f"Integer width must be at least 1 bit, got {bits}",
            "INVALID_WIDTH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, None, 2,
        )
        self.bits = bits
