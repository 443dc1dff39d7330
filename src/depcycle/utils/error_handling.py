"""
Error classification for depcycle.

Cycles themselves are not errors: they are the intended output of a pass and
end up in a compilation's ``warnings`` or ``errors`` collection. The exceptions
defined here cover the situations where a pass cannot run at all.

Error Categories:
    - CONFIGURATION: Invalid options (bad pattern, unknown option key)
    - GRAPH_FORMAT: Malformed module map, or an unreadable stats document

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    DepcycleError: Base exception class for depcycle errors
    ConfigurationError: Raised for invalid detector options
    GraphFormatError: Raised for malformed module-map input

Example:
    >>> from depcycle.utils.error_handling import ConfigurationError
    >>> try:
    ...     DetectorOptions(include="(")
    ... except ConfigurationError as e:
    ...     print(e.context["field"])
    include
"""

from __future__ import annotations

import time
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    CONFIGURATION = "configuration"
    GRAPH_FORMAT = "graph_format"
    UNKNOWN = "unknown"


class DepcycleError(Exception):
    """Base exception for depcycle errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class ConfigurationError(DepcycleError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check include/exclude pattern syntax",
                "Check option names in the options file",
            ],
            context=context,
        )


class GraphFormatError(DepcycleError):
    """Malformed module map or stats document."""

    def __init__(
        self,
        message: str,
        file_path: Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.GRAPH_FORMAT,
            severity=ErrorSeverity.CRITICAL,
            file_path=file_path,
            suggestions=[
                "Export stats with module reasons enabled",
                "Verify the file is a stats JSON document with a 'modules' list",
            ],
            context=context,
        )


def describe_error(error: BaseException) -> str:
    """One-line description used by the CLI when a pass cannot run."""
    if isinstance(error, DepcycleError):
        text = f"{error.category.value}: {error.message}"
        if error.file_path:
            text += f" ({error.file_path})"
        return text
    return f"{type(error).__name__}: {error}"
