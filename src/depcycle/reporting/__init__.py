from .reporter import (
    BASE_ERROR,
    CircularDependencyError,
    CycleReporter,
    DefaultReporter,
    HandlerReporter,
    create_reporter,
    format_cycle_message,
)

__all__ = [
    "BASE_ERROR",
    "CircularDependencyError",
    "CycleReporter",
    "DefaultReporter",
    "HandlerReporter",
    "create_reporter",
    "format_cycle_message",
]
