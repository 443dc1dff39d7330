"""
Cycle reporting strategies.

A reporter turns one detected cycle path into an observable outcome on the
compilation. The strategy is chosen once per plugin, from the options:

    - HandlerReporter: an ``on_detected`` hook is configured; it receives the
      path and the compilation and fully replaces the default output. Any
      exception it raises is appended to ``compilation.errors`` and the pass
      carries on with the next module.
    - DefaultReporter: builds ``"Circular dependency detected:\\r\\n" + " -> ".join(paths)``
      and records it as an error (``fail_on_error``) or as a
      CircularDependencyWarning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..core.compilation import Compilation
from ..core.config import DetectorOptions
from ..core.types import CircularDependencyWarning, CyclePath
from ..utils.logging_config import get_logger

BASE_ERROR = "Circular dependency detected:\r\n"


class CircularDependencyError(Exception):
    """Error entry recorded for a cycle when failing on error."""

    def __init__(self, message: str, paths: CyclePath) -> None:
        super().__init__(message)
        self.message = message
        self.paths = paths


def format_cycle_message(paths: CyclePath) -> str:
    return BASE_ERROR + " -> ".join(paths)


class CycleReporter(ABC):
    @abstractmethod
    def report(self, paths: CyclePath, compilation: Compilation) -> None:
        """Record one detected cycle on the compilation."""


class DefaultReporter(CycleReporter):
    def __init__(self, fail_on_error: bool = False) -> None:
        self.fail_on_error = fail_on_error

    def report(self, paths: CyclePath, compilation: Compilation) -> None:
        message = format_cycle_message(paths)
        if self.fail_on_error:
            compilation.errors.append(CircularDependencyError(message, list(paths)))
        else:
            compilation.warnings.append(CircularDependencyWarning(message=message))


class HandlerReporter(CycleReporter):
    def __init__(self, handler: Callable[..., Any]) -> None:
        self.handler = handler

    def report(self, paths: CyclePath, compilation: Compilation) -> None:
        try:
            self.handler(paths=paths, compilation=compilation)
        except Exception as err:
            get_logger().error(
                f"on_detected handler failed: {err}",
                operation="handler_error",
                error_type=type(err).__name__,
            )
            compilation.errors.append(err)


def create_reporter(options: DetectorOptions) -> CycleReporter:
    """Select the reporting strategy for a set of options."""
    if options.on_detected is not None:
        return HandlerReporter(options.on_detected)
    return DefaultReporter(fail_on_error=options.fail_on_error)
