"""
depcycle: circular dependency detection for bundler module graphs.

Given the resolved module graph of a build (each module with its incoming
"reasons" edges), depcycle runs an independent depth-first search from every
eligible module and reports each cycle that closes back to that module, with
the exact chain of modules forming it.

Main Classes:
    CircularDependencyPlugin: Runs a detection pass over a Compilation
    DetectorOptions: include/exclude patterns, severity and hooks
    Compilation: Module list plus the warnings/errors a pass appends to
    CycleDetector: The per-root depth-first search
    ModuleRecord, Reason: Graph input types

Example Usage:
    Programmatic:
        >>> from depcycle import CircularDependencyPlugin, DetectorOptions
        >>> from depcycle.utils.stats_loader import load_stats
        >>> compilation = load_stats("stats.json")
        >>> CircularDependencyPlugin(DetectorOptions(exclude=r"node_modules")).run(compilation)
        >>> for warning in compilation.warnings:
        ...     print(warning.message)

    Custom handling:
        >>> cycles = []
        >>> plugin = CircularDependencyPlugin(
        ...     on_detected=lambda paths, compilation: cycles.append(paths)
        ... )

    CLI usage:
        $ depcycle check stats.json --exclude node_modules --fail-on-error
"""

__version__ = "1.0.0"

from .analysis.cycle_detector import CycleDetector
from .analysis.filters import ModuleFilter
from .core.api import CircularDependencyPlugin
from .core.compilation import Compilation
from .core.config import DetectorOptions
from .core.types import (
    CircularDependencyWarning,
    CyclePath,
    EdgeKind,
    ModuleMap,
    ModuleRecord,
    OutputFormat,
    PassStats,
    Reason,
)
from .utils.error_handling import ConfigurationError, DepcycleError, GraphFormatError

__all__ = [
    "__version__",
    "CircularDependencyPlugin",
    "CircularDependencyWarning",
    "Compilation",
    "ConfigurationError",
    "CycleDetector",
    "CyclePath",
    "DepcycleError",
    "DetectorOptions",
    "EdgeKind",
    "GraphFormatError",
    "ModuleFilter",
    "ModuleMap",
    "ModuleRecord",
    "OutputFormat",
    "PassStats",
    "Reason",
]
