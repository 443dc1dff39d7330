"""
Main API for depcycle.

This module implements CircularDependencyPlugin, which runs one circular
dependency pass over a compilation produced by a host build tool. A pass:

1. fires the ``on_start`` hook,
2. drops ineligible modules (orphans, unnamed, include/exclude misses),
3. runs an independent depth-first search from every eligible module, in
   module order, and reports each cycle that closes back to its root,
4. fires the ``on_end`` hook.

The same underlying cycle is reported once per member module that is an
eligible root; reports are not de-duplicated.

Example:
    >>> from depcycle import CircularDependencyPlugin, Compilation
    >>> plugin = CircularDependencyPlugin(DetectorOptions(fail_on_error=True))
    >>> compilation = plugin.run(Compilation(modules=modules))
    >>> for error in compilation.errors:
    ...     print(error)
"""

from __future__ import annotations

import time
from typing import Any

from ..analysis.cycle_detector import CycleDetector
from ..analysis.filters import ModuleFilter
from ..reporting.reporter import CycleReporter, create_reporter
from ..utils.logging_config import get_logger
from .compilation import Compilation
from .config import DetectorOptions
from .types import CyclePath, ModuleId, ModuleMap

PLUGIN_TITLE = "CircularDependencyPlugin"


class CircularDependencyPlugin:
    """Detects circular dependencies in a compiled module graph."""

    def __init__(self, options: DetectorOptions | None = None, **kwargs: Any) -> None:
        if options is None:
            options = DetectorOptions.from_mapping(kwargs)
        elif kwargs:
            options = options.merged(**kwargs)
        self.options: DetectorOptions = options
        self.filter = ModuleFilter(options)
        self.detector = CycleDetector(self.filter)
        self.reporter: CycleReporter = create_reporter(options)
        self.logger = get_logger()

    def apply(self, hooks: Any) -> None:
        """Attach the pass to a host exposing ``after_compile.tap(name, fn)``."""
        hooks.after_compile.tap(PLUGIN_TITLE, self.run)

    def is_cyclic(
        self,
        initial_module: ModuleId,
        current_module: ModuleId,
        modules_by_id: ModuleMap,
        seen_modules: dict[ModuleId, bool] | None = None,
    ) -> CyclePath | None:
        return self.detector.detect_cycle(
            initial_module, current_module, modules_by_id, seen_modules
        )

    def run(self, compilation: Compilation) -> Compilation:
        start = time.perf_counter()
        if self.options.on_start:
            self.options.on_start(compilation=compilation)

        modules = compilation.get_modules()
        self.logger.log_pass_start(len(modules))
        modules_by_id = self.filter.build_module_map(modules)

        cycles_found = 0
        for module_id in modules_by_id:
            paths = self.is_cyclic(module_id, module_id, modules_by_id)
            if paths:
                cycles_found += 1
                self.logger.log_cycle(module_id, paths)
                self.reporter.report(paths, compilation)

        stats = compilation.stats
        stats.modules_total = len(modules)
        stats.modules_eligible = len(modules_by_id)
        stats.cycles_found = cycles_found

        if self.options.on_end:
            self.options.on_end(compilation=compilation)

        stats.elapsed_ms = (time.perf_counter() - start) * 1000.0
        self.logger.log_pass_complete(stats.modules_eligible, cycles_found, stats.elapsed_ms)
        return compilation
