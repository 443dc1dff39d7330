"""
Module eligibility and edge filtering.

A module takes part in a detection pass only if it is not an orphan, has a
non-empty display name, matches the ``include`` pattern and does not match the
``exclude`` pattern. Ineligible modules are dropped from the working module
map before any traversal starts, so they are neither roots nor intermediate
hops. Edges are filtered during traversal: edges to ids outside the working
map are never followed, and dynamic/deferred edges are skipped when async
cycles are allowed.
"""

from __future__ import annotations

from typing import Iterable

from ..core.config import DetectorOptions
from ..core.types import ModuleMap, ModuleRecord, Reason


class ModuleFilter:
    """Applies the include/exclude and edge-kind rules of a DetectorOptions."""

    def __init__(self, options: DetectorOptions | None = None) -> None:
        self.options = options or DetectorOptions()

    def is_eligible(self, module: ModuleRecord) -> bool:
        if module.orphan:
            return False
        return self.options.is_eligible_name(module.name)

    def build_module_map(self, modules: Iterable[ModuleRecord]) -> ModuleMap:
        """Working map of eligible modules, keyed by id, in input order."""
        return {module.id: module for module in modules if self.is_eligible(module)}

    def is_traversable(self, reason: Reason, module_map: ModuleMap) -> bool:
        if reason.module_id is None or reason.module_id not in module_map:
            return False
        if self.options.allow_async_cycles and reason.is_dynamic:
            return False
        return True
