"""
Per-root circular dependency detection.

The detector walks "depended-on-by" edges (a module's reasons) depth-first,
starting from a root module, and stops as soon as an edge leads back to that
root. The path it returns reads as the forward cause chain of the cycle and
starts and ends with the same module, for example::

    ["b.js", "c.js", "b.js"]

Traversal rules:
    - A module, once seen, stays seen for the rest of the root's search.
      Reaching a seen module that is not the root skips that edge, so
      sub-cycles that do not touch the root are never reported from it.
    - Edges are visited in ``reasons`` order; the first closing edge found
      depth-first decides the reported path.
    - An edge from the root to itself never closes a cycle.

The traversal keeps an explicit stack of ``(module_id, reasons iterator)``
frames instead of recursing, so very deep linear chains do not hit the
interpreter's recursion limit.

Example:
    >>> detector = CycleDetector(ModuleFilter(options))
    >>> module_map = detector.filter.build_module_map(modules)
    >>> detector.detect_cycle("b", "b", module_map)
    ['b.js', 'c.js', 'b.js']
"""

from __future__ import annotations

from typing import Iterator

from ..core.types import CyclePath, ModuleId, ModuleMap, Reason
from .filters import ModuleFilter


class CycleDetector:
    """Finds the first cycle closing back to a given root module."""

    def __init__(self, module_filter: ModuleFilter | None = None) -> None:
        self.filter = module_filter or ModuleFilter()

    def detect_cycle(
        self,
        root: ModuleId,
        current: ModuleId,
        module_map: ModuleMap,
        seen: dict[ModuleId, bool] | None = None,
    ) -> CyclePath | None:
        """
        Search for a cycle through ``root``, starting at ``current``.

        Args:
            root: Module id the search is anchored to
            current: Module id to start expanding from (usually ``root``)
            module_map: Filtered working map of eligible modules
            seen: Seen set shared across the root's search; created if omitted

        Returns:
            The cycle path as display names, or None when no edge leads back
            to ``root``.
        """
        if seen is None:
            seen = {}

        seen[current] = True
        stack: list[tuple[ModuleId, Iterator[Reason]]] = [
            (current, iter(module_map[current].reasons))
        ]

        while stack:
            module_id, reasons = stack[-1]
            for reason in reasons:
                if not self.filter.is_traversable(reason, module_map):
                    continue

                source = reason.module_id
                if source in seen:
                    if source == root and module_id != root:
                        return self._build_path(source, stack, module_map)
                    # seen, but closes a cycle that does not include the root
                    continue

                seen[source] = True
                stack.append((source, iter(module_map[source].reasons)))
                break
            else:
                stack.pop()

        return None

    def _build_path(
        self,
        closing_source: ModuleId,
        stack: list[tuple[ModuleId, Iterator[Reason]]],
        module_map: ModuleMap,
    ) -> CyclePath:
        # Closing edge first, then unwind the stack from deepest frame to start.
        path = [module_map[closing_source].display_name]
        path.extend(module_map[module_id].display_name for module_id, _ in reversed(stack))
        return path

    def find_cycles(self, module_map: ModuleMap) -> dict[ModuleId, CyclePath]:
        """Run an independent search from every id in map order.

        Every member of a cycle reports it again from its own root; results
        are not de-duplicated across roots.
        """
        cycles: dict[ModuleId, CyclePath] = {}
        for module_id in module_map:
            path = self.detect_cycle(module_id, module_id, module_map)
            if path:
                cycles[module_id] = path
        return cycles
