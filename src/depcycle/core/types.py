"""
Core data types for depcycle.

This module contains the data classes and enumerations shared by the filter,
the cycle detector, the reporters and the host adapters.

Key Types:
    EdgeKind: Classification of an incoming edge (static, dynamic, ...)
    Reason: One incoming edge of a module ("module X depends on me")
    ModuleRecord: One node of the dependency graph
    ModuleMap: Mapping from module id to ModuleRecord
    CyclePath: Ordered display names forming a detected cycle
    CircularDependencyWarning: Structured warning entry appended to a compilation
    PassStats: Counters collected for one detection pass
    OutputFormat: Supported CLI output formats

Example:
    Building a tiny graph by hand:
        >>> from depcycle.core.types import ModuleRecord, Reason
        >>> a = ModuleRecord(id="a", name="./a.js", reasons=[Reason(module_id="b")])
        >>> b = ModuleRecord(id="b", name="./b.js", reasons=[Reason(module_id="a")])
        >>> modules = {m.id: m for m in (a, b)}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List

import regex as regex_mod

ModuleId = Hashable

# Matches the reason types hosts emit for lazily-resolved dependencies.
DYNAMIC_EDGE_PATTERN = regex_mod.compile(r"dynamic import|import\(\)")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


class EdgeKind(str, Enum):
    """Common incoming-edge tags. Hosts may report any other string."""

    STATIC = "harmony import specifier"
    SIDE_EFFECT = "harmony side effect evaluation"
    REEXPORT = "harmony export imported specifier"
    REQUIRE = "cjs require"
    DYNAMIC = "dynamic import"
    IMPORT_CALL = "import()"


@dataclass
class Reason:
    """An incoming edge: ``module_id`` imports the module that owns this reason."""

    module_id: ModuleId | None
    type: str | None = None

    @property
    def is_dynamic(self) -> bool:
        return bool(self.type) and DYNAMIC_EDGE_PATTERN.search(self.type) is not None


@dataclass
class ModuleRecord:
    """A module as reported by the host build tool."""

    id: ModuleId
    name: str | None = None
    orphan: bool = False
    reasons: list[Reason] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Name with a leading ``./`` removed, or the raw id when unnamed."""
        if self.name is None:
            return str(self.id)
        return self.name[2:] if self.name.startswith("./") else self.name


ModuleMap = Dict[ModuleId, ModuleRecord]
CyclePath = List[str]


@dataclass
class CircularDependencyWarning:
    """Structured warning entry for a cycle reported in warning mode."""

    message: str
    name: str = "CircularDependencyWarning"

    def __str__(self) -> str:
        return self.message


@dataclass
class PassStats:
    modules_total: int = 0
    modules_eligible: int = 0
    cycles_found: int = 0
    elapsed_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "modules_total": self.modules_total,
            "modules_eligible": self.modules_eligible,
            "cycles_found": self.cycles_found,
            "elapsed_ms": self.elapsed_ms,
        }
