from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .types import ModuleRecord, PassStats


@dataclass
class Compilation:
    """
    Compilation context handed to the detector and to every hook.

    ``warnings`` and ``errors`` are opaque collections: the detector only
    appends to them, and hooks may append anything they like.
    """

    modules: list[ModuleRecord] = field(default_factory=list)
    warnings: list[Any] = field(default_factory=list)
    errors: list[Any] = field(default_factory=list)
    stats: PassStats = field(default_factory=PassStats)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def get_modules(self) -> list[ModuleRecord]:
        return list(self.modules)
