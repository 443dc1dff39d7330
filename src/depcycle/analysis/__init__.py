"""
Graph analysis: module eligibility filtering and per-root cycle detection.
"""

from .cycle_detector import CycleDetector
from .filters import ModuleFilter

__all__ = [
    "CycleDetector",
    "ModuleFilter",
]
