"""
Command-line interface for depcycle.

Exposes the ``depcycle`` click group and the ``main`` console entry point.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
