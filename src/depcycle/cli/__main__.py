"""
CLI entry point for depcycle.

This module serves as the entry point when depcycle.cli is executed as a module
with `python -m depcycle.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
