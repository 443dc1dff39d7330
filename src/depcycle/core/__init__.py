"""
Core functionality: data types, options, the compilation context and the
detection pass (``depcycle.core.api``).
"""
