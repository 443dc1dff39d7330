"""
Configuration module for depcycle.

This module defines DetectorOptions, the normalized option set consumed by the
filter, the cycle detector and the reporters. Absent options are filled with
permissive defaults: include everything, exclude nothing, report cycles as
warnings and follow every edge kind.

Classes:
    DetectorOptions: Normalized detector options with hooks

Example:
    Basic configuration:
        >>> from depcycle.core.config import DetectorOptions
        >>> options = DetectorOptions(exclude=r"node_modules", fail_on_error=True)

    From a camelCase mapping (e.g. a JSON options file):
        >>> options = DetectorOptions.from_mapping(
        ...     {"include": r"src/", "allowAsyncCycles": True}
        ... )
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Mapping

import orjson
import regex as regex_mod

from ..utils.error_handling import ConfigurationError

# Matches the empty string only at a position that is both an end and a start,
# which never happens inside a display name.
MATCH_NOTHING = r"$^"
MATCH_EVERYTHING = r".*"

_CAMEL_CASE_KEYS = {
    "failOnError": "fail_on_error",
    "allowAsyncCycles": "allow_async_cycles",
    "onStart": "on_start",
    "onDetected": "on_detected",
    "onEnd": "on_end",
}

_CALLBACK_FIELDS = ("on_start", "on_detected", "on_end")


def compile_pattern(pattern: Any, field_name: str) -> regex_mod.Pattern:
    """Compile a pattern option, accepting strings or precompiled patterns."""
    if hasattr(pattern, "search"):
        return pattern
    if not isinstance(pattern, str):
        raise ConfigurationError(
            f"Option '{field_name}' must be a pattern string",
            context={"field": field_name, "value": repr(pattern)},
        )
    try:
        return regex_mod.compile(pattern)
    except regex_mod.error as e:
        raise ConfigurationError(
            f"Invalid pattern for '{field_name}': {e}",
            context={"field": field_name, "value": pattern},
        ) from e


@dataclass(slots=True)
class DetectorOptions:
    # Scope
    exclude: Any = MATCH_NOTHING
    include: Any = MATCH_EVERYTHING

    # Behavior
    fail_on_error: bool = False
    allow_async_cycles: bool = False

    # Hooks
    on_start: Callable[..., Any] | None = None
    on_detected: Callable[..., Any] | None = None
    on_end: Callable[..., Any] | None = None

    # Compiled at construction time
    include_re: regex_mod.Pattern = field(init=False, repr=False)
    exclude_re: regex_mod.Pattern = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.exclude is None:
            self.exclude = MATCH_NOTHING
        if self.include is None:
            self.include = MATCH_EVERYTHING
        self.include_re = compile_pattern(self.include, "include")
        self.exclude_re = compile_pattern(self.exclude, "exclude")
        self.validate()

    def validate(self) -> None:
        """Validate option types and raise ConfigurationError on issues.

        Raises:
            ConfigurationError: If the options are invalid.
        """
        for name in ("fail_on_error", "allow_async_cycles"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Option '{name}' must be a boolean",
                    context={"field": name, "value": value},
                )

        for name in _CALLBACK_FIELDS:
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigurationError(
                    f"Option '{name}' must be callable",
                    context={"field": name, "value": repr(value)},
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DetectorOptions:
        """Build options from a mapping using snake_case or camelCase keys."""
        known = {f.name for f in fields(cls) if f.init}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ConfigurationError(
                    f"Unknown option '{key}'",
                    context={"field": key, "known": sorted(known)},
                )
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: Path) -> DetectorOptions:
        """Load options from a JSON document. Hooks cannot be set from a file."""
        try:
            data = orjson.loads(Path(path).read_bytes())
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read options file: {e}", context={"path": str(path)}
            ) from e
        except orjson.JSONDecodeError as e:
            raise ConfigurationError(
                f"Options file is not valid JSON: {e}", context={"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Options file must contain a JSON object", context={"path": str(path)}
            )
        for key in data:
            if _CAMEL_CASE_KEYS.get(key, key) in _CALLBACK_FIELDS:
                raise ConfigurationError(
                    f"Option '{key}' cannot be loaded from a file",
                    context={"path": str(path), "field": key},
                )
        return cls.from_mapping(data)

    def merged(self, **overrides: Any) -> DetectorOptions:
        """Return a copy with the non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return DetectorOptions(**values)

    def is_eligible_name(self, name: str | None) -> bool:
        """Include/exclude check against a display name. Absent names never pass."""
        if not name:
            return False
        return (
            self.include_re.search(name) is not None
            and self.exclude_re.search(name) is None
        )
