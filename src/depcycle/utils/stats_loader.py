"""
Host adapter for webpack/rspack style stats documents.

Build tools can export their resolved module graph as JSON (``stats.toJson()``
or ``--json``). Only the parts needed for cycle detection are read::

    {
      "modules": [
        {
          "id": "./src/a.js",
          "name": "./src/a.js",
          "orphan": false,
          "reasons": [{"moduleId": "./src/b.js", "type": "harmony import specifier"}]
        }
      ]
    }

Missing ``name``, ``orphan`` and ``reasons`` keys fall back to ``None``,
``False`` and an empty list. Anything else that does not fit this shape raises
GraphFormatError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from ..core.compilation import Compilation
from ..core.types import ModuleRecord, Reason
from .error_handling import GraphFormatError


def _parse_reason(raw: Any, module_id: Any) -> Reason:
    if not isinstance(raw, dict):
        raise GraphFormatError(
            "Module reason must be an object", context={"module_id": module_id}
        )
    edge_type = raw.get("type")
    if edge_type is not None and not isinstance(edge_type, str):
        raise GraphFormatError(
            "Module reason 'type' must be a string",
            context={"module_id": module_id, "type": repr(edge_type)},
        )
    return Reason(module_id=raw.get("moduleId"), type=edge_type)


def parse_module(raw: Any) -> ModuleRecord:
    if not isinstance(raw, dict) or raw.get("id") is None:
        raise GraphFormatError("Module entry must be an object with an 'id'")

    module_id = raw["id"]
    # ids are map keys; bool is an int subclass but never a stats id
    if isinstance(module_id, bool) or not isinstance(module_id, (str, int)):
        raise GraphFormatError(
            "Module 'id' must be a string or an integer",
            context={"id": repr(module_id)},
        )
    reasons = raw.get("reasons") or []
    if not isinstance(reasons, list):
        raise GraphFormatError(
            "Module 'reasons' must be a list", context={"module_id": module_id}
        )
    return ModuleRecord(
        id=module_id,
        name=raw.get("name"),
        orphan=bool(raw.get("orphan", False)),
        reasons=[_parse_reason(reason, module_id) for reason in reasons],
    )


def compilation_from_stats(data: Any) -> Compilation:
    """Build a Compilation from an already-decoded stats document."""
    if not isinstance(data, dict):
        raise GraphFormatError("Stats document must be a JSON object")
    modules = data.get("modules")
    if not isinstance(modules, list):
        raise GraphFormatError("Stats document has no 'modules' list")
    return Compilation(modules=[parse_module(raw) for raw in modules])


def load_stats(path: Path) -> Compilation:
    """Read a stats JSON file and build a Compilation from it."""
    path = Path(path)
    try:
        data = orjson.loads(path.read_bytes())
    except OSError as e:
        raise GraphFormatError(f"Cannot read stats file: {e}", file_path=path) from e
    except orjson.JSONDecodeError as e:
        raise GraphFormatError(f"Stats file is not valid JSON: {e}", file_path=path) from e

    try:
        return compilation_from_stats(data)
    except GraphFormatError as e:
        e.file_path = path
        raise
