"""Tests for depcycle.utils.formatter module."""

from __future__ import annotations

import io
import json

from rich.console import Console

from conftest import defg_modules
from depcycle import CircularDependencyPlugin, Compilation, DetectorOptions
from depcycle.core.types import OutputFormat
from depcycle.utils.formatter import (
    entry_message,
    format_result,
    format_text,
    render_highlight_console,
    to_json_bytes,
)


def finished(**options):
    return CircularDependencyPlugin(DetectorOptions(**options)).run(
        Compilation(modules=defg_modules())
    )


class TestEntryMessage:
    def test_message_attribute(self):
        assert entry_message(Exception("x")) == "x"

    def test_plain_string(self):
        assert entry_message("a -> b") == "a -> b"


class TestFormatText:
    def test_warnings(self):
        out = format_text(finished())
        assert out.count("WARNING: Circular dependency detected:") == 3
        assert "\r" not in out
        assert "__tests__/deps/e.js -> __tests__/deps/f.js" in out
        assert out.splitlines()[-1].startswith("# modules=4 eligible=4 cycles=3 warnings=3 errors=0")

    def test_errors(self):
        out = format_text(finished(fail_on_error=True))
        assert out.count("ERROR: ") == 3

    def test_empty(self):
        out = format_text(Compilation())
        assert out.startswith("# modules=0")


class TestToJson:
    def test_payload(self):
        data = json.loads(to_json_bytes(finished(fail_on_error=True)))
        assert data["warnings"] == []
        assert len(data["errors"]) == 3
        assert data["errors"][0]["name"] == "CircularDependencyError"
        assert data["errors"][0]["paths"][0] == "__tests__/deps/e.js"
        assert data["stats"]["cycles_found"] == 3

    def test_warning_name(self):
        data = json.loads(to_json_bytes(finished()))
        assert data["warnings"][0]["name"] == "CircularDependencyWarning"

    def test_hook_entries(self):
        compilation = Compilation()
        compilation.warnings.append("plain")
        compilation.errors.append(ValueError("bad"))
        data = json.loads(to_json_bytes(compilation))
        assert data["warnings"][0]["message"] == "plain"
        assert data["errors"][0] == {"name": "ValueError", "message": "bad"}


class TestHighlight:
    def test_render(self):
        buf = io.StringIO()
        render_highlight_console(finished(), Console(file=buf, force_terminal=False, width=200))
        out = buf.getvalue()
        assert "WARNING" in out
        assert "__tests__/deps/g.js" in out


def test_format_result_dispatch():
    compilation = finished()
    assert json.loads(format_result(compilation, OutputFormat.JSON))["stats"]["modules_total"] == 4
    assert format_result(compilation, OutputFormat.TEXT).startswith("WARNING:")


def test_format_result_highlight_is_plain_text():
    compilation = finished()
    assert format_result(compilation, OutputFormat.HIGHLIGHT) == format_text(compilation)
