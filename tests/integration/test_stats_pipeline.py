"""End-to-end: stats document -> detection pass -> formatted report."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from depcycle import CircularDependencyPlugin, DetectorOptions
from depcycle.core.types import OutputFormat
from depcycle.utils.formatter import format_result
from depcycle.utils.stats_loader import load_stats

pytestmark = pytest.mark.integration

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def test_stats_to_warnings(stats_dir: Path):
    compilation = CircularDependencyPlugin().run(load_stats(stats_dir / "defg.json"))
    report = json.loads(format_result(compilation, OutputFormat.JSON))
    assert [w["name"] for w in report["warnings"]] == ["CircularDependencyWarning"] * 3
    assert report["warnings"][0]["message"].endswith(
        "__tests__/deps/e.js -> __tests__/deps/f.js -> __tests__/deps/g.js -> __tests__/deps/e.js"
    )


def test_custom_handler_collects_cycles(stats_dir: Path):
    cycles = []

    def on_detected(paths, compilation):
        cycles.append(tuple(paths))

    compilation = CircularDependencyPlugin(DetectorOptions(on_detected=on_detected)).run(
        load_stats(stats_dir / "defg.json")
    )
    assert compilation.warnings == []
    assert compilation.errors == []
    # one report per member of the cycle, each starting at its own root
    assert {c[0] for c in cycles} == {
        "__tests__/deps/e.js",
        "__tests__/deps/f.js",
        "__tests__/deps/g.js",
    }
    assert all(c[0] == c[-1] and len(c) == 4 for c in cycles)


def test_integer_ids_without_cycles(stats_dir: Path):
    compilation = CircularDependencyPlugin(fail_on_error=True).run(
        load_stats(stats_dir / "nocycle.json")
    )
    assert compilation.errors == []
    assert compilation.stats.modules_eligible == 2


def test_run_as_module(stats_dir: Path):
    proc = subprocess.run(
        [sys.executable, "-m", "depcycle", "check", str(stats_dir / "defg.json"), "--fail-on-error"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC_DIR)},
    )
    assert proc.returncode == 1
    assert "ERROR: Circular dependency detected:" in proc.stdout
