#!/usr/bin/env python3
"""
Example 01: Circular dependency detection

Demonstrates:
- Building a module graph by hand
- Default reporting (warnings) and fail_on_error (errors)
- include / exclude filters
- Replacing the default output with on_detected
- Loading a bundler stats document
"""

from __future__ import annotations

import sys
from pathlib import Path

from depcycle import CircularDependencyPlugin, Compilation, DetectorOptions, ModuleRecord, Reason
from depcycle.utils.stats_loader import load_stats

# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def section(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


def sample_modules() -> list[ModuleRecord]:
    # main -> api -> store -> api, plus a lazily loaded settings page
    return [
        ModuleRecord(id="main", name="./src/main.js", reasons=[Reason(None, "entry")]),
        ModuleRecord(
            id="api",
            name="./src/api.js",
            reasons=[
                Reason("main", "harmony import specifier"),
                Reason("store", "harmony import specifier"),
            ],
        ),
        ModuleRecord(id="store", name="./src/store.js", reasons=[Reason("api", "harmony import specifier")]),
        ModuleRecord(
            id="settings",
            name="./src/settings.js",
            reasons=[Reason("main", "harmony import specifier"), Reason("main", "import()")],
        ),
    ]


# ---------------------------------------------------------------------------
# 1. Default reporting
# ---------------------------------------------------------------------------


def demo_default() -> None:
    section("1. Default reporting")
    compilation = CircularDependencyPlugin().run(Compilation(modules=sample_modules()))
    for warning in compilation.warnings:
        print(f"  {warning.name}: {warning.message.splitlines()[-1]}")


# ---------------------------------------------------------------------------
# 2. Filters and severity
# ---------------------------------------------------------------------------


def demo_filters() -> None:
    section("2. Filters and severity")
    options = DetectorOptions(include=r"api\.js", fail_on_error=True)
    compilation = CircularDependencyPlugin(options).run(Compilation(modules=sample_modules()))
    print(f"  include=api.js -> {len(compilation.errors)} error(s)")
    for error in compilation.errors:
        print(f"    {' -> '.join(error.paths)}")

    options = DetectorOptions(exclude=r"store\.js")
    compilation = CircularDependencyPlugin(options).run(Compilation(modules=sample_modules()))
    print(f"  exclude=store.js -> {len(compilation.warnings)} warning(s)")


# ---------------------------------------------------------------------------
# 3. Custom handling
# ---------------------------------------------------------------------------


def demo_on_detected() -> None:
    section("3. Custom handling with on_detected")
    cycles: list[list[str]] = []

    def on_detected(paths: list[str], compilation: Compilation) -> None:
        cycles.append(paths)

    CircularDependencyPlugin(DetectorOptions(on_detected=on_detected)).run(
        Compilation(modules=sample_modules())
    )
    for paths in cycles:
        print(f"  {' -> '.join(paths)}")


# ---------------------------------------------------------------------------
# 4. Stats documents
# ---------------------------------------------------------------------------


def demo_stats(path: Path) -> None:
    section(f"4. Stats document: {path}")
    compilation = CircularDependencyPlugin().run(load_stats(path))
    s = compilation.stats
    print(f"  modules={s.modules_total} eligible={s.modules_eligible} cycles={s.cycles_found}")


def main() -> None:
    demo_default()
    demo_filters()
    demo_on_detected()
    stats_path = Path(sys.argv[1]) if len(sys.argv) > 1 else (
        Path(__file__).resolve().parent.parent / "test_data" / "stats" / "defg.json"
    )
    demo_stats(stats_path)


if __name__ == "__main__":
    main()
