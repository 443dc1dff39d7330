#!/usr/bin/env python3
"""
Task runner for the depcycle project.

Usage:
    python scripts/tasks.py <command> [options]

Commands:
    lint           Run linting checks (ruff + black + mypy)
    format         Auto-format code (black + ruff --fix)
    test           Run tests with optional coverage and markers
    check-stats    Run depcycle against a stats file from this checkout
    clean          Clean build/cache artifacts

Examples:
    python scripts/tasks.py lint
    python scripts/tasks.py test --coverage --markers unit
    python scripts/tasks.py check-stats test_data/stats/defg.json
"""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent
SRC_DIR = PROJECT_ROOT / "src"

CLEAN_DIRS = [
    "build",
    "dist",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    "htmlcov",
]
CLEAN_FILES = [".coverage", "coverage.xml"]


def info(msg: str) -> None:
    print(f"INFO  {msg}")


def error(msg: str) -> None:
    print(f"ERR   {msg}", file=sys.stderr)


def run(cmd: list[str], *, check: bool = True) -> subprocess.CompletedProcess[str]:
    """Run a subprocess from the project root with src/ importable."""
    env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
    info(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=PROJECT_ROOT, check=check, text=True, env=env)


def cmd_lint(args: argparse.Namespace) -> None:
    failed = False
    for cmd in (
        [sys.executable, "-m", "ruff", "check", "."],
        [sys.executable, "-m", "black", "--check", "."],
    ):
        if run(cmd, check=False).returncode != 0:
            failed = True
    if not args.skip_mypy and run([sys.executable, "-m", "mypy"], check=False).returncode != 0:
        failed = True
    if failed:
        error("Linting checks failed")
        sys.exit(1)


def cmd_format(args: argparse.Namespace) -> None:
    run([sys.executable, "-m", "black", "."])
    run([sys.executable, "-m", "ruff", "check", ".", "--fix"])


def cmd_test(args: argparse.Namespace) -> None:
    cmd = [sys.executable, "-m", "pytest"]
    if args.coverage:
        cmd.extend(["--cov=src/depcycle", "--cov-report=term-missing"])
    if args.markers:
        cmd.extend(["-m", args.markers])
    if args.keyword:
        cmd.extend(["-k", args.keyword])
    if args.verbose:
        cmd.append("-v")
    if args.path:
        cmd.append(args.path)

    result = run(cmd, check=False)
    if result.returncode != 0:
        error("Tests failed")
        sys.exit(result.returncode)


def cmd_check_stats(args: argparse.Namespace) -> None:
    cmd = [sys.executable, "-m", "depcycle", "check", args.stats_file]
    if args.fail_on_error:
        cmd.append("--fail-on-error")
    sys.exit(run(cmd, check=False).returncode)


def cmd_clean(args: argparse.Namespace) -> None:
    for dirname in CLEAN_DIRS:
        p = PROJECT_ROOT / dirname
        if p.exists():
            shutil.rmtree(p)
            info(f"  Removed {dirname}/")
    for filename in CLEAN_FILES:
        p = PROJECT_ROOT / filename
        if p.exists():
            p.unlink()
            info(f"  Removed {filename}")
    for pycache in PROJECT_ROOT.rglob("__pycache__"):
        if pycache.is_dir():
            shutil.rmtree(pycache)
    for egg_info in SRC_DIR.glob("*.egg-info"):
        shutil.rmtree(egg_info)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasks",
        description="Task runner for the depcycle project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    p = subparsers.add_parser("lint", help="Run linting checks")
    p.add_argument("--skip-mypy", action="store_true", help="Skip mypy type checking")

    subparsers.add_parser("format", help="Auto-format code")

    p = subparsers.add_parser("test", help="Run tests")
    p.add_argument("--coverage", action="store_true", help="Enable coverage reporting")
    p.add_argument("--markers", "-m", help="Run tests matching marker expression")
    p.add_argument("--keyword", "-k", help="Run tests matching keyword expression")
    p.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    p.add_argument("--path", "-p", help="Specific test file or directory")

    p = subparsers.add_parser("check-stats", help="Run depcycle against a stats file")
    p.add_argument("stats_file", help="Stats JSON document")
    p.add_argument("--fail-on-error", action="store_true", help="Exit non-zero on cycles")

    subparsers.add_parser("clean", help="Clean build/cache artifacts")
    return parser


COMMANDS = {
    "lint": cmd_lint,
    "format": cmd_format,
    "test": cmd_test,
    "check-stats": cmd_check_stats,
    "clean": cmd_clean,
}


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(0 if not args.command else 1)

    try:
        handler(args)
    except subprocess.CalledProcessError as e:
        error(f"Command failed with exit code {e.returncode}")
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        error("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
