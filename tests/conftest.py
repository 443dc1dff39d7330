"""
Shared test fixtures and graph builders for depcycle tests.

Graphs are written as incoming edges, the way a host build tool reports them:
``mod("b", reasons=["a", "c"])`` means a.js and c.js both import b.js.
"""

from pathlib import Path

import orjson
import pytest

from depcycle import Compilation, ModuleRecord, Reason
from depcycle.utils import logging_config

DEPS_PREFIX = "./__tests__/deps/"
TEST_DATA_DIR = Path(__file__).resolve().parent.parent / "test_data"


def mod(module_id, reasons=(), name="", orphan=False):
    """Build a ModuleRecord; reasons are ids or ``(id, type)`` tuples."""
    if name == "":
        name = f"{DEPS_PREFIX}{module_id}.js"
    parsed = []
    for reason in reasons:
        if isinstance(reason, tuple):
            parsed.append(Reason(module_id=reason[0], type=reason[1]))
        else:
            parsed.append(Reason(module_id=reason, type="harmony import specifier"))
    return ModuleRecord(id=module_id, name=name, orphan=orphan, reasons=parsed)


def entry(module_id, name=""):
    return mod(module_id, reasons=[(None, "entry")], name=name)


def dep(module_id):
    """Display name of a fixture module, as it appears in reported paths."""
    return f"__tests__/deps/{module_id}.js"


# a -> b -> c -> b
def abc_modules():
    return [entry("a"), mod("b", ["a", "c"]), mod("c", ["b"])]


# d -> e -> f -> g -> e
def defg_modules():
    return [entry("d"), mod("e", ["d", "g"]), mod("f", ["e"]), mod("g", ["f"])]


# h -> i -> ctx -> i, where ctx is a context module without a resource name
def context_modules():
    return [
        entry("h"),
        mod("i", ["h", "ctx"]),
        mod("ctx", ["i"], name=None),
    ]


# a module whose compiled output references itself
def self_referencing_modules():
    return [
        mod(
            "uses-this",
            [(None, "entry"), ("uses-this", "cjs self exports reference")],
        )
    ]


# index -> a -> b -> a; concatenation folds a and b into index as orphans
def concat_modules(concatenated):
    return [
        entry("index"),
        mod("a", ["index", "b"], orphan=concatenated),
        mod("b", ["a"], orphan=concatenated),
    ]


# p -> q -> r -> import("q")
def async_modules():
    return [entry("p"), mod("q", ["p", ("r", "import()")]), mod("r", ["q"])]


@pytest.fixture
def abc_compilation():
    return Compilation(modules=abc_modules())


@pytest.fixture
def defg_compilation():
    return Compilation(modules=defg_modules())


@pytest.fixture
def stats_dir():
    return TEST_DATA_DIR / "stats"


@pytest.fixture
def write_stats(tmp_path):
    """Write a stats document to a temp file and return its path."""

    def _write(data, name="stats.json"):
        path = tmp_path / name
        path.write_bytes(orjson.dumps(data))
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Each test starts without a configured global logger."""
    logging_config._global_logger = None
    yield
    logging_config._global_logger = None


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
