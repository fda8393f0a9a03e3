"""Pytest diagnostics and shared fixtures for CSV writer tests."""

from __future__ import annotations

import json
import os
import platform
import sys
from importlib import metadata
from pathlib import Path
from typing import Any

import pyarrow as pa
import pytest

from tests.test_helpers.csv_seed import abc_batch, abc_schema, empty_abc_batch

_DIAG_DIR = Path("build/test-results")
_ENV_PATH = _DIAG_DIR / "diagnostics_env.json"
_VERSIONS_PATH = _DIAG_DIR / "diagnostics_versions.json"


def _env_subset(prefixes: tuple[str, ...]) -> dict[str, str]:
    return {key: value for key, value in os.environ.items() if key.startswith(prefixes)}


def _collect_env() -> dict[str, Any]:
    return {
        "python": sys.version,
        "executable": sys.executable,
        "platform": platform.platform(),
        "env": _env_subset(("PYTHON", "ARROW", "ARROWCSV")),
        "pyarrow_version": pa.__version__,
    }


def _collect_versions() -> dict[str, str]:
    versions: dict[str, str] = {}
    for name in ("pyarrow", "msgspec", "pydantic", "pytest"):
        try:
            versions[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            continue
    return versions


def _write_json(path: Path, payload: dict[str, Any]) -> None:
    try:
        path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    except OSError:
        return


def pytest_sessionstart(session: object) -> None:
    """Record environment and version diagnostics for the session."""
    try:
        _DIAG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return
    _write_json(_ENV_PATH, _collect_env())
    _write_json(_VERSIONS_PATH, _collect_versions())
    _ = session


@pytest.fixture(autouse=True)
def _clear_csv_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ARROWCSV_* settings from the host out of tests."""
    for key in list(os.environ):
        if key.startswith("ARROWCSV_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def schema() -> pa.Schema:
    """Provide the three-column mixed-type schema.

    Returns
    -------
    pa.Schema
        Schema with fields ``a``, ``b"`` and ``c ``.
    """
    return abc_schema()


@pytest.fixture
def populated_batch() -> pa.RecordBatch:
    """Provide the populated six-row batch.

    Returns
    -------
    pa.RecordBatch
        Batch with nulls, empty strings, and embedded quotes.
    """
    return abc_batch()


@pytest.fixture
def empty_batch() -> pa.RecordBatch:
    """Provide a zero-row batch.

    Returns
    -------
    pa.RecordBatch
        Empty batch with the mixed-type schema.
    """
    return empty_abc_batch()
