"""Tests for packaging metadata and bundled data files."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _extras(pyproject: dict[str, Any]) -> dict[str, list[str]]:
    return cast(dict[str, list[str]], pyproject.get("project", {}).get("optional-dependencies", {}))


def test_optional_dependency_groups() -> None:
    extras = _extras(_load_pyproject())
    assert {"dev", "test"}.issubset(extras)
    assert any(req.startswith("pytest") for req in extras["test"])
    assert any(req.startswith("pytest") for req in extras["dev"])


def test_runtime_dependencies() -> None:
    deps = _load_pyproject()["project"]["dependencies"]
    names = {d.split(">")[0].split("=")[0].strip().lower() for d in deps}
    assert {"pydantic", "pyyaml", "typer"} <= names


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("dummygen") == "dummygen.cli:app"


def test_package_data_declared() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "*.yml" in data["dummygen.config"]
    assert "data/*.txt" in data["dummygen.values"]


def test_import_smoke() -> None:
    importlib.import_module("dummygen")
    importlib.import_module("dummygen.cli")
