# Tests for verifying the package skeleton is importable, documented and ships its data.

import importlib
import pkgutil
from importlib import resources

import pytest

import dummygen

SUBPACKAGES = ["config", "introspect", "populate", "utils", "values"]


def test_all_modules_have_docstrings() -> None:
    """Every submodule imports cleanly and carries a docstring."""
    for module_info in pkgutil.walk_packages(dummygen.__path__, dummygen.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


@pytest.mark.parametrize("name", SUBPACKAGES)
def test_subpackage_exports_resolve(name: str) -> None:
    module = importlib.import_module(f"dummygen.{name}")
    for attr in module.__all__:
        assert hasattr(module, attr), f"dummygen.{name}.{attr}"


@pytest.mark.parametrize(
    "resource",
    [
        "first_names_en.txt",
        "last_names_en.txt",
        "words_en.txt",
        "first_names_tr.txt",
        "last_names_tr.txt",
        "words_tr.txt",
    ],
)
def test_word_lists_are_bundled(resource: str) -> None:
    text = resources.files("dummygen.values").joinpath("data").joinpath(resource).read_text("utf-8")
    assert len([line for line in text.splitlines() if line.strip()]) >= 20


def test_defaults_are_bundled() -> None:
    assert resources.files("dummygen.config").joinpath("defaults.yml").is_file()
