"""Typer-based command line interface for generating placeholder records.

The ``generate`` command imports a class given as ``module:Class``, populates
``--count`` instances and prints them as JSON.  Configuration follows the
usual precedence (package defaults < ``--config`` YAML < ``DUMMYGEN_*``
environment variables) with command line flags applied last.

Exit codes
----------
0 success
2 invalid target (module or class cannot be imported)
4 configuration error
5 population error (the class cannot be constructed or populated)
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .api import generate_many
from .config import DummyConfig, load_config
from .export import to_plain
from .utils.errors import DummyGenError, InvalidRequestError
from .utils.logging import configure_logging

app = typer.Typer(
    name="dummygen",
    help="Generate placeholder instances of Python classes. Use 'dummygen generate'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _import_target(target: str) -> type:
    """Return the class named by ``module:Class`` (``Class`` may be dotted)."""

    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise InvalidRequestError(f"Target must look like 'module:Class', got {target!r}")
    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise InvalidRequestError(f"{target!r} is not a class")
    return obj


def _apply_overrides(
    cfg: DummyConfig,
    *,
    language: str | None,
    meaningful: bool | None,
    max_list_size: int | None,
    allow_nulls: bool | None,
    seed: int | None,
) -> DummyConfig:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    update: dict[str, Any] = {}
    if language is not None:
        update["language"] = language
    if meaningful is not None:
        update["meaningful_content"] = meaningful
    if max_list_size is not None:
        update["max_list_size"] = max_list_size
    if allow_nulls is not None:
        update["allow_null_fields"] = allow_nulls
    if seed is not None:
        update["seed"] = seed
    return DummyConfig.model_validate({**cfg.model_dump(), **update})


@app.callback()
def main() -> None:
    """Entry point for the dummygen command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    target: str = typer.Argument(..., help="Class to populate, as 'module:Class'"),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of records"),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    language: Optional[str] = typer.Option(None, "--language", help="Language tag [en|tr]"),
    meaningful: bool | None = typer.Option(  # noqa: B008
        None,
        "--meaningful/--gibberish",
        help="Human-plausible values or random lower-case strings",
    ),
    max_list_size: Optional[int] = typer.Option(
        None, "--max-list-size", help="Upper bound for generated collection sizes"
    ),
    allow_nulls: bool | None = typer.Option(  # noqa: B008
        None,
        "--allow-nulls/--no-nulls",
        help="Write None to fields for which no value can be generated",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
    indent: int = typer.Option(2, "--indent", min=0, help="JSON indentation"),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log recursion details to stderr"
    ),
) -> None:
    """Populate ``count`` instances of ``target`` and print them as JSON."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg,
            language=language,
            meaningful=meaningful,
            max_list_size=max_list_size,
            allow_nulls=allow_nulls,
            seed=seed,
        )
    except (ValidationError, OSError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    try:
        cls = _import_target(target)
    except (ImportError, AttributeError, InvalidRequestError) as exc:
        _safe_exit(2, f"Invalid target {target!r}: {exc}")

    try:
        records = generate_many(cls, count, cfg)
    except DummyGenError as exc:
        msg = str(exc)
        if verbose and exc.__cause__ is not None:
            msg = f"{msg} ({type(exc.__cause__).__name__}: {exc.__cause__})"
        _safe_exit(5, msg)

    payload = [to_plain(r) for r in records]
    typer.echo(json.dumps(payload, indent=indent or None, ensure_ascii=False))
