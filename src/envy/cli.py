from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Any, Optional

import typer

from envy.accessors import lookup, value
from envy.casters import Kind, duration_to_nanoseconds, parse_kind
from envy.envfile import load_env_file
from envy.errors import ConversionError, EnvyError
from envy.registry import Registry

app = typer.Typer(help="envy CLI: inspect typed environment variables")


def main() -> None:
    """Allow `python -m envy` execution."""
    app()


@app.command("get")
def get(
    name: str = typer.Argument(..., help="Environment variable to read."),
    kind: str = typer.Option("string", "--kind", "-k", help="Kind to convert to (int, uint64, bool, duration, ...)."),
    default: Optional[str] = typer.Option(
        None,
        "--default",
        "-d",
        help="Literal used when the variable is unset (converted with the same kind).",
    ),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Load this .env file first."),
    override: bool = typer.Option(False, "--override", help="Let the .env file override existing variables."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
) -> None:
    """Print the typed value of a single environment variable."""
    _configure_logging(verbose)
    resolved_kind = _resolve_kind(kind)
    _load_env(env_file, override)

    default_value: Any = None
    if default is not None:
        try:
            default_value = resolved_kind.convert(default)
        except ValueError as exc:
            raise typer.BadParameter(f"Invalid default for {resolved_kind.value}: {exc}") from exc

    _, present = lookup(name)
    if not present and default is None:
        typer.secho(f"{name} is not set and no --default was given.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    try:
        result = value(name, default_value, resolved_kind)
    except ConversionError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(_render(result))


@app.command("check")
def check(
    entries: list[str] = typer.Argument(..., help="Variables to check, written as NAME or NAME:KIND."),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Load this .env file first."),
    override: bool = typer.Option(False, "--override", help="Let the .env file override existing variables."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
) -> None:
    """Verify that every listed variable converts to its kind, stopping at the first failure."""
    _configure_logging(verbose)
    registry = Registry()
    for entry in entries:
        name, _, kind_text = entry.partition(":")
        if not name:
            raise typer.BadParameter(f"Missing variable name in {entry!r}")
        registry.var(None, name, None, _resolve_kind(kind_text or "string"))
    _load_env(env_file, override)

    try:
        registry.parse()
    except ConversionError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    for binding in registry.bindings:
        _, present = lookup(binding.name)
        status = "ok" if present else "unset"
        typer.echo(f"  - {binding.name} [{binding.kind.value}] {status}")


def _resolve_kind(text: str) -> Kind:
    try:
        return parse_kind(text)
    except EnvyError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_env(env_file: Optional[Path], override: bool) -> None:
    if env_file is None:
        return
    try:
        load_env_file(env_file, override=override)
    except EnvyError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _render(result: Any) -> str:
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, timedelta):
        return str(duration_to_nanoseconds(result))
    return str(result)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
