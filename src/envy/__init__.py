"""Typed environment variables with deferred, ordered resolution.

Use the accessors (``envy.int_("PORT", 8000)``) to read a value right away, or
the ``*_var`` binders to declare bindings at import time and resolve them all
with :func:`parse` once the environment is final::

    port = envy.int_var(None, "PORT", 8000)
    envy.parse(env_file=".env")
    port.value
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any

from envy.accessors import bool_, duration, float64, int64, int_, lookup, string, uint, uint64, value
from envy.casters import Kind, parse_kind
from envy.envfile import load_env_file
from envy.errors import ConversionError, EnvyError
from envy.registry import AttrTarget, Binding, Destination, Registry, Var

default_registry = Registry()


def var(dest: Destination | None, name: str, default: Any, kind: Kind) -> Destination:
    return default_registry.var(dest, name, default, kind)


def string_var(dest: Destination | None, name: str, default: str) -> Destination:
    return default_registry.string_var(dest, name, default)


def int_var(dest: Destination | None, name: str, default: int) -> Destination:
    return default_registry.int_var(dest, name, default)


def int64_var(dest: Destination | None, name: str, default: int) -> Destination:
    return default_registry.int64_var(dest, name, default)


def uint_var(dest: Destination | None, name: str, default: int) -> Destination:
    return default_registry.uint_var(dest, name, default)


def uint64_var(dest: Destination | None, name: str, default: int) -> Destination:
    return default_registry.uint64_var(dest, name, default)


def float64_var(dest: Destination | None, name: str, default: float) -> Destination:
    return default_registry.float64_var(dest, name, default)


def bool_var(dest: Destination | None, name: str, default: bool) -> Destination:
    return default_registry.bool_var(dest, name, default)


def duration_var(dest: Destination | None, name: str, default: timedelta) -> Destination:
    return default_registry.duration_var(dest, name, default)


def parse(env_file: Path | str | None = None, *, override: bool = False) -> int:
    """Resolve the default registry, loading ``env_file`` first when given.

    Call this from the program entry point, after anything else that edits the
    environment, never at import time.
    """
    if env_file is not None:
        load_env_file(env_file, override=override)
    return default_registry.parse()


__all__ = [
    "AttrTarget",
    "Binding",
    "ConversionError",
    "Destination",
    "EnvyError",
    "Kind",
    "Registry",
    "Var",
    "bool_",
    "bool_var",
    "default_registry",
    "duration",
    "duration_var",
    "float64",
    "float64_var",
    "int64",
    "int64_var",
    "int_",
    "int_var",
    "load_env_file",
    "lookup",
    "parse",
    "parse_kind",
    "string",
    "string_var",
    "uint",
    "uint64",
    "uint64_var",
    "uint_var",
    "value",
    "var",
]
