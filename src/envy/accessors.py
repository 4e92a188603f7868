from __future__ import annotations

import logging
import os
from datetime import timedelta
from typing import Any, Mapping

from envy.casters import Kind
from envy.errors import ConversionError

LOGGER = logging.getLogger(__name__)


def lookup(name: str, environ: Mapping[str, str] | None = None) -> tuple[str | None, bool]:
    """Return ``(value, present)`` for ``name``; an empty value still counts as present."""
    source = os.environ if environ is None else environ
    if name in source:
        return source[name], True
    return None, False


def value(name: str, default: Any, kind: Kind, *, environ: Mapping[str, str] | None = None) -> Any:
    """Resolve ``name`` as ``kind``, falling back to ``default`` only when it is unset.

    A present variable always goes through the converter, so ``""`` is a valid
    string but an error for every other kind. Conversion failures raise
    :class:`ConversionError` instead of returning the default.
    """
    raw, present = lookup(name, environ)
    if not present:
        LOGGER.debug("%s is not set; using default", name)
        return default
    assert raw is not None
    try:
        converted = kind.convert(raw)
    except ValueError as exc:
        raise ConversionError(name, kind.type_name, str(exc)) from exc
    LOGGER.debug("Resolved %s from the environment as %s", name, kind.type_name)
    return converted


def string(name: str, default: str, *, environ: Mapping[str, str] | None = None) -> str:
    return value(name, default, Kind.STRING, environ=environ)


def int_(name: str, default: int, *, environ: Mapping[str, str] | None = None) -> int:
    return value(name, default, Kind.INT, environ=environ)


def int64(name: str, default: int, *, environ: Mapping[str, str] | None = None) -> int:
    return value(name, default, Kind.INT64, environ=environ)


def uint(name: str, default: int, *, environ: Mapping[str, str] | None = None) -> int:
    return value(name, default, Kind.UINT, environ=environ)


def uint64(name: str, default: int, *, environ: Mapping[str, str] | None = None) -> int:
    return value(name, default, Kind.UINT64, environ=environ)


def float64(name: str, default: float, *, environ: Mapping[str, str] | None = None) -> float:
    return value(name, default, Kind.FLOAT64, environ=environ)


def bool_(name: str, default: bool, *, environ: Mapping[str, str] | None = None) -> bool:
    return value(name, default, Kind.BOOL, environ=environ)


def duration(name: str, default: timedelta, *, environ: Mapping[str, str] | None = None) -> timedelta:
    return value(name, default, Kind.DURATION, environ=environ)
