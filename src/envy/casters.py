"""String converters for the scalar kinds envy understands.

Every converter takes the raw environment value and either returns the typed
value or raises ``ValueError`` with a short reason. The literal grammar follows
the usual conventions of each family: base-10 integers without whitespace or
digit separators, decimal/scientific floats, the classic boolean spellings and
durations written as a raw nanosecond count.
"""

from __future__ import annotations

import logging
import math
import re
import struct
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Callable

from envy.errors import EnvyError

LOGGER = logging.getLogger(__name__)

# Width of the platform word, used by the ``int`` and ``uint`` kinds.
NATIVE_BITS = struct.calcsize("P") * 8

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL_RE = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Kind(str, Enum):
    STRING = "string"
    INT = "int"
    INT64 = "int64"
    UINT = "uint"
    UINT64 = "uint64"
    FLOAT64 = "float64"
    BOOL = "bool"
    DURATION = "duration"

    @property
    def type_name(self) -> str:
        return CASTERS[self].type_name

    def convert(self, text: str) -> Any:
        return CASTERS[self].convert(text)


@dataclass(frozen=True)
class Caster:
    type_name: str
    convert: Callable[[str], Any]


def _invalid(text: str) -> ValueError:
    return ValueError(f'parsing "{text}": invalid syntax')


def _out_of_range(text: str) -> ValueError:
    return ValueError(f'parsing "{text}": value out of range')


def _parse_signed(text: str, bits: int) -> int:
    if not _SIGNED_RE.fullmatch(text):
        raise _invalid(text)
    value = int(text)
    if not -(1 << (bits - 1)) <= value <= (1 << (bits - 1)) - 1:
        raise _out_of_range(text)
    return value


def cast_string(text: str) -> str:
    return text


def cast_int(text: str) -> int:
    return _parse_signed(text, NATIVE_BITS)


def cast_int64(text: str) -> int:
    return _parse_signed(text, 64)


def cast_uint64(text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise _invalid(text)
    value = int(text)
    if value > UINT64_MAX:
        raise _out_of_range(text)
    return value


def cast_uint(text: str) -> int:
    """Parse as uint64, then narrow to the platform word.

    No range check happens before narrowing, so on a 32-bit interpreter
    ``"4294967296"`` silently becomes ``0``.
    """
    wide = cast_uint64(text)
    narrowed = wide & ((1 << NATIVE_BITS) - 1)
    if narrowed != wide:
        LOGGER.warning("Value %s truncated to %s when narrowed to %s-bit uint", wide, narrowed, NATIVE_BITS)
    return narrowed


def cast_float64(text: str) -> float:
    if _FLOAT_SPECIAL_RE.fullmatch(text):
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        raise _invalid(text)
    value = float(text)
    if math.isinf(value):
        raise _out_of_range(text)
    return value


def cast_bool(text: str) -> bool:
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    raise _invalid(text)


def cast_duration(text: str) -> timedelta:
    """Interpret ``text`` as a signed nanosecond count.

    ``timedelta`` stops at microseconds; the remainder is rounded half to even.
    """
    nanoseconds = cast_int64(text)
    micros, remainder = divmod(nanoseconds, 1000)
    if remainder > 500 or (remainder == 500 and micros % 2):
        micros += 1
    return timedelta(microseconds=micros)


def duration_to_nanoseconds(value: timedelta) -> int:
    """Render a duration as the nanosecond literal ``cast_duration`` accepts."""
    return (value // timedelta(microseconds=1)) * 1000


CASTERS: dict[Kind, Caster] = {
    Kind.STRING: Caster("str", cast_string),
    Kind.INT: Caster("int", cast_int),
    Kind.INT64: Caster("int64", cast_int64),
    Kind.UINT: Caster("uint", cast_uint),
    Kind.UINT64: Caster("uint64", cast_uint64),
    Kind.FLOAT64: Caster("float64", cast_float64),
    Kind.BOOL: Caster("bool", cast_bool),
    Kind.DURATION: Caster("duration", cast_duration),
}

_ALIASES = {caster.type_name: kind for kind, caster in CASTERS.items()}
_ALIASES.update({kind.value: kind for kind in Kind})


def parse_kind(text: str) -> Kind:
    """Resolve a kind from its name (``int64``) or display type name (``str``)."""
    normalized = text.strip().lower()
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    allowed = ", ".join(kind.value for kind in Kind)
    raise EnvyError(f"Unknown kind {text!r}. Use one of: {allowed}")
