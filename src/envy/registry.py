from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Generic, Mapping, Protocol, TypeVar

from envy.accessors import value
from envy.casters import Kind

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Destination(Protocol):
    """Storage that a binding writes its resolved value into."""

    def set(self, value: Any) -> None:
        ...


class Var(Generic[T]):
    """A mutable cell filled in by :meth:`Registry.parse`."""

    def __init__(self, value: T):
        self.value = value
        self.is_set = False

    def set(self, value: T) -> None:
        self.value = value
        self.is_set = True

    def __repr__(self) -> str:
        return f"Var({self.value!r}, is_set={self.is_set})"


@dataclass(frozen=True)
class AttrTarget:
    """Writes the resolved value onto ``obj.attr`` (a settings object, a module, ...)."""

    obj: Any
    attr: str

    def set(self, value: Any) -> None:
        setattr(self.obj, self.attr, value)


@dataclass(frozen=True)
class Binding:
    name: str
    default: Any
    kind: Kind
    target: Destination

    def resolve(self, environ: Mapping[str, str] | None = None) -> Any:
        return value(self.name, self.default, self.kind, environ=environ)


class Registry:
    """Ordered queue of environment bindings resolved by :meth:`parse`.

    Binders only record what to read; nothing touches the environment until
    ``parse`` runs, so bindings can be declared at import time and resolved
    after a ``.env`` file has been loaded. Registration is not thread-safe:
    declare bindings from a single thread before workers start.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ
        self._bindings: list[Binding] = []

    @property
    def bindings(self) -> tuple[Binding, ...]:
        return tuple(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def var(self, dest: Destination | None, name: str, default: Any, kind: Kind) -> Destination:
        """Queue ``name`` for resolution into ``dest``; a fresh :class:`Var` is used when ``dest`` is None."""
        target: Destination = Var(default) if dest is None else dest
        self._bindings.append(Binding(name=name, default=default, kind=kind, target=target))
        LOGGER.debug("Registered %s as %s", name, kind.type_name)
        return target

    def string_var(self, dest: Destination | None, name: str, default: str) -> Destination:
        return self.var(dest, name, default, Kind.STRING)

    def int_var(self, dest: Destination | None, name: str, default: int) -> Destination:
        return self.var(dest, name, default, Kind.INT)

    def int64_var(self, dest: Destination | None, name: str, default: int) -> Destination:
        return self.var(dest, name, default, Kind.INT64)

    def uint_var(self, dest: Destination | None, name: str, default: int) -> Destination:
        return self.var(dest, name, default, Kind.UINT)

    def uint64_var(self, dest: Destination | None, name: str, default: int) -> Destination:
        return self.var(dest, name, default, Kind.UINT64)

    def float64_var(self, dest: Destination | None, name: str, default: float) -> Destination:
        return self.var(dest, name, default, Kind.FLOAT64)

    def bool_var(self, dest: Destination | None, name: str, default: bool) -> Destination:
        return self.var(dest, name, default, Kind.BOOL)

    def duration_var(self, dest: Destination | None, name: str, default: timedelta) -> Destination:
        return self.var(dest, name, default, Kind.DURATION)

    def parse(self) -> int:
        """Resolve every binding in registration order and return how many ran.

        A :class:`~envy.errors.ConversionError` stops the run: earlier
        destinations keep their new values and later ones are left untouched.
        Calling ``parse`` again replays all bindings against the current
        environment.
        """
        for binding in self._bindings:
            binding.target.set(binding.resolve(self._environ))
        LOGGER.debug("Parsed %s environment bindings", len(self._bindings))
        return len(self._bindings)

    def clear(self) -> None:
        self._bindings.clear()
