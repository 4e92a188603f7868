from __future__ import annotations

from typing import Callable, Iterator

import pytest

import envy


@pytest.fixture
def unset_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Unset variables and restore them after the test, even if something else sets them."""

    def _unset(*names: str) -> None:
        for name in names:
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    return _unset


@pytest.fixture
def default_registry() -> Iterator[envy.Registry]:
    envy.default_registry.clear()
    yield envy.default_registry
    envy.default_registry.clear()
