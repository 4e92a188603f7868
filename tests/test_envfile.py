from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from envy.envfile import load_env_file
from envy.errors import EnvyError


def test_load_env_file_sets_variables(tmp_path: Path, unset_env: Callable[..., None]) -> None:
    unset_env("ENVY_FILE_PORT")
    env_path = tmp_path / ".env"
    env_path.write_text("ENVY_FILE_PORT=8080\n", encoding="utf-8")
    assert load_env_file(env_path) is True
    assert os.environ["ENVY_FILE_PORT"] == "8080"


def test_load_env_file_keeps_existing_values_unless_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ENVY_FILE_MODE", "shell")
    env_path = tmp_path / "app.env"
    env_path.write_text("ENVY_FILE_MODE=file\n", encoding="utf-8")

    load_env_file(env_path)
    assert os.environ["ENVY_FILE_MODE"] == "shell"

    load_env_file(env_path, override=True)
    assert os.environ["ENVY_FILE_MODE"] == "file"


def test_load_env_file_searches_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, unset_env: Callable[..., None]
) -> None:
    unset_env("ENVY_FILE_FOUND")
    (tmp_path / ".env").write_text("ENVY_FILE_FOUND=yes\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_env_file() is True
    assert os.environ["ENVY_FILE_FOUND"] == "yes"


def test_load_env_file_requires_explicit_path_to_exist(tmp_path: Path) -> None:
    with pytest.raises(EnvyError, match="Env file not found"):
        load_env_file(tmp_path / "missing.env")
