from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from envy.cli import app

runner = CliRunner()


def test_get_prints_converted_value() -> None:
    result = runner.invoke(app, ["get", "ENVY_CLI_PORT", "--kind", "int"], env={"ENVY_CLI_PORT": "8080"})
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "8080"


def test_get_uses_default_when_unset() -> None:
    result = runner.invoke(
        app,
        ["get", "ENVY_CLI_DEBUG", "--kind", "bool", "--default", "t"],
        env={"ENVY_CLI_DEBUG": None},
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "true"


def test_get_renders_duration_as_nanoseconds() -> None:
    result = runner.invoke(
        app, ["get", "ENVY_CLI_TIMEOUT", "-k", "duration"], env={"ENVY_CLI_TIMEOUT": "5000000000"}
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "5000000000"


def test_get_reports_conversion_failure() -> None:
    result = runner.invoke(app, ["get", "ENVY_CLI_PORT", "--kind", "int"], env={"ENVY_CLI_PORT": "abc"})
    assert result.exit_code == 1
    assert "failed to parse ENVY_CLI_PORT as int" in result.output


def test_get_without_default_fails_when_unset() -> None:
    result = runner.invoke(app, ["get", "ENVY_CLI_MISSING"], env={"ENVY_CLI_MISSING": None})
    assert result.exit_code == 1
    assert "ENVY_CLI_MISSING is not set" in result.output


def test_get_rejects_unknown_kind() -> None:
    result = runner.invoke(app, ["get", "ENVY_CLI_PORT", "--kind", "float"], env={"ENVY_CLI_PORT": "1"})
    assert result.exit_code != 0
    assert "Unknown kind" in result.output


def test_check_lists_each_variable() -> None:
    result = runner.invoke(
        app,
        ["check", "ENVY_CLI_PORT:int", "ENVY_CLI_NAME"],
        env={"ENVY_CLI_PORT": "8080", "ENVY_CLI_NAME": None},
    )
    assert result.exit_code == 0, result.output
    assert "ENVY_CLI_PORT [int] ok" in result.output
    assert "ENVY_CLI_NAME [string] unset" in result.output


def test_check_stops_at_first_failure_from_env_file(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("ENVY_CLI_RETRIES=abc\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["check", "ENVY_CLI_RETRIES:uint", "--env-file", str(env_path)],
        env={"ENVY_CLI_RETRIES": None},
    )
    assert result.exit_code == 1
    assert "failed to parse ENVY_CLI_RETRIES as uint" in result.output


def test_check_reports_missing_env_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", "ENVY_CLI_PORT", "--env-file", str(tmp_path / "nope.env")])
    assert result.exit_code == 1
    assert "Env file not found" in result.output
