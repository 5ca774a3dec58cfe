import logging
from pathlib import Path

import pytest

from vite_tailwind_shadcn.config import LoggingConfig, PackageManager, ScaffoldConfig, logger
from vite_tailwind_shadcn.exceptions import UnsupportedPackageManagerError


def test_package_manager_choices_order() -> None:
    assert PackageManager.choices() == ["npm", "yarn", "pnpm"]


@pytest.mark.parametrize("value", ["npm", "yarn", "pnpm"])
def test_package_manager_parse(value: str) -> None:
    assert PackageManager.parse(value).value == value


@pytest.mark.parametrize("value", ["bun", "NPM", "", None, " npm"])
def test_package_manager_parse_invalid(value: "str | None") -> None:
    with pytest.raises(UnsupportedPackageManagerError) as exc_info:
        PackageManager.parse(value)
    assert exc_info.value.package_manager == value
    assert str(exc_info.value) == "Unsupported package manager. Please choose npm, pnpm, or yarn."


def test_scaffold_config_defaults() -> None:
    config = ScaffoldConfig(package_manager="npm", project_name="demo-app")
    assert config.parent_dir == Path.cwd()
    assert config.project_dir == Path.cwd() / "demo-app"
    assert config.logging.level == "normal"


def test_scaffold_config_keeps_raw_package_manager() -> None:
    """Validation is deferred to the orchestrator."""
    config = ScaffoldConfig(package_manager="bun", project_name="demo-app", parent_dir="/tmp")  # type: ignore[arg-type]
    assert config.package_manager == "bun"
    assert config.parent_dir == Path("/tmp")


@pytest.mark.parametrize(
    ("env_value", "expected"),
    [("quiet", "quiet"), ("VERBOSE", "verbose"), ("normal", "normal"), ("loud", "normal")],
)
def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch, env_value: str, expected: str) -> None:
    monkeypatch.setenv("VITE_TAILWIND_LOG_LEVEL", env_value)
    assert LoggingConfig().level == expected


def test_logging_config_levels() -> None:
    assert LoggingConfig(level="quiet").show_status is False
    assert LoggingConfig(level="normal").show_status is True
    assert LoggingConfig(level="verbose").python_level == logging.DEBUG
    assert LoggingConfig(level="normal").python_level == logging.WARNING


def test_logging_config_apply_sets_logger_level() -> None:
    previous = logger.level
    try:
        LoggingConfig(level="verbose").apply()
        assert logger.level == logging.DEBUG
        LoggingConfig(level="quiet").apply()
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)
