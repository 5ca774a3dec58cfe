"""Configuration for the Vite + Tailwind CSS scaffolder.

Values resolve in this order: explicit arguments, then environment variables,
then defaults.

Environment variables:
    VITE_TAILWIND_PACKAGE_MANAGER: Package manager to use (npm, yarn, pnpm).
    VITE_TAILWIND_PROJECT_NAME: Name of the project directory to create.
    VITE_TAILWIND_LOG_LEVEL: Console verbosity (quiet, normal, verbose).
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from vite_tailwind_shadcn.exceptions import UnsupportedPackageManagerError

__all__ = (
    "ENV_LOG_LEVEL",
    "ENV_PACKAGE_MANAGER",
    "ENV_PROJECT_NAME",
    "LoggingConfig",
    "PackageManager",
    "ScaffoldConfig",
    "get_default_log_level",
    "logger",
)

logger = logging.getLogger("vite_tailwind_shadcn")

ENV_PACKAGE_MANAGER = "VITE_TAILWIND_PACKAGE_MANAGER"
ENV_PROJECT_NAME = "VITE_TAILWIND_PROJECT_NAME"
ENV_LOG_LEVEL = "VITE_TAILWIND_LOG_LEVEL"


class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @classmethod
    def choices(cls) -> list[str]:
        """Return the selectable values in menu order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: "str | PackageManager | None") -> "PackageManager":
        """Convert a raw value into a package manager.

        Raises:
            UnsupportedPackageManagerError: If the value is not npm, yarn or pnpm.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedPackageManagerError(value) from e


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks VITE_TAILWIND_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv(ENV_LOG_LEVEL, "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class LoggingConfig:
    """Console output configuration.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Errors only, no status lines
            - "normal": Status lines for each step (default)
            - "verbose": Status lines plus debug logging of every command
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    @property
    def show_status(self) -> bool:
        return self.level != "quiet"

    @property
    def python_level(self) -> int:
        return logging.DEBUG if self.level == "verbose" else logging.WARNING

    def apply(self) -> None:
        """Configure the package logger for this level."""
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logger.setLevel(self.python_level)


@dataclass
class ScaffoldConfig:
    """Settings for one scaffolding run.

    ``package_manager`` is kept as given and only validated by the orchestrator.

    Attributes:
        package_manager: Package manager name, validated when the run starts.
        project_name: Directory name passed to the Vite generator.
        parent_dir: Directory the project is created in.
        logging: Console output configuration.
    """

    package_manager: "str | PackageManager"
    project_name: str
    parent_dir: Path = field(default_factory=Path.cwd)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        self.parent_dir = Path(self.parent_dir)

    @property
    def project_dir(self) -> Path:
        """Directory the Vite generator creates."""
        return self.parent_dir / self.project_name
