"""vite-tailwind-shadcn exception classes."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

__all__ = [
    "CommandExecutionError",
    "ExecutableNotFoundError",
    "ProjectDirectoryNotFoundError",
    "ProjectNameRequiredError",
    "ScaffoldError",
    "ScaffoldStepError",
    "UnsupportedPackageManagerError",
]


class ScaffoldError(Exception):
    """Base exception for scaffolding errors."""


class UnsupportedPackageManagerError(ScaffoldError, ValueError):
    """Raised when the package manager is not one of npm, pnpm or yarn."""

    def __init__(self, package_manager: "str | None") -> None:
        self.package_manager = package_manager
        super().__init__("Unsupported package manager. Please choose npm, pnpm, or yarn.")


class ProjectNameRequiredError(ScaffoldError, ValueError):
    """Raised when the project name is empty."""

    def __init__(self) -> None:
        super().__init__("Project name is required.")


class ExecutableNotFoundError(ScaffoldError):
    """Raised when a package manager executable is not on PATH."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"Executable {executable!r} not found.")


class CommandExecutionError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: "list[str]", return_code: int) -> None:
        self.command = command
        self.return_code = return_code
        super().__init__(f"Command {' '.join(command)!r} failed with return code {return_code}.")


class ProjectDirectoryNotFoundError(ScaffoldError, FileNotFoundError):
    """Raised when the scaffolded project directory does not exist."""

    def __init__(self, project_dir: "Path") -> None:
        self.project_dir = project_dir
        super().__init__(f"Project directory {str(project_dir)!r} was not created.")


class ScaffoldStepError(ScaffoldError):
    """Raised when a scaffolding step fails after zero or more steps completed.

    The underlying error is chained as ``__cause__``.
    """

    def __init__(self, step: str, completed: "Sequence[str]", message: str) -> None:
        self.step = step
        self.completed = list(completed)
        super().__init__(f"Step {step!r} failed: {message}")
