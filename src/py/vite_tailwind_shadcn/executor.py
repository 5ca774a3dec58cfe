"""JavaScript package manager executors.

This module provides executor classes for the supported package managers
(npm, Yarn, pnpm). Each executor knows the literal commands used to create a
Vite project, add dependencies and run the Tailwind CSS initializer, and runs
them with the child's streams attached to the current terminal.
"""

import platform
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from vite_tailwind_shadcn.config import PackageManager, logger
from vite_tailwind_shadcn.exceptions import CommandExecutionError, ExecutableNotFoundError

__all__ = (
    "EXECUTORS",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
)


class JSExecutor(ABC):
    """Abstract base class for package manager executors."""

    bin_name: ClassVar[str]
    runner_bin: ClassVar[str]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @property
    def package_manager(self) -> PackageManager:
        return PackageManager(self.bin_name)

    @abstractmethod
    def create_command(self, project_name: str) -> list[str]:
        """Command that scaffolds a Vite project named ``project_name``."""

    @abstractmethod
    def add_command(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        """Command that adds ``packages`` to the project."""

    def init_tailwind_command(self) -> list[str]:
        """Command that generates tailwind.config.js and postcss.config.js."""
        return [self.runner_bin, "tailwindcss", "init", "-p"]

    def _resolve_executable(self, name: str) -> str:
        if self.executable_path and Path(name).name == self.bin_name:
            return str(self.executable_path)
        path = shutil.which(name)
        if path is None:
            raise ExecutableNotFoundError(name)
        return path

    def execute(self, args: Sequence[str], cwd: Path) -> None:
        """Execute a command and wait for it to finish.

        ``args[0]`` is resolved on PATH. Output is not captured, so the user
        sees the tool's own prompts and progress.

        Raises:
            CommandExecutionError: If the command exits with a non-zero status.
        """
        executable = self._resolve_executable(args[0])
        command = [executable, *args[1:]]
        logger.debug("Running %s in %s", " ".join(command), cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdout=None,  # inherit for live output
            stderr=None,
        )
        if process.returncode != 0:
            raise CommandExecutionError(list(args), process.returncode)

    def create(self, project_name: str, cwd: Path) -> None:
        self.execute(self.create_command(project_name), cwd)

    def add(self, packages: Sequence[str], cwd: Path, *, dev: bool = False) -> None:
        self.execute(self.add_command(packages, dev=dev), cwd)

    def init_tailwind(self, cwd: Path) -> None:
        self.execute(self.init_tailwind_command(), cwd)


class NodeExecutor(JSExecutor):
    """npm executor."""

    bin_name = "npm"
    runner_bin = "npx"

    def create_command(self, project_name: str) -> list[str]:
        return [self.bin_name, "create", "vite@latest", project_name]

    def add_command(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        return [self.bin_name, "install", *(["-D"] if dev else []), *packages]


class YarnExecutor(JSExecutor):
    """Yarn executor."""

    bin_name = "yarn"
    runner_bin = "yarn"

    def create_command(self, project_name: str) -> list[str]:
        return [self.bin_name, "create", "vite", project_name]

    def add_command(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        return [self.bin_name, "add", *(["-D"] if dev else []), *packages]


class PnpmExecutor(JSExecutor):
    """PNPM executor."""

    bin_name = "pnpm"
    runner_bin = "pnpx"

    def create_command(self, project_name: str) -> list[str]:
        return [self.bin_name, "create", "vite", project_name]

    def add_command(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        return [self.bin_name, "add", *(["-D"] if dev else []), *packages]


EXECUTORS: dict[PackageManager, type[JSExecutor]] = {
    PackageManager.NPM: NodeExecutor,
    PackageManager.YARN: YarnExecutor,
    PackageManager.PNPM: PnpmExecutor,
}


def get_executor(package_manager: "str | PackageManager") -> JSExecutor:
    """Return an executor for the given package manager.

    Raises:
        UnsupportedPackageManagerError: If the package manager is not supported.
    """
    return EXECUTORS[PackageManager.parse(package_manager)]()
