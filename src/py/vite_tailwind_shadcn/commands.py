"""Scaffolding commands.

This module drives the external tooling that builds the project: the Vite
generator, the package manager and the Tailwind CSS initializer. Steps run one
after another; each is awaited before the next starts.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from vite_tailwind_shadcn.config import PackageManager, ScaffoldConfig, logger
from vite_tailwind_shadcn.exceptions import (
    ProjectDirectoryNotFoundError,
    ProjectNameRequiredError,
    ScaffoldError,
    ScaffoldStepError,
)
from vite_tailwind_shadcn.executor import get_executor
from vite_tailwind_shadcn.scaffolding import TAILWIND_SHADCN, TemplateContext, write_config_files

if TYPE_CHECKING:
    from vite_tailwind_shadcn.executor import JSExecutor

__all__ = ("ScaffoldStep", "init_project")


class ScaffoldStep(str, Enum):
    """Stages of a scaffolding run, in execution order."""

    VALIDATE = "validate"
    CREATE = "create"
    INSTALL_DEV = "install-dev"
    INSTALL = "install"
    INIT = "init"
    WRITE_CONFIG = "write-config"


class _StepTracker:
    """Record completed steps and wrap failures with the step that raised them."""

    def __init__(self) -> None:
        self.completed: list[str] = []

    @contextmanager
    def step(self, step: ScaffoldStep) -> Iterator[None]:
        logger.debug("Starting step %s", step.value)
        try:
            yield
        except (ScaffoldError, OSError) as e:
            raise ScaffoldStepError(step.value, self.completed, str(e)) from e
        self.completed.append(step.value)


def init_project(
    config: ScaffoldConfig,
    *,
    executor: "JSExecutor | None" = None,
    console: "Console | None" = None,
) -> list[Path]:
    """Create a Vite project and add Tailwind CSS and shadcn/ui to it.

    Args:
        config: Package manager, project name and target directory.
        executor: Executor to run commands with. Defaults to the one matching
            ``config.package_manager``.
        console: Console for status lines.

    Raises:
        UnsupportedPackageManagerError: If the package manager is not npm, pnpm or yarn.
        ProjectNameRequiredError: If the project name is empty.
        ScaffoldStepError: If any external command or file write fails.

    Returns:
        The config files that were written.
    """
    console = console or Console()
    show_status = config.logging.show_status

    package_manager = PackageManager.parse(config.package_manager)
    if not config.project_name or not config.project_name.strip():
        raise ProjectNameRequiredError
    executor = executor or get_executor(package_manager)
    project_name = config.project_name
    project_dir = config.project_dir
    addon = TAILWIND_SHADCN
    tracker = _StepTracker()
    tracker.completed.append(ScaffoldStep.VALIDATE.value)

    if show_status:
        console.print(f"[yellow]Creating Vite app: {escape(project_name)} using {package_manager.value}[/]")
    with tracker.step(ScaffoldStep.CREATE):
        executor.create(project_name, cwd=config.parent_dir)
        if not project_dir.is_dir():
            raise ProjectDirectoryNotFoundError(project_dir)

    if show_status:
        console.print(
            f"[yellow]Installing dependencies with {package_manager.value}: Tailwind CSS, shadcn/ui[/]"
        )
    with tracker.step(ScaffoldStep.INSTALL_DEV):
        executor.add(addon.dev_dependencies, cwd=project_dir, dev=True)
    with tracker.step(ScaffoldStep.INSTALL):
        executor.add(addon.dependencies, cwd=project_dir)

    if show_status:
        console.print("[yellow]Initializing Tailwind CSS[/]")
    with tracker.step(ScaffoldStep.INIT):
        executor.init_tailwind(cwd=project_dir)

    with tracker.step(ScaffoldStep.WRITE_CONFIG):
        written = write_config_files(
            project_dir,
            TemplateContext(project_name=project_name, addon=addon),
            console=console if show_status else None,
        )

    if show_status:
        console.print(
            f"[bold green]Vite app with Tailwind CSS and shadcn/ui setup is complete using {package_manager.value}![/]"
        )
    return written
