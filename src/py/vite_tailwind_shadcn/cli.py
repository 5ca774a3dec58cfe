import sys
from pathlib import Path
from typing import NoReturn, Optional

from click import UsageError, command, option, version_option
from click import Path as ClickPath
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from vite_tailwind_shadcn.__metadata__ import __version__
from vite_tailwind_shadcn.commands import init_project
from vite_tailwind_shadcn.config import (
    ENV_PACKAGE_MANAGER,
    ENV_PROJECT_NAME,
    LoggingConfig,
    PackageManager,
    ScaffoldConfig,
)
from vite_tailwind_shadcn.exceptions import (
    ProjectNameRequiredError,
    ScaffoldStepError,
    UnsupportedPackageManagerError,
)

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error: {escape(message)}[/]")
    sys.exit(1)


def _prompt_package_manager() -> str:
    """Ask which package manager to use. Re-asks until a listed choice is given."""
    return Prompt.ask("Choose a package manager", choices=PackageManager.choices(), console=console)


def _prompt_project_name() -> str:
    """Ask for the project name and exit with status 1 if it is empty."""
    value = Prompt.ask("Enter the project name", console=console)
    if not value:
        _fail("Project name is required.")
    return value


def _resolve_logging(verbose: bool, quiet: bool) -> LoggingConfig:
    if verbose and quiet:
        msg = "--verbose and --quiet cannot be used together."
        raise UsageError(msg)
    if verbose:
        return LoggingConfig(level="verbose")
    if quiet:
        return LoggingConfig(level="quiet")
    return LoggingConfig()


def _report_step_failure(error: ScaffoldStepError, project_dir: Path) -> None:
    err_console.print(f"[bold red]Error: {escape(str(error))}[/]")
    if error.completed:
        err_console.print(f"[yellow]Completed steps: {', '.join(error.completed)}[/]")
    err_console.print(
        f"[yellow]Setup did not finish. {escape(str(project_dir))} may be partially created; "
        "nothing was rolled back.[/]"
    )


@command(
    name="vite-tailwind-shadcn",
    help="Create a Vite app with Tailwind CSS and shadcn/ui.",
)
@version_option(__version__, "-V", "--version")
@option(
    "-p",
    "--package-manager",
    type=str,
    envvar=ENV_PACKAGE_MANAGER,
    help="Choose the package manager (npm, pnpm, yarn).",
    default=None,
    required=False,
)
@option(
    "-n",
    "--project-name",
    type=str,
    envvar=ENV_PROJECT_NAME,
    help="Specify the project name.",
    default=None,
    required=False,
)
@option(
    "-d",
    "--directory",
    type=ClickPath(exists=True, dir_okay=True, file_okay=False, path_type=Path),
    help="The directory the project is created in.  Defaults to the current directory.",
    default=None,
    required=False,
)
@option("-v", "--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("-q", "--quiet", type=bool, help="Only print errors.", default=False, is_flag=True)
def main(
    package_manager: "Optional[str]",
    project_name: "Optional[str]",
    directory: "Optional[Path]",
    verbose: "bool",
    quiet: "bool",
) -> None:
    """Create a Vite app with Tailwind CSS and shadcn/ui."""
    logging_config = _resolve_logging(verbose, quiet)
    logging_config.apply()

    if not package_manager:
        package_manager = _prompt_package_manager()
    if not project_name:
        project_name = _prompt_project_name()

    config = ScaffoldConfig(
        package_manager=package_manager,
        project_name=project_name,
        parent_dir=directory or Path.cwd(),
        logging=logging_config,
    )
    try:
        init_project(config, console=console)
    except (UnsupportedPackageManagerError, ProjectNameRequiredError) as e:
        _fail(str(e))
    except ScaffoldStepError as e:
        _report_step_failure(e, config.project_dir)
        sys.exit(1)


if __name__ == "__main__":
    main()
