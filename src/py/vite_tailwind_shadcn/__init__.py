"""vite-tailwind-shadcn: create a Vite app with Tailwind CSS and shadcn/ui.

Basic usage from a shell:
    vite-tailwind-shadcn --package-manager pnpm --project-name my-app

Or from Python:
    from vite_tailwind_shadcn import ScaffoldConfig, init_project

    init_project(ScaffoldConfig(package_manager="npm", project_name="my-app"))
"""

from vite_tailwind_shadcn.__metadata__ import __version__
from vite_tailwind_shadcn.commands import ScaffoldStep, init_project
from vite_tailwind_shadcn.config import LoggingConfig, PackageManager, ScaffoldConfig
from vite_tailwind_shadcn.executor import get_executor

__all__ = (
    "LoggingConfig",
    "PackageManager",
    "ScaffoldConfig",
    "ScaffoldStep",
    "__version__",
    "get_executor",
    "init_project",
)
