"""Addon template definitions for scaffolding.

This module defines what the Tailwind CSS + shadcn/ui addon installs and which
files it writes into a freshly created Vite project.
"""

from collections.abc import Callable
from dataclasses import dataclass, field


def _str_list_factory() -> list[str]:
    return []


_ListStrFactory: Callable[[], list[str]] = _str_list_factory


@dataclass
class AddonTemplate:
    """Configuration for a styling addon.

    Attributes:
        name: Display name for the addon
        template_dir: Directory under ``templates/`` holding the ``.j2`` files
        dependencies: NPM dependencies to install
        dev_dependencies: NPM dev dependencies to install
        files: Files written relative to the project root
        content_globs: Paths Tailwind scans for class names
    """

    name: str
    template_dir: str
    dependencies: list[str] = field(default_factory=_ListStrFactory)
    dev_dependencies: list[str] = field(default_factory=_ListStrFactory)
    files: list[str] = field(default_factory=_ListStrFactory)
    content_globs: list[str] = field(default_factory=_ListStrFactory)


TAILWIND_SHADCN = AddonTemplate(
    name="Tailwind CSS + shadcn/ui",
    template_dir="tailwindcss",
    dependencies=["@shadcn/ui"],
    dev_dependencies=["tailwindcss", "postcss", "autoprefixer"],
    files=["tailwind.config.js", "src/index.css"],
    content_globs=["./index.html", "./src/**/*.{js,ts,jsx,tsx}"],
)
