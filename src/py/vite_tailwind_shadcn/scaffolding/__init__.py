"""Project scaffolding module for vite-tailwind-shadcn.

This module renders the Tailwind CSS configuration and global stylesheet that
replace what ``tailwindcss init`` generates.
"""

from vite_tailwind_shadcn.scaffolding.generator import TemplateContext, write_config_files
from vite_tailwind_shadcn.scaffolding.templates import TAILWIND_SHADCN, AddonTemplate

__all__ = ["TAILWIND_SHADCN", "AddonTemplate", "TemplateContext", "write_config_files"]
