"""Config file generator.

This module renders the addon's Jinja2 templates and writes them over the
files produced by ``tailwindcss init``.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from rich.console import Console
from rich.markup import escape

from vite_tailwind_shadcn.config import logger
from vite_tailwind_shadcn.scaffolding.templates import TAILWIND_SHADCN, AddonTemplate


def _default_addon() -> AddonTemplate:
    return TAILWIND_SHADCN


@dataclass
class TemplateContext:
    """Context variables for template rendering.

    Attributes:
        project_name: Name of the project
        addon: The addon whose files are rendered
    """

    project_name: str
    addon: AddonTemplate = field(default_factory=_default_addon)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        return {
            "project_name": self.project_name,
            "addon_name": self.addon.name,
            "content_globs": self.addon.content_globs,
            "dependencies": self.addon.dependencies,
            "dev_dependencies": self.addon.dev_dependencies,
        }


def get_template_dir() -> Path:
    """Get the directory containing addon templates.

    Returns:
        Path to the templates directory.
    """
    return Path(__file__).parent.parent / "templates"


def render_template(template_path: Path, context: dict[str, Any]) -> str:
    """Render a Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is
    JavaScript and CSS, not HTML.

    Args:
        template_path: Path to the template file.
        context: Dictionary of template variables.

    Returns:
        Rendered template content.
    """
    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,  # noqa: S701
    )
    template = env.get_template(template_path.name)
    return template.render(**context)


def write_config_files(
    project_dir: Path, context: TemplateContext, console: "Console | None" = None
) -> list[Path]:
    """Overwrite the addon's files in ``project_dir``.

    Existing content is replaced, never merged. Parent directories are not
    created: a Vite project always has ``src/``, so a missing one is an error.

    Args:
        project_dir: Root of the generated Vite project.
        context: Template context with configuration.
        console: Console used to report each written file.

    Returns:
        List of written file paths.
    """
    template_dir = get_template_dir() / context.addon.template_dir
    context_dict = context.to_dict()
    written: list[Path] = []

    for relative in context.addon.files:
        output_path = project_dir / relative
        content = render_template(template_dir / f"{relative}.j2", context_dict)
        output_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(content), output_path)
        if console is not None:
            console.print(f"[green]Wrote {escape(str(output_path))}[/]")
        written.append(output_path)

    return written
