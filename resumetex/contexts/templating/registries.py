"""
Templating Registries

Registry for loading and caching the Jinja2 templates used for LaTeX generation.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("RESUME_TEMPLATES_PATH", Path(__file__).resolve().parent / "template")
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Layout under the template root:
    - types/{type_name}/template.tex.jinja: one resume entry or section body
    - structure/*.tex.jinja: preamble, heading and document skeleton
    - wrappers/*.tex.jinja: section heading and list wrappers

    Templates use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Template root directory. Defaults to
                            RESUME_TEMPLATES_PATH from environment, or the
                            templates shipped with the package
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
        )

    def get_template(self, type_name: str) -> Template:
        """
        Get an entry/section template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the type (e.g., 'experience')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(f"types/{type_name}/template.tex.jinja", type_name)

    def get_structure(self, name: str) -> Template:
        """
        Get a structural template (e.g., 'structure/preamble', 'wrappers/section').

        Args:
            name: Path relative to the template root, without '.tex.jinja'
        """
        return self._load(f"{name}.tex.jinja", name)

    def _load(self, relative_path: str, cache_key: str) -> Template:
        if cache_key in self._cache:
            return self._cache[cache_key]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{cache_key}' at {self.templates_path / relative_path}"
            ) from e

        self._cache[cache_key] = template
        return template

    def get_template_path(self, type_name: str) -> Path:
        """
        Get the file path for a type's template.

        Args:
            type_name: Name of the type (e.g., 'experience')

        Returns:
            Path to template file
        """
        return self.templates_path / "types" / type_name / "template.tex.jinja"

    def read_source(self, name: str) -> str:
        """Read a verbatim (non-Jinja) file from the template root."""
        return (self.templates_path / name).read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            name: Type name or structural template name

        Returns:
            True if cached, False otherwise
        """
        return name in self._cache
