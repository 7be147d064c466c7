"""
Jinja2 environment for declaration templates.

Each language generator ships its templates as strings. A template
directory, when configured, is searched first so single templates can be
replaced without touching the generator.
"""

from typing import Dict, Any, Mapping, Optional, Union
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2 import TemplateError as JinjaTemplateError

from .naming import make_first_upper_case, to_snake_case


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def pascal_case(value: str) -> str:
    return "".join(make_first_upper_case(part) for part in to_snake_case(str(value)).split("_") if part)


def comment_lines(value: str, marker: str = "//") -> str:
    """Prefix every line with a comment marker; blank lines get the bare marker."""
    return "\n".join(f"{marker} {line}" if line.strip() else marker for line in str(value).split("\n"))


FILTERS = {
    "snake_case": to_snake_case,
    "pascal_case": pascal_case,
    "comment": comment_lines,
}


class TemplateEngine:
    """Renders one language's templates with code generation filters."""

    def __init__(
        self,
        templates: Optional[Mapping[str, str]] = None,
        template_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            templates: Built-in templates by name
            template_dir: Directory of overriding templates, searched first
        """
        self._builtin = DictLoader(dict(templates or {}))
        loaders = [self._builtin]
        if template_dir and Path(template_dir).is_dir():
            loaders.insert(0, FileSystemLoader(str(template_dir)))

        # Source code is never HTML, so autoescape stays off
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters.update(FILTERS)

    def add_template(self, name: str, content: str):
        """Register or replace a built-in template."""
        self._builtin.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing, malformed, or refers
                to a variable absent from ``context``
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        try:
            return self._env.from_string(template_string).render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e


def create_template_engine(
    templates: Optional[Mapping[str, str]] = None,
    template_dir: Optional[Union[str, Path]] = None,
) -> TemplateEngine:
    """Create a template engine for a set of built-in templates."""
    return TemplateEngine(templates, template_dir)
