"""Jinja2 rendering of pages and HTML fragments."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape


class RenderError(Exception):
    """A template could not be rendered (missing, malformed, or given bad data)."""

    def __init__(self, template_name: str) -> None:
        super().__init__(f"Failed to render template {template_name!r}")
        self.template_name = template_name


class TemplateRenderer:
    """Renders named templates from one directory. Undefined variables are errors."""

    def __init__(self, directory: Path) -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, **context) -> str:
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateError as exc:
            raise RenderError(template_name) from exc
