"""Jinja2 helpers for the HTML pages shipped with the package."""

from functools import lru_cache
from pathlib import Path

import jinja2
import structlog
from pydantic import BaseModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_DIRECTORY = Path(__file__).parent.parent / "templates"


@lru_cache(maxsize=None)
def packaged_template_environment() -> jinja2.Environment:
    """Return the shared environment for packaged templates, with HTML autoescaping."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATES_DIRECTORY),
        undefined=jinja2.StrictUndefined,
        autoescape=jinja2.select_autoescape(enabled_extensions=("html", "j2"), default_for_string=True),
    )


def construct_packaged_template(template_name: str) -> jinja2.Template:
    """Look up a template by name in the packaged templates directory."""
    try:
        return packaged_template_environment().get_template(template_name)
    except jinja2.TemplateNotFound:
        logger.error("Packaged template not found", template_name=template_name, directory=str(TEMPLATES_DIRECTORY))
        raise


def render_template_with_model(model: BaseModel, template: jinja2.Template) -> str:
    """Render a template with the fields of a pydantic model as its context."""
    context = model.model_dump()
    try:
        return template.render(**context)
    except jinja2.UndefinedError as exc:
        logger.error("Template references an undefined value", template=template.name, model_type=type(model).__name__, error=str(exc))
        raise
