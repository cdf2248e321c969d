"""View configuration.

Settings are read from the environment once at startup and handed to the
ViewComposer that owns them. Nothing here is process-global.

Environment variables:
    RAPTOR_VIEWS_DIR            views root directory (default: ./views)
    RAPTOR_DEFAULT_LAYOUT       layout used when none is given (default: main)
    RAPTOR_CONTENT_ANNOTATION   marker replaced by the view (default: @content)
    RAPTOR_MAX_PARTIAL_DEPTH    maximum partial nesting (default: 32)
    RAPTOR_LOG_LEVEL            logging level (default: INFO)
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from raptor.templates.renderer import DEFAULT_MAX_PARTIAL_DEPTH

DEFAULT_VIEWS_DIR = "views"
DEFAULT_LAYOUT = "main"
DEFAULT_CONTENT_ANNOTATION = "@content"

# Environment variable -> settings field
_ENV_FIELDS = {
    "RAPTOR_VIEWS_DIR": "views_directory",
    "RAPTOR_DEFAULT_LAYOUT": "default_layout",
    "RAPTOR_CONTENT_ANNOTATION": "content_annotation",
    "RAPTOR_MAX_PARTIAL_DEPTH": "max_partial_depth",
    "RAPTOR_LOG_LEVEL": "log_level",
}


class ViewSettings(BaseModel):
    """Configuration for a ViewComposer."""

    views_directory: Path = Path(DEFAULT_VIEWS_DIR)
    default_layout: str = Field(default=DEFAULT_LAYOUT, min_length=1)
    content_annotation: str = Field(default=DEFAULT_CONTENT_ANNOTATION, min_length=1)
    max_partial_depth: int = Field(default=DEFAULT_MAX_PARTIAL_DEPTH, ge=1)
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None, **overrides) -> ViewSettings:
    """Build ViewSettings from environment variables.

    Args:
        environ: Environment mapping (defaults to os.environ)
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated ViewSettings

    Raises:
        pydantic.ValidationError: A value is invalid (e.g., depth below 1)
    """
    env = os.environ if environ is None else environ
    values = {field: env[var] for var, field in _ENV_FIELDS.items() if env.get(var)}
    values.update(overrides)
    return ViewSettings.model_validate(values)
