"""pagebake - render template variants into static HTML pages.

Resolves a base template name and its variations, renders each template
through a pluggable renderer and copies asset directories alongside the output.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .assets.copy import copy_directory
from .core.models import RenderJob, RenderResult, RenderStatus, TemplateSet
from .handler import TemplateHandler
from .rendering.capture import OutputCapture
from .rendering.engine import JinjaRenderer, Renderer, TemplateError
from .settings import PagebakeSettings

__all__ = [
    "JinjaRenderer",
    "OutputCapture",
    "PagebakeSettings",
    "RenderJob",
    "RenderResult",
    "RenderStatus",
    "Renderer",
    "TemplateError",
    "TemplateHandler",
    "TemplateSet",
    "copy_directory",
]
