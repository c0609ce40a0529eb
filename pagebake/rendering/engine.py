"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, TextIO

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError as JinjaTemplateError,
)

from .capture import OutputCapture

logger = logging.getLogger(__name__)

Writable = OutputCapture | TextIO


class TemplateError(Exception):
    """Raised when a template cannot be read, parsed or executed."""

    def __init__(self, source_path: Path, reason: str) -> None:
        super().__init__(f"{source_path}: {reason}")
        self.source_path = source_path
        self.reason = reason


class Renderer(Protocol):
    """Anything that turns a template file into text."""

    extension: str

    def render(
        self, source_path: Path, context: Mapping[str, Any], out: Writable
    ) -> None:
        ...


class JinjaRenderer:
    """Render Jinja2 templates, streaming output into the given writer."""

    def __init__(self, extension: str = "j2", encoding: str = "utf-8") -> None:
        self.extension = extension
        self.encoding = encoding
        self._environments: dict[Path, Environment] = {}

    def environment(self, template_dir: Path) -> Environment:
        """Return the environment for ``template_dir``, creating it once."""
        key = template_dir.resolve()
        env = self._environments.get(key)
        if env is None:
            # Sibling templates stay reachable for include/extends
            env = Environment(
                loader=FileSystemLoader(str(key), encoding=self.encoding),
                undefined=StrictUndefined,
                autoescape=False,
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
            )
            self._environments[key] = env
        return env

    def load_template(self, source_path: Path) -> Template:
        """Load a Jinja2 template from a file path.

        Args:
            source_path: Path to the template file

        Returns:
            Compiled Jinja2 template
        """
        if not source_path.is_file():
            raise TemplateError(source_path, "template not found")

        env = self.environment(source_path.parent)
        try:
            return env.get_template(source_path.name)
        except JinjaTemplateError as exc:
            raise TemplateError(source_path, str(exc)) from exc
        except OSError as exc:
            raise TemplateError(source_path, f"cannot read template: {exc}") from exc

    def render(
        self, source_path: Path, context: Mapping[str, Any], out: Writable
    ) -> None:
        logger.debug(f"Rendering template: {source_path}")

        template = self.load_template(source_path)
        try:
            for chunk in template.generate(**context):
                out.write(chunk)
        except Exception as exc:
            raise TemplateError(source_path, f"{type(exc).__name__}: {exc}") from exc
