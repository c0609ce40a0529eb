"""Render template variants to static HTML and sync their assets.

Example::

    handler = TemplateHandler("login", ["sweden", "norway"])
    handler.render(site / "static", here / "templates")
    handler.sync_assets(site / "static" / "assets", here / "templates" / "assets",
                        ["css", "img", "js"])
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from .assets.copy import sync_asset_dirs
from .core.models import (
    RenderJob,
    RenderResult,
    RenderStatus,
    TemplateSet,
    as_sequence,
)
from .rendering.capture import OutputCapture
from .rendering.engine import JinjaRenderer, Renderer, TemplateError
from .rendering.io import atomic_write_text
from .settings import PagebakeSettings

logger = logging.getLogger(__name__)


class TemplateHandler:
    """Convert a family of templates into static HTML pages."""

    def __init__(
        self,
        base: str,
        variations: Iterable[str] | str | None,
        *,
        renderer: Renderer | None = None,
        settings: PagebakeSettings | None = None,
    ) -> None:
        self.settings = settings or PagebakeSettings()
        self.template_set = TemplateSet(base=base, variations=variations)
        self.renderer: Renderer = renderer or JinjaRenderer(
            extension=self.settings.template_extension,
            encoding=self.settings.encoding,
        )

    @property
    def base(self) -> str:
        return self.template_set.base

    @property
    def variations(self) -> tuple[str, ...]:
        return self.template_set.variations

    @property
    def templates(self) -> tuple[str, ...]:
        return self.template_set.templates

    def jobs(
        self,
        output_dir_path: Path,
        template_path: Path,
        output_filename: str | None = None,
    ) -> list[RenderJob]:
        """Build one render job per template identifier, in order."""
        return [
            RenderJob(
                template=template,
                variation=variation,
                source_path=template_path / f"{template}.{self.renderer.extension}",
                output_path=output_dir_path / f"{output_filename or template}.html",
            )
            for template, variation in zip(self.templates, self.variations)
        ]

    def _capture(self, job: RenderJob, context: Mapping[str, Any]) -> str:
        with OutputCapture() as capture:
            self.renderer.render(job.source_path, context, capture)
            return capture.getvalue()

    def render(
        self,
        output_dir_path: str | Path | None = None,
        template_path: str | Path | None = None,
        output_filename: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> list[RenderResult]:
        """Render every template and write it as ``<name>.html``.

        Args:
            output_dir_path: Directory for the HTML files (defaults to the
                configured output directory)
            template_path: Directory holding the templates (defaults to the
                configured template directory)
            output_filename: Name used for every output file instead of the
                template identifier; later templates overwrite earlier ones
            context: Extra variables made available to every template

        Returns:
            One result per template, in template order
        """
        output_dir = (
            Path(output_dir_path)
            if output_dir_path
            else self.settings.default_output_dir()
        )
        source_dir = (
            Path(template_path) if template_path else self.settings.default_template_dir()
        )

        jobs = self.jobs(output_dir, source_dir, output_filename)
        if output_filename and len(jobs) > 1:
            logger.warning(
                f"All {len(jobs)} templates will overwrite {output_filename}.html"
            )

        if jobs:
            output_dir.mkdir(exist_ok=True)

        results: list[RenderResult] = []
        carried: str | None = None
        for job in jobs:
            job_context: dict[str, Any] = dict(context or {})
            job_context.update(
                template_name=job.template,
                base=self.base,
                variation=job.variation,
                output_filename=job.output_path.stem,
                handler=self,
            )

            try:
                text = self._capture(job, job_context)
            except TemplateError as exc:
                logger.error(f"error: file {job.source_path} can't be read ({exc.reason})")
                results.append(
                    RenderResult(
                        template=job.template,
                        source_path=job.source_path,
                        output_path=job.output_path,
                        status=RenderStatus.FAILED,
                        message=exc.reason,
                    )
                )
                continue

            if text:
                carried = text
            elif self.settings.carry_over_empty_output and carried is not None:
                text = carried

            atomic_write_text(
                job.output_path,
                text,
                mode=self.settings.file_mode,
                encoding=self.settings.encoding,
            )

            if text:
                logger.info(f"File {job.source_path.name} output successfully at {job.output_path}")
                status, message = RenderStatus.SUCCESS, ""
            else:
                logger.error(f"error: file {job.source_path} can't be read (no output)")
                status, message = RenderStatus.FAILED, "template produced no output"

            results.append(
                RenderResult(
                    template=job.template,
                    source_path=job.source_path,
                    output_path=job.output_path,
                    status=status,
                    written=True,
                    message=message,
                )
            )

        return results

    def sync_assets(
        self,
        output_dir_path: str | Path | None = None,
        template_path: str | Path | None = None,
        dirs: Iterable[str] | str | None = None,
    ) -> list[Path]:
        """Copy asset directories from ``template_path`` to ``output_dir_path``.

        Does nothing unless all three arguments are given.
        """
        names = as_sequence(dirs)
        if not output_dir_path or not template_path or not names:
            return []

        return sync_asset_dirs(Path(template_path), Path(output_dir_path), names)
