from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class PagebakeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAGEBAKE_", case_sensitive=False)

    template_extension: str = "j2"
    template_dir: Path | None = None
    output_dir: Path | None = None
    output_subdir: str = "html"
    encoding: str = "utf-8"
    carry_over_empty_output: bool = False
    file_mode: int = Field(default=0o644, description="File permissions (octal)")

    def default_template_dir(self) -> Path:
        return self.template_dir if self.template_dir else PACKAGE_DIR

    def default_output_dir(self) -> Path:
        return self.output_dir if self.output_dir else PACKAGE_DIR / self.output_subdir
