from __future__ import annotations

import re
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

_HTML_ID_RE = re.compile(r"[^\s]+")


class PageConfig(BaseModel):
    """Settings for rendering a results page."""

    model_config = ConfigDict(extra="forbid")
    container_id: str = "mndltest-results"
    title: str = "Test results"
    output: str = "results.html"
    open_browser: bool = False
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("container_id")
    @classmethod
    def container_id_must_be_html_id(cls, v: str) -> str:
        if not _HTML_ID_RE.fullmatch(v):
            raise ValueError(
                f"container_id '{v}' must be non-empty and contain no whitespace"
            )
        return v

    @field_validator("output", "debug_log")
    @classmethod
    def expand_env_variables(cls, v: str | None) -> str | None:
        """Expand ${VAR} and ${VAR:-default}; a missing variable without a
        default is a validation error."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as exc:
            raise ValueError(f"cannot expand '{v}': {exc}") from exc

    @property
    def output_path(self) -> Path:
        return Path(self.output)

    @property
    def debug_log_path(self) -> Path | None:
        return Path(self.debug_log) if self.debug_log else None


def load_config(path: Path) -> PageConfig:
    """Load and validate a page config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = PageConfig(**raw)

    # Resolve relative paths against the config file location
    output_path = Path(config.output)
    if not output_path.is_absolute():
        config.output = str((config_dir / output_path).resolve())
    if config.debug_log and not Path(config.debug_log).is_absolute():
        config.debug_log = str((config_dir / config.debug_log).resolve())

    return config
