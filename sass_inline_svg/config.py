"""Configuration models and loaders for inline SVG generation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

ROOT_SCSS_NAME = "_sass-inline-svg.scss"
DATA_SCSS_NAME = "_sass-inline-svg-data.scss"


class InlineSvgConfig(BaseModel):
    """Output options for a generation run."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    dest_dir: Path = Field(
        Path("./scss"),
        alias="destDir",
        description="Directory receiving both generated scss modules",
    )

    @property
    def root_scss(self) -> Path:
        """Path of the static preamble module."""
        return self.dest_dir / ROOT_SCSS_NAME

    @property
    def data_scss(self) -> Path:
        """Path of the generated functions and map module."""
        return self.dest_dir / DATA_SCSS_NAME


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(path: Path | None = None) -> InlineSvgConfig:
    """Load generation options from a YAML file.

    Args:
        path: Config file, may be None or missing

    Returns:
        InlineSvgConfig, defaults when no file is available
    """
    if path is None or not path.exists():
        return InlineSvgConfig()
    return InlineSvgConfig.model_validate(load_yaml(path))
