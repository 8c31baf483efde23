"""Errors raised while converting SVG files."""

from pathlib import Path


class InvalidSvgError(ValueError):
    """Markup that cannot be turned into an inline svg function."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"File at '{self.path}' is not a valid svg file")
