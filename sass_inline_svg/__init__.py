"""
Convert svg files into sass functions returning inline data URIs.

Each svg becomes a function taking a fill and a stroke color; black fills
and strokes in the svg are replaced with those colors.

Usage:
    python -m sass_inline_svg icons/ --dest-dir scss
"""

from .config import InlineSvgConfig, load_config, load_yaml
from .emitter import InputFile, SassInlineSvgWriter, WriterState, build_stylesheets
from .errors import InvalidSvgError

__all__ = [
    # Config
    "InlineSvgConfig",
    "load_config",
    "load_yaml",
    # Emitter
    "InputFile",
    "SassInlineSvgWriter",
    "WriterState",
    "build_stylesheets",
    # Errors
    "InvalidSvgError",
]
