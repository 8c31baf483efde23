"""Write svg files into the generated sass modules."""

import logging
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Iterable, TextIO

from pydantic import BaseModel

from .config import ROOT_SCSS_NAME, InlineSvgConfig
from .svg.encoder import encode_svg
from .svg.injector import ColorInjector
from .svg.sass import MAP_CLOSE, MAP_OPEN, assemble_function, map_entry, svg_names

logger = logging.getLogger(__name__)


class InputFile(BaseModel):
    """An svg file delivered to the writer.

    Bytes are handed to the parser undecoded so an XML encoding
    declaration is honored.
    """

    path: Path
    contents: str | bytes


class WriterState(Enum):
    INIT = "init"
    STREAMING = "streaming"
    FINALIZED = "finalized"


def read_preamble() -> str:
    """Return the static sass helpers shipped with the package."""
    asset = resources.files("sass_inline_svg") / "assets" / ROOT_SCSS_NAME
    return asset.read_text(encoding="utf-8")


class SassInlineSvgWriter:
    """Owns both output modules for one run.

    ``start`` writes the preamble module and opens the data module,
    ``add`` appends one function per svg file in the order received and
    ``finish`` writes the svg map and closes the data module. Errors from
    ``add`` propagate and leave the data module incomplete.

    Attributes:
        config: Output options
        injector: Rewrites colors into sass placeholders
        state: Current WriterState
        count: Number of svg files written
    """

    def __init__(
        self,
        config: InlineSvgConfig | None = None,
        injector: ColorInjector | None = None,
    ):
        self.config = config or InlineSvgConfig()
        self.injector = injector or ColorInjector()
        self.state = WriterState.INIT
        self.count = 0
        self._svg_map = ""
        self._stream: TextIO | None = None

    def _require(self, state: WriterState, action: str) -> None:
        if self.state is not state:
            raise RuntimeError(f"Cannot {action} while {self.state.value}")

    def start(self) -> None:
        """Write the preamble module and open the data module."""
        self._require(WriterState.INIT, "start")

        dest_dir = self.config.dest_dir
        if not dest_dir.exists():
            dest_dir.mkdir()

        with open(self.config.root_scss, "w", encoding="utf-8") as f:
            f.write(read_preamble())

        self._stream = open(self.config.data_scss, "w", encoding="utf-8")
        self._svg_map = MAP_OPEN
        self.state = WriterState.STREAMING
        logger.debug("Writing inline svg functions to %s", self.config.data_scss)

    def add(self, svg_file: InputFile) -> None:
        """Append the sass function and map entry for one svg file.

        Raises:
            InvalidSvgError: If the file does not hold a single svg element
        """
        self._require(WriterState.STREAMING, "add files")

        file_name, folder_name = svg_names(svg_file.path)
        self._svg_map += map_entry(file_name, folder_name)

        inline_svg = encode_svg(self.injector.rewrite(svg_file.path, svg_file.contents))
        self._stream.write(assemble_function(file_name, inline_svg))
        self.count += 1
        logger.debug("Added %s from %s", file_name, svg_file.path)

    def finish(self) -> None:
        """Write the svg map and close the data module."""
        self._require(WriterState.STREAMING, "finish")

        self._svg_map += MAP_CLOSE
        self._stream.write(self._svg_map)
        self._close()
        self.state = WriterState.FINALIZED
        logger.info("Wrote %d inline svg functions to %s", self.count, self.config.data_scss)

    def _close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> "SassInlineSvgWriter":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finish()
        else:
            self._close()


def build_stylesheets(
    svg_files: Iterable[InputFile],
    config: InlineSvgConfig | None = None,
) -> int:
    """Convert svg files into the inline svg sass modules.

    Args:
        svg_files: Files in the order their functions should be written
        config: Output options (defaults to ./scss)

    Returns:
        Number of svg files written
    """
    with SassInlineSvgWriter(config) as writer:
        for svg_file in svg_files:
            writer.add(svg_file)
    return writer.count
