"""Command-line interface for inline svg generation."""

import argparse
import glob
import logging
import sys
from pathlib import Path
from typing import Iterator

from .config import load_config
from .emitter import InputFile, build_stylesheets
from .errors import InvalidSvgError


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="sass_inline_svg",
        description="Convert svg files into sass functions returning inline data URIs",
    )
    parser.add_argument(
        "inputs",
        type=Path,
        nargs="+",
        help="SVG files, glob patterns or directories searched recursively for *.svg",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML config file with a destDir setting",
    )
    parser.add_argument(
        "-d", "--dest-dir",
        type=Path,
        help="Output directory for the scss modules (default: ./scss)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every processed file",
    )
    return parser


def _is_pattern(path: Path) -> bool:
    return any(char in str(path) for char in "*?[")


def discover_svg_files(inputs: list[Path]) -> list[Path]:
    """Expand input paths into svg files.

    Directories are searched recursively and glob patterns (``**``
    included) expanded. Both are sorted so the output does not depend on
    filesystem order.

    Args:
        inputs: Files, directories and glob patterns from the command line

    Returns:
        SVG file paths in processing order

    Raises:
        FileNotFoundError: If an input does not exist or a pattern matches nothing
    """
    svg_files: list[Path] = []
    for path in inputs:
        if _is_pattern(path):
            matches = sorted(
                Path(match) for match in glob.glob(str(path), recursive=True)
                if Path(match).is_file()
            )
            if not matches:
                raise FileNotFoundError(f"No SVG files match: {path}")
            svg_files.extend(matches)
        elif path.is_dir():
            svg_files.extend(sorted(path.rglob("*.svg")))
        elif path.exists():
            svg_files.append(path)
        else:
            raise FileNotFoundError(f"SVG input not found: {path}")
    return svg_files


def read_svg_files(paths: list[Path]) -> Iterator[InputFile]:
    """Read svg files lazily, one at a time."""
    for path in paths:
        yield InputFile(path=path, contents=path.read_bytes())


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.dest_dir is not None:
        config = config.model_copy(update={"dest_dir": args.dest_dir})

    try:
        paths = discover_svg_files(args.inputs)
        count = build_stylesheets(read_svg_files(paths), config)
    except (InvalidSvgError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {count} svg functions to {config.data_scss}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
