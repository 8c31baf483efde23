"""Sass text generation for inline SVG functions and the svg map."""

from pathlib import Path

URI_PREFIX = "data:image/svg+xml, "

# Parameter names must match the placeholders written by the injector
FUNCTION_TEMPLATE = (
    '@function {name}( $fillcolor, $strokecolor) {{ @return "{prefix}{payload}"; }}\n\n'
)
MAP_ENTRY_TEMPLATE = "'{name}': ('name': '{name}', 'folder': '{folder}'),"
MAP_OPEN = "$svg-map: ("
MAP_CLOSE = ");\n"


def svg_names(file_path: str | Path) -> tuple[str, str]:
    """Return (file name without extension, parent folder name) for a path."""
    path = Path(file_path)
    return path.stem, path.parent.name


def assemble_function(file_name: str, inline_svg: str) -> str:
    """Create a sass function returning the data URI of an encoded svg.

    Args:
        file_name: Function name, the svg file name without extension
        inline_svg: Encoded svg payload

    Returns:
        Sass function definition followed by a blank line
    """
    return FUNCTION_TEMPLATE.format(name=file_name, prefix=URI_PREFIX, payload=inline_svg)


def map_entry(file_name: str, folder_name: str) -> str:
    return MAP_ENTRY_TEMPLATE.format(name=file_name, folder=folder_name)
