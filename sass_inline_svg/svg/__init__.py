"""SVG rewriting, encoding and sass generation."""

from .document import find_by_attribute, find_elements, parse_svg, serialize_subtree, set_attribute
from .encoder import encode_svg
from .injector import ColorInjector, inject_color_variables, FILL_PLACEHOLDER, STROKE_PLACEHOLDER
from .sass import assemble_function, map_entry, svg_names, URI_PREFIX

__all__ = [
    # Document
    "parse_svg",
    "find_elements",
    "find_by_attribute",
    "set_attribute",
    "serialize_subtree",
    # Encoder
    "encode_svg",
    # Injector
    "ColorInjector",
    "inject_color_variables",
    "FILL_PLACEHOLDER",
    "STROKE_PLACEHOLDER",
    # Sass
    "assemble_function",
    "map_entry",
    "svg_names",
    "URI_PREFIX",
]
