"""Swap black fill and stroke colors for sass variables."""

import xml.etree.ElementTree as ET
from pathlib import Path

from ..errors import InvalidSvgError
from .document import (
    find_by_attribute,
    find_elements,
    parse_svg,
    serialize_subtree,
    set_attribute,
)

FILL_PLACEHOLDER = "#{$fillcolor}"
STROKE_PLACEHOLDER = "#{$strokecolor}"

# Attribute values treated as black
BLACK_VALUES = frozenset({"#000", "#000000", "rgb(0,0,0)"})


class ColorInjector:
    """Rewrites black fill/stroke attributes of an SVG into placeholders.

    Attributes:
        fill_placeholder: Value written in place of black fills
        stroke_placeholder: Value written in place of black strokes
        black_values: Attribute values replaced by the placeholders
    """

    def __init__(
        self,
        fill_placeholder: str = FILL_PLACEHOLDER,
        stroke_placeholder: str = STROKE_PLACEHOLDER,
        black_values: frozenset[str] = BLACK_VALUES,
    ):
        self.fill_placeholder = fill_placeholder
        self.stroke_placeholder = stroke_placeholder
        self.black_values = black_values

    def is_black(self, value: str) -> bool:
        return value in self.black_values

    def load(
        self, file_path: str | Path, svg_content: str | bytes
    ) -> tuple[ET.Element, ET.Element]:
        """Parse markup and locate its single svg element.

        Args:
            file_path: Path reported in errors
            svg_content: SVG markup, bytes honor a declared encoding

        Returns:
            (document root, svg element) tuple

        Raises:
            InvalidSvgError: If the markup is malformed or does not hold
                exactly one svg element
        """
        try:
            root = parse_svg(svg_content)
        except ET.ParseError as e:
            raise InvalidSvgError(file_path) from e

        svgs = find_elements(root, "svg")
        if len(svgs) != 1:
            raise InvalidSvgError(file_path)
        return root, svgs[0]

    def rewrite(self, file_path: str | Path, svg_content: str | bytes) -> str:
        """Replace black colors with placeholders and serialize the svg.

        When no element has a fill other than ``none`` the fill placeholder
        is set on the svg element itself so the icon stays colorable.

        Args:
            file_path: Path reported in errors
            svg_content: SVG markup, bytes honor a declared encoding

        Returns:
            Markup of the rewritten svg element
        """
        root, svg = self.load(file_path, svg_content)

        if find_by_attribute(root, "fill", lambda value: value != "none"):
            set_attribute(
                find_by_attribute(root, "fill", self.is_black),
                "fill",
                self.fill_placeholder,
            )
        else:
            svg.set("fill", self.fill_placeholder)

        set_attribute(
            find_by_attribute(root, "stroke", self.is_black),
            "stroke",
            self.stroke_placeholder,
        )

        return serialize_subtree(svg)


def inject_color_variables(file_path: str | Path, svg_content: str | bytes) -> str:
    """Rewrite an SVG with the default fill and stroke placeholders."""
    return ColorInjector().rewrite(file_path, svg_content)
