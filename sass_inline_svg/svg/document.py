"""Parse, query and serialize SVG trees with xml.etree."""

import copy
import io
import re
import xml.etree.ElementTree as ET
from typing import IO, Callable

# Prefixes ElementTree reserves for generated namespaces
_RESERVED_PREFIX = re.compile(r"ns\d+$")
_WHITESPACE = re.compile(r"\s+")


def local_name(tag: object) -> str:
    """Return an element tag without its {namespace} part."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _normalize_whitespace(root: ET.Element) -> None:
    """Collapse whitespace runs in text and tails to a single space."""
    for element in root.iter():
        if element.text:
            element.text = _WHITESPACE.sub(" ", element.text)
        if element.tail:
            element.tail = _WHITESPACE.sub(" ", element.tail)


def _parse(source: IO) -> ET.Element:
    events = ET.iterparse(source, events=("start-ns",))
    namespaces = [ns for _, ns in events]

    # A prefixed alias of the default namespace would otherwise win on output
    default_uris = {uri for prefix, uri in namespaces if not prefix}
    for prefix, uri in namespaces:
        if _RESERVED_PREFIX.match(prefix) or (prefix and uri in default_uris):
            continue
        ET.register_namespace(prefix, uri)

    root = events.root
    _normalize_whitespace(root)
    return root


def parse_svg(svg_content: str | bytes) -> ET.Element:
    """Parse SVG markup into an element tree.

    Namespace prefixes declared by the document are registered so that
    serialization writes them back instead of generated ns0/ns1 prefixes.
    Bytes are parsed as-is so a declared encoding is honored; bytes that
    do not match it are decoded as UTF-8 with replacement characters.

    Args:
        svg_content: SVG/XML markup

    Returns:
        Root element of the parsed document

    Raises:
        xml.etree.ElementTree.ParseError: If the markup is not well-formed
    """
    if isinstance(svg_content, bytes):
        try:
            return _parse(io.BytesIO(svg_content))
        except ET.ParseError:
            svg_content = svg_content.decode("utf-8", errors="replace")
    return _parse(io.StringIO(svg_content))


def find_elements(root: ET.Element, tag: str) -> list[ET.Element]:
    """Find every element with the given local tag name, root included."""
    return [element for element in root.iter() if local_name(element.tag) == tag]


def find_by_attribute(
    root: ET.Element,
    name: str,
    value_filter: Callable[[str], bool] | None = None,
) -> list[ET.Element]:
    """Find every element carrying an attribute.

    Args:
        root: Element to search from (included in the search)
        name: Attribute name
        value_filter: Optional predicate the attribute value must satisfy

    Returns:
        Matching elements in document order
    """
    matches = []
    for element in root.iter():
        value = element.get(name)
        if value is None:
            continue
        if value_filter is None or value_filter(value):
            matches.append(element)
    return matches


def set_attribute(elements: list[ET.Element], name: str, value: str) -> None:
    """Set an attribute on each element."""
    for element in elements:
        element.set(name, value)


def serialize_subtree(element: ET.Element) -> str:
    """Serialize an element and its children, dropping its trailing text."""
    subtree = copy.copy(element)
    subtree.tail = None
    return ET.tostring(subtree, encoding="unicode")
