"""Data URI encoding for inline SVG markup.

Follows the optimizations described in
https://codepen.io/tigt/post/optimizing-svgs-in-data-uris
"""

import re
from urllib.parse import quote, unquote

# Characters encodeURIComponent leaves alone besides alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"

_NEWLINES = re.compile(r"\n+")
# #{...} once percent-encoded
_ENCODED_PLACEHOLDER = re.compile(r"%23%7B.*?%7D")

# Escapes turned back into literals, applied in order
_RESTORED = (
    ("%20", " "),
    ("%3D", "="),
    ("%3A", ":"),
    ("%2F", "/"),
    ("%22", "'"),  # quotes become apostrophes
)


def encode_svg(svg_content: str) -> str:
    """Encode SVG markup as a data URI payload.

    Newlines are removed, the markup is percent-encoded and the sass
    interpolations (``#{...}``) are decoded again so they still work.

    Args:
        svg_content: SVG markup

    Returns:
        Payload safe inside a double-quoted sass string
    """
    payload = _NEWLINES.sub("", svg_content)
    payload = quote(payload, safe=URI_COMPONENT_SAFE)

    for encoded, literal in _RESTORED:
        payload = payload.replace(encoded, literal)

    return _ENCODED_PLACEHOLDER.sub(lambda match: unquote(match.group(0)), payload)
