"""CLI entry point for sass_inline_svg package.

Usage:
    python -m sass_inline_svg icons/ -d scss
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
