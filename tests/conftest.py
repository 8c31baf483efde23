from __future__ import annotations

from pathlib import Path

import pytest

from sass_inline_svg.config import InlineSvgConfig


@pytest.fixture
def config(tmp_path: Path) -> InlineSvgConfig:
    """Config writing into a scss directory under tmp_path."""
    return InlineSvgConfig(dest_dir=tmp_path / "scss")


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    """Directory of two icons, one nested in a subfolder."""
    icons = tmp_path / "icons"
    (icons / "arrows").mkdir(parents=True)
    (icons / "home.svg").write_text('<svg><path fill="#000"/></svg>', encoding="utf-8")
    (icons / "arrows" / "left.svg").write_text(
        '<svg><path stroke="rgb(0,0,0)" fill="none"/></svg>', encoding="utf-8"
    )
    return icons
