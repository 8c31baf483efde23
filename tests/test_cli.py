"""Tests for sass_inline_svg.cli."""

from __future__ import annotations

from pathlib import Path

import pytest

from sass_inline_svg.cli import discover_svg_files, main, read_svg_files


def test_discover_sorts_directory_contents(icon_dir: Path) -> None:
    assert discover_svg_files([icon_dir]) == [
        icon_dir / "arrows" / "left.svg",
        icon_dir / "home.svg",
    ]


def test_discover_keeps_explicit_file_order(icon_dir: Path) -> None:
    home = icon_dir / "home.svg"
    left = icon_dir / "arrows" / "left.svg"

    assert discover_svg_files([home, left]) == [home, left]


def test_discover_missing_input(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        discover_svg_files([tmp_path / "nope.svg"])


def test_discover_expands_glob_patterns(icon_dir: Path) -> None:
    assert discover_svg_files([icon_dir / "*.svg"]) == [icon_dir / "home.svg"]
    assert discover_svg_files([icon_dir / "**" / "*.svg"]) == [
        icon_dir / "arrows" / "left.svg",
        icon_dir / "home.svg",
    ]


def test_discover_pattern_without_matches(icon_dir: Path) -> None:
    with pytest.raises(FileNotFoundError, match="No SVG files match"):
        discover_svg_files([icon_dir / "*.png"])


def test_read_svg_files(icon_dir: Path) -> None:
    files = list(read_svg_files([icon_dir / "home.svg"]))

    assert files[0].path == icon_dir / "home.svg"
    assert files[0].contents == b'<svg><path fill="#000"/></svg>'


def test_main_writes_modules(
    icon_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    dest = tmp_path / "scss"

    assert main([str(icon_dir), "--dest-dir", str(dest)]) == 0

    output = (dest / "_sass-inline-svg-data.scss").read_text(encoding="utf-8")
    assert "@function left( $fillcolor, $strokecolor)" in output
    assert "stroke='#{$strokecolor}'" in output
    assert output.endswith(
        "$svg-map: ('left': ('name': 'left', 'folder': 'arrows'),"
        "'home': ('name': 'home', 'folder': 'icons'),);\n"
    )
    assert (dest / "_sass-inline-svg.scss").is_file()
    assert "Wrote 2 svg functions" in capsys.readouterr().out


def test_main_reads_config_file(icon_dir: Path, tmp_path: Path) -> None:
    config_file = tmp_path / "inline-svg.yaml"
    config_file.write_text(f"destDir: {tmp_path / 'from-config'}\n", encoding="utf-8")

    assert main([str(icon_dir), "-c", str(config_file)]) == 0
    assert (tmp_path / "from-config" / "_sass-inline-svg-data.scss").is_file()


def test_main_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(tmp_path / "nope.svg"), "-d", str(tmp_path / "scss")])

    assert code == 1
    assert "Error: SVG input not found" in capsys.readouterr().err


def test_main_invalid_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.svg"
    bad.write_text("<html/>", encoding="utf-8")

    code = main([str(bad), "-d", str(tmp_path / "scss")])

    assert code == 1
    assert "is not a valid svg file" in capsys.readouterr().err


def test_main_converts_non_utf8_files(tmp_path: Path) -> None:
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "cafe.svg").write_bytes(
        b'<?xml version="1.0" encoding="ISO-8859-1"?><svg><text>caf\xe9</text></svg>'
    )
    (icons / "raw.svg").write_bytes(b"<svg><text>\xe9</text></svg>")
    dest = tmp_path / "scss"

    assert main([str(icons), "-d", str(dest)]) == 0
    output = (dest / "_sass-inline-svg-data.scss").read_text(encoding="utf-8")
    assert "caf%C3%A9" in output
    assert "%EF%BF%BD" in output
