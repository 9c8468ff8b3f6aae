"""Tests for resolving SVG shape files into embeddable markup."""

from __future__ import annotations

from pathlib import Path

import pytest

from sandwich.infrastructure import (
    ResourceUnavailableError,
    ShapeParseError,
    ShapeResolutionError,
    SvgShapeResolver,
)


class TestSvgShapeResolver:
    """Tests for SvgShapeResolver."""

    def test_returns_children_of_root(self, square_svg: Path) -> None:
        content = SvgShapeResolver().resolve(str(square_svg))

        assert content.startswith("<rect")
        assert 'width="20"' in content
        assert "<svg" not in content

    def test_keeps_default_namespace_unprefixed(self, square_svg: Path) -> None:
        content = SvgShapeResolver().resolve(str(square_svg))
        assert "ns0:" not in content

    def test_relative_path_uses_base_dir(self, shape_dir: Path) -> None:
        resolver = SvgShapeResolver(base_dir=shape_dir)

        assert resolver.path_for("circle.svg") == shape_dir / "circle.svg"
        assert "<circle" in resolver.resolve("circle.svg")

    def test_absolute_path_ignores_base_dir(self, square_svg: Path, tmp_path: Path) -> None:
        resolver = SvgShapeResolver(base_dir=tmp_path / "elsewhere")
        assert resolver.path_for(str(square_svg)) == square_svg

    def test_missing_file(self, tmp_path: Path) -> None:
        shape = str(tmp_path / "missing.svg")
        with pytest.raises(ResourceUnavailableError) as exc_info:
            SvgShapeResolver().resolve(shape)

        assert exc_info.value.shape == shape
        assert "not found" in str(exc_info.value)

    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.svg"
        path.write_text("<svg><rect></svg>", encoding="utf-8")

        with pytest.raises(ShapeParseError):
            SvgShapeResolver().resolve(str(path))

    def test_errors_share_a_base_class(self) -> None:
        assert issubclass(ResourceUnavailableError, ShapeResolutionError)
        assert issubclass(ShapeParseError, ShapeResolutionError)

    def test_results_are_cached(self, square_svg: Path) -> None:
        resolver = SvgShapeResolver()
        first = resolver.resolve(str(square_svg))
        square_svg.unlink()

        assert resolver.resolve(str(square_svg)) == first

        resolver.clear_cache()
        with pytest.raises(ResourceUnavailableError):
            resolver.resolve(str(square_svg))

    def test_inkscape_attributes_keep_their_prefix(self, tmp_path: Path) -> None:
        path = tmp_path / "drawn.svg"
        path.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape">'
            '<g inkscape:label="Layer 1"><path d="M0 0 L10 10"/></g>'
            "</svg>",
            encoding="utf-8",
        )
        content = SvgShapeResolver().resolve(str(path))

        assert 'inkscape:label="Layer 1"' in content
        assert 'd="M0 0 L10 10"' in content
