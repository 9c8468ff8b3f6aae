"""Tests for the exporter framework (base.py)."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

import pytest

from sandwich.application import CanvasInput, SandwichOutput
from sandwich.domain import Layer, Placement2D
from sandwich.infrastructure.exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonManifestExporter,
    SvgLayerExporter,
)


@pytest.fixture
def output(square_svg: Path) -> SandwichOutput:
    placement = Placement2D(str(square_svg), 10, 10)
    return SandwichOutput(
        layers=[Layer(0.0, 1.0, (placement,)), Layer(1.0, 2.0)],
        canvas=CanvasInput(width=100, height=100),
        step=1.0,
    )


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        """Store original exporters before each test."""
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        """Restore original exporters after each test."""
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_exporters_are_registered(self) -> None:
        assert ExporterRegistry.get("svg") is SvgLayerExporter
        assert ExporterRegistry.get("json") is JsonManifestExporter

    def test_available_formats_are_sorted(self) -> None:
        assert ExporterRegistry.available_formats() == ["json", "svg"]

    def test_get_unknown_format_raises_key_error(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("dxf")
        assert "No exporter registered for format 'dxf'" in str(exc_info.value)

    def test_register_new_exporter(self) -> None:
        @ExporterRegistry.register("txt")
        class TextExporter:
            format_name: ClassVar[str] = "txt"
            file_extension: ClassVar[str] = "txt"

            def export(self, output, output_dir: Path, project_name: str) -> list[Path]:
                return []

        assert ExporterRegistry.is_registered("txt")
        assert ExporterRegistry.get("txt") is TextExporter
        assert isinstance(TextExporter(), Exporter)

    def test_clear_removes_all_exporters(self) -> None:
        ExporterRegistry.clear()
        assert ExporterRegistry.available_formats() == []


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all(self, output: SandwichOutput, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        results = ExportManager(out_dir).export_all(["svg", "json"], output, "lamp")

        assert set(results) == {"svg", "json"}
        assert results["json"] == [out_dir / "lamp.json"]
        assert all(path.exists() for paths in results.values() for path in paths)

    def test_creates_output_directory(self, output: SandwichOutput, tmp_path: Path) -> None:
        out_dir = tmp_path / "deep" / "out"
        ExportManager(out_dir).export_single("json", output)
        assert (out_dir / "design.json").exists()

    def test_unknown_format_writes_nothing(self, output: SandwichOutput, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        with pytest.raises(KeyError):
            ExportManager(out_dir).export_all(["svg", "dxf"], output)
        assert not out_dir.exists()

    def test_options_reach_exporter(self, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path, options={"svg": {"skip_empty": True}})
        exporter = manager.create_exporter("svg")

        assert isinstance(exporter, SvgLayerExporter)
        assert exporter.skip_empty
