"""Pytest configuration and shared fixtures for sandwich tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from sandwich.domain import Extrusion, Placement2D

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20mm" height="20mm" viewBox="0 0 20 20">'
    '<rect x="0" y="0" width="20" height="20"/>'
    "</svg>"
)

CIRCLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="10mm" height="10mm" viewBox="0 0 10 10">'
    '<circle cx="5" cy="5" r="5"/>'
    "</svg>"
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests writing real files end to end")


# =============================================================================
# Geometry helpers
# =============================================================================


@pytest.fixture
def p1() -> Placement2D:
    return Placement2D(shape="p1.svg", x=0.0, y=0.0)


@pytest.fixture
def p2() -> Placement2D:
    return Placement2D(shape="p2.svg", x=10.0, y=5.0)


@pytest.fixture
def extrude() -> Callable[[Placement2D, float, float], Extrusion]:
    """Factory building an extrusion from a placement and a height range."""

    def _extrude(placement: Placement2D, z_min: float, z_max: float) -> Extrusion:
        return Extrusion(placement=placement, z_min=z_min, z_max=z_max)

    return _extrude


# =============================================================================
# Shape files and configuration files
# =============================================================================


@pytest.fixture
def shape_dir(tmp_path: Path) -> Path:
    """Directory holding a square and a circle SVG shape."""
    shapes = tmp_path / "shapes"
    shapes.mkdir()
    (shapes / "square.svg").write_text(SQUARE_SVG, encoding="utf-8")
    (shapes / "circle.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    return shapes


@pytest.fixture
def square_svg(shape_dir: Path) -> Path:
    return shape_dir / "square.svg"


@pytest.fixture
def circle_svg(shape_dir: Path) -> Path:
    return shape_dir / "circle.svg"


@pytest.fixture
def box_config_data() -> dict[str, Any]:
    """A square frame three layers high with a circle in the middle layer."""
    return {
        "schema_version": "1.0",
        "canvas": {"width": 120, "height": 80},
        "slicing": {"step": 1.0},
        "cuts": [
            {"shape": "shapes/square.svg", "x": 10, "y": 10, "z_min": 0, "z_max": 3},
            {"shape": "shapes/circle.svg", "x": 40, "y": 30, "z_min": 1, "z_max": 2},
        ],
        "output": {"project_name": "box", "formats": ["svg", "json"]},
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Factory writing a configuration dictionary as JSON next to the shapes."""

    def _write(data: dict[str, Any], name: str = "sandwich.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def box_config(
    shape_dir: Path,
    box_config_data: dict[str, Any],
    write_config: Callable[[dict[str, Any], str], Path],
) -> Path:
    """Path of the box configuration, with its shape files in place."""
    return write_config(box_config_data, "box.json")
