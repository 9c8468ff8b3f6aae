"""Tests for merging command-line values into a configuration."""

from __future__ import annotations

import pytest

from sandwich.application.config import (
    ConfigError,
    SandwichConfiguration,
    load_config_from_dict,
    merge_config_with_cli,
)


@pytest.fixture
def config(box_config_data) -> SandwichConfiguration:
    return load_config_from_dict(box_config_data)


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides_keeps_values(self, config: SandwichConfiguration) -> None:
        merged = merge_config_with_cli(config)
        assert merged == config

    def test_step_override(self, config: SandwichConfiguration) -> None:
        merged = merge_config_with_cli(config, step=0.25)
        assert merged.slicing.step == 0.25

    def test_original_is_unchanged(self, config: SandwichConfiguration) -> None:
        merge_config_with_cli(config, step=0.25, project_name="other")
        assert config.slicing.step == 1.0
        assert config.output.project_name == "box"

    def test_canvas_override(self, config: SandwichConfiguration) -> None:
        merged = merge_config_with_cli(config, canvas_width=300)
        assert merged.canvas is not None
        assert (merged.canvas.width, merged.canvas.height) == (300, 80)

    def test_canvas_created_from_cli(self) -> None:
        base = SandwichConfiguration(schema_version="1.0")
        merged = merge_config_with_cli(base, canvas_width=200, canvas_height=150)
        assert merged.canvas is not None
        assert (merged.canvas.width, merged.canvas.height) == (200, 150)

    def test_partial_canvas_without_file_canvas_fails(self) -> None:
        base = SandwichConfiguration(schema_version="1.0")
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base, canvas_width=200)
        assert exc_info.value.error_type == "validation"
        assert "canvas.height" in str(exc_info.value)

    def test_output_overrides(self, config: SandwichConfiguration) -> None:
        merged = merge_config_with_cli(
            config,
            output_dir="out",
            project_name="lamp",
            formats=["JSON"],
            skip_empty=True,
        )
        assert merged.output.directory == "out"
        assert merged.output.project_name == "lamp"
        assert merged.output.formats == ["json"]
        assert merged.output.skip_empty

    def test_extra_cuts_are_appended(self, config: SandwichConfiguration) -> None:
        merged = merge_config_with_cli(
            config,
            extra_cuts=[{"shape": "lid.svg", "x": 0, "y": 0, "z_min": 3, "z_max": 4}],
        )
        assert [cut.shape for cut in merged.cuts] == [
            "shapes/square.svg",
            "shapes/circle.svg",
            "lid.svg",
        ]

    def test_invalid_extra_cut_is_reported(self, config: SandwichConfiguration) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(
                config,
                extra_cuts=[{"shape": "lid.svg", "x": 0, "y": 0, "z_min": 4, "z_max": 3}],
            )
        assert exc_info.value.details[0]["path"] == "cuts[2]"

    def test_invalid_step_is_reported(self, config: SandwichConfiguration) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(config, step=-1)
