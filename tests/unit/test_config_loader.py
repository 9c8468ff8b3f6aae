"""Tests for loading configuration files."""

from __future__ import annotations

from pathlib import Path

import pytest

from sandwich.application.config import ConfigError, load_config, load_config_from_dict


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(self, box_config: Path) -> None:
        config = load_config(box_config)
        assert len(config.cuts) == 2
        assert config.slicing.step == 1.0

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{\n  "schema_version": "1.0",\n}', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3
        assert "Invalid JSON" in error.message

    def test_validation_error_points_at_field(self, write_config) -> None:
        path = write_config(
            {
                "schema_version": "1.0",
                "cuts": [{"shape": "a.svg", "z_min": 0}],
            }
        )
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert [d["path"] for d in error.details] == ["cuts[0].z_max"]
        assert "cuts[0].z_max" in error.message

    def test_nested_validation_error_path(self, write_config) -> None:
        path = write_config({"schema_version": "1.0", "slicing": {"step": 0}})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.details[0]["path"] == "slicing.step"
        assert exc_info.value.details[0]["value"] == 0

    def test_inverted_cut_reported_on_cut(self, write_config) -> None:
        path = write_config(
            {"schema_version": "1.0", "cuts": [{"shape": "a.svg", "z_min": 3, "z_max": 1}]}
        )
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.details[0]["path"] == "cuts[0]"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self, box_config_data) -> None:
        assert load_config_from_dict(box_config_data).output.project_name == "box"

    def test_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "9.0"})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None
