"""
Unit tests for configuration loading utilities.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
import yaml

from beamcalc.core.exceptions import InvalidArgumentError, UnsupportedConditionError
from beamcalc.core.models.base_beam import AnalysisCondition, Quantity
from beamcalc.core.utils.config import (
    analysis_options,
    beam_from_config,
    get_default_config,
    load_config,
    load_from_config,
    save_config,
)

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default_config.yaml"


def _write(config: dict) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(config, f)
        f.flush()
        return f.name


class TestLoadConfig:
    def test_load_valid_config(self) -> None:
        path = _write(
            {
                "beam": {"primary_span": 4.0, "secondary_span": 6.0},
                "material": {"name": "unit", "properties": {"EI": 1e9, "j2": 1.0}},
                "load": {"distributed_load": 5.0},
            }
        )
        loaded = load_config(path)

        assert loaded["beam"]["primary_span"] == 4.0
        assert loaded["material"]["properties"]["EI"] == 1e9

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.yaml")

    def test_missing_sections_get_defaults(self) -> None:
        """Config with missing required sections should get empty dicts."""
        loaded = load_config(_write({"output_dir": "outputs"}))

        for section in ("beam", "material", "load", "analysis"):
            assert loaded[section] == {}

    def test_empty_sections_become_mappings(self) -> None:
        """A section key with no value should load as an empty dict."""
        path = _write({})
        Path(path).write_text("beam:\nanalysis:\n", encoding="utf-8")

        loaded = load_config(path)

        assert loaded["beam"] == {}
        assert loaded["analysis"] == {}

    def test_scientific_notation_conversion(self) -> None:
        """Numeric strings like '1e12' should be converted to floats."""
        loaded = load_config(_write({"material": {"properties": {"EI": "1e12"}}}))

        assert isinstance(loaded["material"]["properties"]["EI"], float)
        assert loaded["material"]["properties"]["EI"] == pytest.approx(1e12)

    def test_default_config_loads(self) -> None:
        """The shipped default_config.yaml should load without errors."""
        config = load_config(str(DEFAULT_CONFIG))
        assert config["analysis"]["condition"] == "two-span-unequal"
        assert config["material"]["properties"]["EI"] == pytest.approx(2.0e12)
        assert config["analysis"]["segment_count"] == 10

    def test_shipped_file_matches_builtin_defaults(self) -> None:
        config = load_config(str(DEFAULT_CONFIG))
        defaults = get_default_config()

        for section in ("beam", "material", "load"):
            assert config[section] == defaults[section]
        assert config["analysis"]["condition"] == defaults["analysis"]["condition"]
        assert set(config["analysis"]["quantities"]) == set(defaults["analysis"]["quantities"])

    def test_save_and_reload(self, tmp_path: Path) -> None:
        config = get_default_config()
        config["load"]["distributed_load"] = 7.5
        path = tmp_path / "nested" / "case.yaml"

        save_config(config, str(path))

        assert load_config(str(path)) == config


class TestDomainFromConfig:
    def test_beam_from_config(self) -> None:
        beam = beam_from_config(load_config(str(DEFAULT_CONFIG)))
        assert beam.primary_span == 4000.0
        assert beam.secondary_span == 6000.0
        assert beam.material.name == "GL24h"
        assert beam.material.scaling_factor == 1.0

    def test_partial_sections_use_defaults(self) -> None:
        config = {"beam": {"primary_span": 3.0}, "material": {}, "load": {}, "analysis": {}}
        beam = beam_from_config(config)

        assert beam.primary_span == 3.0
        assert beam.secondary_span == 6000.0
        assert load_from_config(config) == 5.0

    def test_analysis_options(self) -> None:
        config = get_default_config()
        config["analysis"] = {"condition": "simply-supported", "quantities": ["deflection"]}
        options = analysis_options(config)

        assert options["condition"] is AnalysisCondition.SIMPLY_SUPPORTED
        assert options["quantities"] == [Quantity.DEFLECTION]
        assert options["segment_count"] == 10

    def test_unknown_condition(self) -> None:
        config = get_default_config()
        config["analysis"]["condition"] = "fixed-fixed"
        with pytest.raises(UnsupportedConditionError):
            analysis_options(config)

    @pytest.mark.parametrize("segments", [2.7, 10.0, "ten", 0, True])
    def test_invalid_segment_count(self, segments) -> None:
        config = get_default_config()
        config["analysis"]["segment_count"] = segments
        with pytest.raises(InvalidArgumentError, match="segment_count"):
            analysis_options(config)

    def test_invalid_geometry(self) -> None:
        config = get_default_config()
        config["beam"]["primary_span"] = -1
        with pytest.raises(InvalidArgumentError):
            beam_from_config(config)

    def test_default_config_is_a_copy(self) -> None:
        get_default_config()["beam"]["primary_span"] = 1.0
        assert get_default_config()["beam"]["primary_span"] == 4000.0
