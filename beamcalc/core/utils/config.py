"""
Configuration Loading Utilities.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from beamcalc.core.analysis.sampler import DEFAULT_SEGMENT_COUNT
from beamcalc.core.exceptions import InvalidArgumentError
from beamcalc.core.models.base_beam import (
    AnalysisCondition,
    Beam,
    Quantity,
    create_beam,
    create_material,
)

REQUIRED_SECTIONS = ("beam", "material", "load", "analysis")

_DEFAULT_CONFIG: dict[str, Any] = {
    "beam": {
        "primary_span": 4000.0,
        "secondary_span": 6000.0,
    },
    "material": {
        "name": "GL24h",
        "properties": {"EI": 2.0e12, "j2": 1.0},
    },
    "load": {
        "distributed_load": 5.0,
    },
    "analysis": {
        "condition": AnalysisCondition.TWO_SPAN_UNEQUAL.value,
        "quantities": [q.value for q in Quantity],
        "segment_count": DEFAULT_SEGMENT_COUNT,
    },
    "output_dir": "outputs",
}


def _convert_numeric_strings(obj: Any) -> Any:
    """
    Recursively convert numeric strings to floats/ints.

    PyYAML reads exponents without a decimal point (``1e12``) as strings.
    """
    if isinstance(obj, dict):
        return {k: _convert_numeric_strings(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_convert_numeric_strings(item) for item in obj]
    elif isinstance(obj, str):
        try:
            if "." in obj or "e" in obj.lower():
                return float(obj)
            return int(obj)
        except ValueError:
            return obj
    return obj


def load_config(config_path: str) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    config = _convert_numeric_strings(config)

    # A bare ``analysis:`` key loads as None
    for section in REQUIRED_SECTIONS:
        if config.get(section) is None:
            config[section] = {}

    return config


def save_config(config: dict[str, Any], config_path: str) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration dictionary
        config_path: Output path
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def get_default_config() -> dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(_DEFAULT_CONFIG)


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidArgumentError(f"Config section {name!r} must be a mapping")
    return {**_DEFAULT_CONFIG[name], **section}


def beam_from_config(config: dict[str, Any]) -> Beam:
    """
    Build the beam described by the ``beam`` and ``material`` sections.

    Missing keys fall back to the defaults.
    """
    beam_cfg = _section(config, "beam")
    material_cfg = _section(config, "material")

    material = create_material(material_cfg["name"], material_cfg["properties"])
    return create_beam(beam_cfg["primary_span"], beam_cfg["secondary_span"], material)


def load_from_config(config: dict[str, Any]) -> float:
    """Return the uniformly distributed load [N/mm]."""
    return float(_section(config, "load")["distributed_load"])


def analysis_options(config: dict[str, Any]) -> dict[str, Any]:
    """
    Return the ``analysis`` section with enum values resolved.

    Returns:
        Dict with ``condition``, ``quantities`` and ``segment_count``

    Raises:
        UnsupportedConditionError: For an unknown condition
        InvalidArgumentError: For an unknown quantity or a segment count that
            is not a positive integer
    """
    analysis_cfg = _section(config, "analysis")
    segment_count = analysis_cfg["segment_count"]
    if isinstance(segment_count, bool) or not isinstance(segment_count, int) or segment_count < 1:
        raise InvalidArgumentError(
            f"analysis.segment_count must be a positive integer, got {segment_count!r}"
        )
    return {
        "condition": AnalysisCondition.coerce(analysis_cfg["condition"]),
        "quantities": [Quantity.coerce(q) for q in analysis_cfg["quantities"]],
        "segment_count": segment_count,
    }
