"""Beam internal-force and deflection diagrams under uniformly distributed load.

Sub-packages
------------
beamcalc.core
    Analyzers, the condition registry, the diagram sampler and utilities
beamcalc.api / schemas / services
    FastAPI surface consumed by the diagram frontend
beamcalc.cli
    Command line entry point
"""

from __future__ import annotations

from beamcalc.core.analysis.beam_analysis import AnalysisResult, BeamAnalysis, analyze
from beamcalc.core.analysis.sampler import Sample, iter_samples, sample
from beamcalc.core.exceptions import (
    BeamAnalysisError,
    InvalidArgumentError,
    QuantityNotSupportedError,
    UnsupportedConditionError,
)
from beamcalc.core.models.base_beam import (
    AnalysisCondition,
    Beam,
    EquationPoint,
    Material,
    Quantity,
    Side,
    create_beam,
    create_material,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisCondition",
    "AnalysisResult",
    "Beam",
    "BeamAnalysis",
    "BeamAnalysisError",
    "EquationPoint",
    "InvalidArgumentError",
    "Material",
    "Quantity",
    "QuantityNotSupportedError",
    "Sample",
    "Side",
    "UnsupportedConditionError",
    "analyze",
    "create_beam",
    "create_material",
    "iter_samples",
    "sample",
]
