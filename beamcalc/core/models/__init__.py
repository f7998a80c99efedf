"""Beam data types, the equation interface and per-condition analyzers."""

from __future__ import annotations

from beamcalc.core.models.base_beam import (
    AnalysisCondition,
    Beam,
    BeamAnalyzer,
    Equation,
    EquationPoint,
    Material,
    Quantity,
    Side,
    create_beam,
    create_material,
)
from beamcalc.core.models.simply_supported import SimplySupportedAnalyzer
from beamcalc.core.models.two_span_unequal import TwoSpanReactions, TwoSpanUnequalAnalyzer

__all__ = [
    "AnalysisCondition",
    "Beam",
    "BeamAnalyzer",
    "Equation",
    "EquationPoint",
    "Material",
    "Quantity",
    "Side",
    "SimplySupportedAnalyzer",
    "TwoSpanReactions",
    "TwoSpanUnequalAnalyzer",
    "create_beam",
    "create_material",
]
