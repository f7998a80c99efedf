"""Schema package – re-exports all public symbols for convenient imports."""

from __future__ import annotations

from beamcalc.schemas.analysis import (
    AnalysisOut,
    AnalysisRequestIn,
    BeamIn,
    DiagramOut,
    EvaluateIn,
    EvaluationOut,
    HealthOut,
    MaterialIn,
    PointOut,
    ReactionsOut,
)

__all__ = [
    "AnalysisOut",
    "AnalysisRequestIn",
    "BeamIn",
    "DiagramOut",
    "EvaluateIn",
    "EvaluationOut",
    "HealthOut",
    "MaterialIn",
    "PointOut",
    "ReactionsOut",
]
