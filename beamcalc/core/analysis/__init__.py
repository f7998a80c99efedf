"""Condition registry, diagram sampling and diagram computation."""

from __future__ import annotations

from beamcalc.core.analysis.beam_analysis import (
    AnalysisResult,
    BeamAnalysis,
    analyze,
    default_analysis,
)
from beamcalc.core.analysis.diagram import Diagram, compute_diagram
from beamcalc.core.analysis.sampler import DEFAULT_SEGMENT_COUNT, Sample, iter_samples, sample

__all__ = [
    "DEFAULT_SEGMENT_COUNT",
    "AnalysisResult",
    "BeamAnalysis",
    "Diagram",
    "Sample",
    "analyze",
    "compute_diagram",
    "default_analysis",
    "iter_samples",
    "sample",
]
