"""
Diagram computation.

Evaluates an analysis equation at every sampler position, carrying the
sampler's side hint through so the interior support is read from both sides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from beamcalc.core.analysis.beam_analysis import BeamAnalysis, default_analysis
from beamcalc.core.analysis.sampler import DEFAULT_SEGMENT_COUNT, sample
from beamcalc.core.models.base_beam import AnalysisCondition, Beam, Quantity


@dataclass
class Diagram:
    """
    Sampled diagram ready for plotting.

    Attributes:
        condition: Support condition
        quantity: Diagram quantity
        load: Uniformly distributed load [N/mm]
        x: Sample positions [mm]
        y: Diagram values at each position
        is_primary_span: Primary-span tag of each sample
    """

    condition: AnalysisCondition
    quantity: Quantity
    load: float
    x: np.ndarray
    y: np.ndarray
    is_primary_span: np.ndarray

    @property
    def extreme(self) -> float:
        """Return the value with the largest magnitude."""
        return float(self.y[np.argmax(np.abs(self.y))])

    def points(self) -> list[dict]:
        """Return the diagram as a list of ``{x, y, is_primary_span}`` dicts."""
        return [
            {"x": float(x), "y": float(y), "is_primary_span": bool(p)}
            for x, y, p in zip(self.x, self.y, self.is_primary_span)
        ]


def compute_diagram(
    beam: Beam,
    load: float,
    condition: Union[AnalysisCondition, str],
    quantity: Union[Quantity, str],
    segment_count: int = DEFAULT_SEGMENT_COUNT,
    analysis: Optional[BeamAnalysis] = None,
) -> Diagram:
    """
    Sample and evaluate one diagram.

    Args:
        beam: Beam to analyse
        load: Uniformly distributed load [N/mm]
        condition: Support condition
        quantity: Diagram quantity
        segment_count: Sampling resolution
        analysis: Registry to use (defaults to the module-level registry)

    Returns:
        The evaluated diagram
    """
    analysis = analysis or default_analysis
    result = analysis.analyze(beam, load, condition, quantity)
    samples = sample(beam, result.condition, segment_count)

    x = np.array([s.value for s in samples], dtype=float)
    y = result.equation.evaluate_many(x, [s.side for s in samples])

    return Diagram(
        condition=result.condition,
        quantity=result.quantity,
        load=result.load,
        x=x,
        y=y,
        is_primary_span=np.array([s.is_primary_span for s in samples], dtype=bool),
    )
