"""
Simply Supported Beam Analyzer.

Single span of length L resting on two end supports, loaded by a uniformly
distributed load w over its full length:

- Shear force:     V(x) = w (L/2 - x)
- Bending moment:  M(x) = -(w x / 2)(L - x)
- Deflection:      δ(x) = -(w x / 24 EI')(L³ - 2 L x² + x³) · j2 · 1000

None of the diagrams has an interior discontinuity, so side hints are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .base_beam import (
    DEFLECTION_UNIT_SCALE,
    AnalysisCondition,
    Beam,
    BeamAnalyzer,
    DeflectionEquation,
    Equation,
    Quantity,
    Side,
)


@dataclass(frozen=True)
class _SimplySupportedEquation(Equation):
    condition: ClassVar[AnalysisCondition] = AnalysisCondition.SIMPLY_SUPPORTED

    @property
    def span(self) -> float:
        return self.beam.primary_span


@dataclass(frozen=True)
class SimplySupportedShearForce(_SimplySupportedEquation):
    quantity: ClassVar[Quantity] = Quantity.SHEAR_FORCE

    def _value(self, x: float, side: Optional[Side]) -> float:
        return self.load * (self.span / 2 - x)


@dataclass(frozen=True)
class SimplySupportedBendingMoment(_SimplySupportedEquation):
    quantity: ClassVar[Quantity] = Quantity.BENDING_MOMENT

    def _value(self, x: float, side: Optional[Side]) -> float:
        return -(self.load * x / 2) * (self.span - x)


@dataclass(frozen=True)
class SimplySupportedDeflection(DeflectionEquation):
    condition: ClassVar[AnalysisCondition] = AnalysisCondition.SIMPLY_SUPPORTED

    def _value(self, x: float, side: Optional[Side]) -> float:
        L = self.beam.primary_span
        w = self.load
        return (
            -(w * x / (24 * self.reduced_rigidity))
            * (L**3 - 2 * L * x**2 + x**3)
            * self.scaling_factor
            * DEFLECTION_UNIT_SCALE
        )


class SimplySupportedAnalyzer(BeamAnalyzer):
    """Closed-form uniform-load diagrams for a single simply supported span."""

    name = "SimplySupported"

    @property
    def condition(self) -> AnalysisCondition:
        return AnalysisCondition.SIMPLY_SUPPORTED

    def get_deflection_equation(self, beam: Beam, load: float) -> Equation:
        return SimplySupportedDeflection(beam=beam, load=load)

    def get_bending_moment_equation(self, beam: Beam, load: float) -> Equation:
        return SimplySupportedBendingMoment(beam=beam, load=load)

    def get_shear_force_equation(self, beam: Beam, load: float) -> Equation:
        return SimplySupportedShearForce(beam=beam, load=load)
