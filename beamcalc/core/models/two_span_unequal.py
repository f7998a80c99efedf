"""
Two-Span Continuous Beam Analyzer.

A beam continuous over two unequal spans L1 (primary) and L2 (secondary)
with supports at x = 0, x = L1 and x = L1 + L2, loaded by a uniformly
distributed load w over both spans.

The hogging moment over the interior support follows from the three-moment
relation, and the support reactions are back-solved from it:

    M1 = -(w L2³ + w L1³) / (8 (L1 + L2))
    R1 = M1 / L1 + w L1 / 2
    R3 = M1 / L2 + w L2 / 2
    R2 = w (L1 + L2) - R1 - R3

The shear force jumps by R2 at the interior support, so evaluating it at
exactly x = L1 requires a side hint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

from beamcalc.core.exceptions import InvalidArgumentError

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

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoSpanReactions:
    """
    Interior support moment and support reactions of a two-span beam.

    Attributes:
        m1: Bending moment over the interior support [N·mm]
        r1: Left end support reaction [N]
        r2: Interior support reaction [N]
        r3: Right end support reaction [N]
    """

    m1: float
    r1: float
    r2: float
    r3: float

    @classmethod
    def solve(cls, beam: Beam, load: float) -> "TwoSpanReactions":
        """
        Solve the reactions for ``beam`` under uniform load ``load``.

        Raises:
            InvalidArgumentError: If the beam has no secondary span
        """
        L1 = beam.primary_span
        L2 = beam.secondary_span
        try:
            w = float(load)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"load must be a number, got {load!r}") from exc

        if L2 <= 0:
            raise InvalidArgumentError(
                f"Two-span analysis needs a positive secondary span, got {L2}"
            )

        m1 = -(w * L2**3 + w * L1**3) / (8 * (L1 + L2))
        r1 = m1 / L1 + w * L1 / 2
        r3 = m1 / L2 + w * L2 / 2
        r2 = w * (L1 + L2) - r1 - r3

        logger.debug(
            "Two-span reactions (L1=%g, L2=%g, w=%g): M1=%g R1=%g R2=%g R3=%g",
            L1, L2, w, m1, r1, r2, r3,
        )
        return cls(m1=m1, r1=r1, r2=r2, r3=r3)


@dataclass(frozen=True)
class TwoSpanShearForce(Equation):
    """Piecewise linear shear force with a jump of R2 at x = L1."""

    condition: ClassVar[AnalysisCondition] = AnalysisCondition.TWO_SPAN_UNEQUAL
    quantity: ClassVar[Quantity] = Quantity.SHEAR_FORCE

    reactions: TwoSpanReactions

    def _value(self, x: float, side: Optional[Side]) -> float:
        L1 = self.beam.primary_span
        w = self.load
        r = self.reactions

        if x == L1:
            if side is None:
                raise InvalidArgumentError(
                    f"Shear force at the interior support x={L1} needs a side hint"
                )
            if side is Side.LEFT:
                return r.r1 - w * x
            return r.r1 + r.r2 - w * x

        if x < L1:
            return r.r1 - w * x
        return r.r1 + r.r2 - w * x


@dataclass(frozen=True)
class TwoSpanBendingMoment(Equation):
    """Continuous piecewise parabolic bending moment, zero at both ends."""

    condition: ClassVar[AnalysisCondition] = AnalysisCondition.TWO_SPAN_UNEQUAL
    quantity: ClassVar[Quantity] = Quantity.BENDING_MOMENT

    reactions: TwoSpanReactions

    def _value(self, x: float, side: Optional[Side]) -> float:
        L1 = self.beam.primary_span
        w = self.load
        r = self.reactions

        if x <= L1:
            return -(r.r1 * x - w * x**2 / 2)
        return -(r.r1 * x + r.r2 * (x - L1) - w * x**2 / 2)


@dataclass(frozen=True)
class TwoSpanDeflection(DeflectionEquation):
    """Continuous piecewise quartic deflection, zero at all three supports."""

    condition: ClassVar[AnalysisCondition] = AnalysisCondition.TWO_SPAN_UNEQUAL

    reactions: TwoSpanReactions

    def _value(self, x: float, side: Optional[Side]) -> float:
        if x == 0:
            return 0.0

        L1 = self.beam.primary_span
        w = self.load
        r1 = self.reactions.r1
        r2 = self.reactions.r2
        scale = DEFLECTION_UNIT_SCALE * self.scaling_factor

        if x <= L1:
            return (
                (x / (24 * self.reduced_rigidity))
                * (4 * r1 * x**2 - w * x**3 + w * L1**3 - 4 * r1 * L1**2)
                * scale
            )

        p1 = (r1 * x / 6) * (x**2 - L1**2)
        p2 = (r2 * x / 6) * (x**2 - 3 * L1 * x + 3 * L1**2)
        p3 = r2 * L1**3 / 6
        p4 = (w * x / 24) * (x**3 - L1**3)
        return (p1 + p2 - p3 - p4) / self.reduced_rigidity * scale


class TwoSpanUnequalAnalyzer(BeamAnalyzer):
    """Uniform-load diagrams for a beam continuous over two unequal spans."""

    name = "TwoSpanUnequal"

    @property
    def condition(self) -> AnalysisCondition:
        return AnalysisCondition.TWO_SPAN_UNEQUAL

    def get_deflection_equation(self, beam: Beam, load: float) -> Equation:
        return TwoSpanDeflection(
            beam=beam, load=load, reactions=TwoSpanReactions.solve(beam, load)
        )

    def get_bending_moment_equation(self, beam: Beam, load: float) -> Equation:
        return TwoSpanBendingMoment(
            beam=beam, load=load, reactions=TwoSpanReactions.solve(beam, load)
        )

    def get_shear_force_equation(self, beam: Beam, load: float) -> Equation:
        return TwoSpanShearForce(
            beam=beam, load=load, reactions=TwoSpanReactions.solve(beam, load)
        )
