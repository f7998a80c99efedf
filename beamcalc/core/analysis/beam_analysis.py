"""
Beam Analysis Registry.

Maps each support condition to the analyzer that implements it and wraps
the equations it produces with their provenance. Nothing is cached: every
request derives a fresh equation from the beam and the load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from beamcalc.core.exceptions import UnsupportedConditionError
from beamcalc.core.models.base_beam import (
    AnalysisCondition,
    Beam,
    BeamAnalyzer,
    Equation,
    Quantity,
)
from beamcalc.core.models.simply_supported import SimplySupportedAnalyzer
from beamcalc.core.models.two_span_unequal import TwoSpanUnequalAnalyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Equation returned by the registry, together with what it was derived from.

    Attributes:
        condition: Support condition
        quantity: Diagram quantity
        beam: Analysed beam
        load: Uniformly distributed load [N/mm]
        equation: Equation bound to ``beam`` and ``load``
    """

    condition: AnalysisCondition
    quantity: Quantity
    beam: Beam
    load: float
    equation: Equation


class BeamAnalysis:
    """
    Registry of analyzers, one per support condition.

    Adding a support condition means passing (or registering) another
    :class:`BeamAnalyzer`; the dispatch below stays untouched.
    """

    def __init__(self, analyzers: Optional[Iterable[BeamAnalyzer]] = None):
        """
        Initialize the registry.

        Args:
            analyzers: Analyzers to register. Defaults to the simply
                supported and two-span unequal analyzers.
        """
        if analyzers is None:
            analyzers = (SimplySupportedAnalyzer(), TwoSpanUnequalAnalyzer())

        self.analyzers: dict[AnalysisCondition, BeamAnalyzer] = {}
        for analyzer in analyzers:
            self.register(analyzer)

    def register(self, analyzer: BeamAnalyzer) -> None:
        """Register ``analyzer`` for its condition, replacing any previous one."""
        self.analyzers[analyzer.condition] = analyzer

    @property
    def conditions(self) -> list[AnalysisCondition]:
        """Return the registered conditions."""
        return list(self.analyzers)

    def get_analyzer(self, condition: Union[AnalysisCondition, str]) -> BeamAnalyzer:
        """
        Look up the analyzer for ``condition``.

        Raises:
            UnsupportedConditionError: If no analyzer is registered for it
        """
        condition = AnalysisCondition.coerce(condition)
        try:
            return self.analyzers[condition]
        except KeyError as exc:
            raise UnsupportedConditionError(condition.value) from exc

    def analyze(
        self,
        beam: Beam,
        load: float,
        condition: Union[AnalysisCondition, str],
        quantity: Union[Quantity, str],
    ) -> AnalysisResult:
        """
        Derive the ``quantity`` equation for ``beam`` under ``load``.

        Args:
            beam: Beam to analyse
            load: Uniformly distributed load [N/mm]
            condition: Support condition
            quantity: Diagram quantity

        Returns:
            Analysis result carrying the equation
        """
        analyzer = self.get_analyzer(condition)
        quantity = Quantity.coerce(quantity)
        equation = analyzer.get_equation(quantity, beam, load)

        logger.debug(
            "Derived %s equation for %s beam (L1=%g, L2=%g, w=%g)",
            quantity.value,
            analyzer.condition.value,
            beam.primary_span,
            beam.secondary_span,
            equation.load,
        )
        return AnalysisResult(
            condition=analyzer.condition,
            quantity=quantity,
            beam=beam,
            load=equation.load,
            equation=equation,
        )

    def get_deflection(
        self, beam: Beam, load: float, condition: Union[AnalysisCondition, str]
    ) -> AnalysisResult:
        return self.analyze(beam, load, condition, Quantity.DEFLECTION)

    def get_bending_moment(
        self, beam: Beam, load: float, condition: Union[AnalysisCondition, str]
    ) -> AnalysisResult:
        return self.analyze(beam, load, condition, Quantity.BENDING_MOMENT)

    def get_shear_force(
        self, beam: Beam, load: float, condition: Union[AnalysisCondition, str]
    ) -> AnalysisResult:
        return self.analyze(beam, load, condition, Quantity.SHEAR_FORCE)


default_analysis = BeamAnalysis()


def analyze(
    beam: Beam,
    load: float,
    condition: Union[AnalysisCondition, str],
    quantity: Union[Quantity, str],
) -> AnalysisResult:
    """Derive an equation using the default registry."""
    return default_analysis.analyze(beam, load, condition, quantity)
