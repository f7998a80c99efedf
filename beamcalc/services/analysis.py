"""Analysis service – thin wrapper around the calculation engine.

Translates between the API schemas (``AnalysisRequestIn``, ``EvaluateIn``)
and the registry / sampler in :mod:`beamcalc.core.analysis`.
"""

from __future__ import annotations

import logging
from typing import Any

from beamcalc.core.analysis.beam_analysis import default_analysis
from beamcalc.core.analysis.diagram import compute_diagram
from beamcalc.core.models.base_beam import AnalysisCondition, Beam, create_beam, create_material
from beamcalc.core.models.two_span_unequal import TwoSpanReactions
from beamcalc.core.utils.config import analysis_options, beam_from_config, load_from_config
from beamcalc.schemas import (
    AnalysisOut,
    AnalysisRequestIn,
    BeamIn,
    DiagramOut,
    EvaluateIn,
    EvaluationOut,
    MaterialIn,
    PointOut,
    ReactionsOut,
)

logger = logging.getLogger(__name__)


def _build_beam(beam: BeamIn, material: MaterialIn) -> Beam:
    """Convert the Pydantic models into a domain beam."""
    return create_beam(
        beam.primary_span,
        beam.secondary_span,
        create_material(material.name, material.properties),
    )


def request_from_config(config: dict[str, Any]) -> AnalysisRequestIn:
    """Build the default API request from a loaded configuration dict."""
    beam = beam_from_config(config)
    options = analysis_options(config)
    return AnalysisRequestIn(
        beam=BeamIn(primary_span=beam.primary_span, secondary_span=beam.secondary_span),
        material=MaterialIn(name=beam.material.name, properties=dict(beam.material.properties)),
        load=load_from_config(config),
        condition=options["condition"],
        quantities=options["quantities"],
        segment_count=options["segment_count"],
    )


def run_analysis(request: AnalysisRequestIn) -> AnalysisOut:
    """Compute every requested diagram for one beam and load.

    Raises:
        InvalidArgumentError: For invalid geometry, material or load
        UnsupportedConditionError: If the condition has no analyzer
    """
    beam = _build_beam(request.beam, request.material)
    logger.info(
        "Analysing %s beam (L1=%g, L2=%g, w=%g): %s",
        request.condition.value,
        beam.primary_span,
        beam.secondary_span,
        request.load,
        ", ".join(q.value for q in request.quantities),
    )

    diagrams = []
    for quantity in request.quantities:
        diagram = compute_diagram(
            beam, request.load, request.condition, quantity, request.segment_count
        )
        diagrams.append(
            DiagramOut(
                quantity=diagram.quantity,
                extreme=diagram.extreme,
                points=[PointOut(**p) for p in diagram.points()],
            )
        )

    reactions = None
    if request.condition is AnalysisCondition.TWO_SPAN_UNEQUAL:
        solved = TwoSpanReactions.solve(beam, request.load)
        reactions = ReactionsOut(m1=solved.m1, r1=solved.r1, r2=solved.r2, r3=solved.r3)

    return AnalysisOut(
        condition=request.condition,
        load=request.load,
        diagrams=diagrams,
        reactions=reactions,
    )


def evaluate_point(request: EvaluateIn) -> EvaluationOut:
    """Evaluate one diagram at one position.

    Raises:
        InvalidArgumentError: If ``x`` is outside the beam or the interior
            support side is required but missing
    """
    beam = _build_beam(request.beam, request.material)
    result = default_analysis.analyze(beam, request.load, request.condition, request.quantity)
    point = result.equation.evaluate(request.x, request.is_primary_span)
    return EvaluationOut(
        condition=result.condition,
        quantity=result.quantity,
        x=point.x,
        y=point.y,
    )
