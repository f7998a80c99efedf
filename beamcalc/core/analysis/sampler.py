"""
Diagram Sampler.

Produces the ordered positions at which an equation is evaluated for
plotting. For a two-span beam the interior support is emitted twice, first
closing the primary span and then opening the secondary one, so that the
shear-force jump is drawn as a vertical line instead of being interpolated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from beamcalc.core.exceptions import InvalidArgumentError
from beamcalc.core.models.base_beam import AnalysisCondition, Beam, Side

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_COUNT = 10

# Relative to the step size; absorbs accumulated floating-point drift.
_STEP_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Sample:
    """
    A position to evaluate.

    Attributes:
        value: Distance from the left support [mm]
        is_primary_span: Whether the position belongs to the primary span
    """

    value: float
    is_primary_span: bool

    @property
    def side(self) -> Side:
        """Return the side hint to pass to an equation."""
        return Side.LEFT if self.is_primary_span else Side.RIGHT


def iter_samples(
    beam: Beam,
    condition: Union[AnalysisCondition, str],
    segment_count: int = DEFAULT_SEGMENT_COUNT,
) -> Iterator[Sample]:
    """
    Lazily generate sample positions spanning the whole beam.

    Args:
        beam: Beam to sample
        condition: Support condition, which determines the domain
        segment_count: Number of equal steps across the domain

    Yields:
        Samples ordered by position

    Raises:
        InvalidArgumentError: For a non-positive segment count, or a two-span
            beam without a secondary span
        UnsupportedConditionError: For an unknown condition
    """
    condition = AnalysisCondition.coerce(condition)
    if isinstance(segment_count, bool) or not isinstance(segment_count, int) or segment_count < 1:
        raise InvalidArgumentError(
            f"segment_count must be a positive integer, got {segment_count!r}"
        )

    if condition is AnalysisCondition.SIMPLY_SUPPORTED:
        return _iter_single_span(beam.primary_span, segment_count)

    if beam.secondary_span <= 0:
        raise InvalidArgumentError(
            f"Two-span sampling needs a positive secondary span, got {beam.secondary_span}"
        )
    return _iter_two_span(beam.primary_span, beam.total_length(condition), segment_count)


def sample(
    beam: Beam,
    condition: Union[AnalysisCondition, str],
    segment_count: int = DEFAULT_SEGMENT_COUNT,
) -> list[Sample]:
    """Return all sample positions for one sampling pass."""
    samples = list(iter_samples(beam, condition, segment_count))
    logger.debug(
        "Sampled %d positions for %s beam (%d segments)",
        len(samples),
        AnalysisCondition.coerce(condition).value,
        segment_count,
    )
    return samples


def _iter_single_span(length: float, segment_count: int) -> Iterator[Sample]:
    step = length / segment_count
    x = 0.0
    yield Sample(0.0, True)

    for _ in range(segment_count - 1):
        x += step
        yield Sample(x, True)

    # Clamp the end to cancel accumulated step error
    yield Sample(length, True)


def _iter_two_span(support: float, total: float, segment_count: int) -> Iterator[Sample]:
    step = total / segment_count
    tolerance = step * _STEP_TOLERANCE

    x = 0.0
    on_primary = True
    restart_at_support = False
    yield Sample(0.0, True)

    while True:
        if restart_at_support:
            # Second copy of the support point opens the secondary span
            x = support
            on_primary = False
            restart_at_support = False
            yield Sample(support, False)
            continue

        next_x = x + step

        if on_primary and next_x >= support - tolerance:
            x = support
            restart_at_support = True
            yield Sample(support, True)
            continue

        if next_x >= total - tolerance:
            yield Sample(total, False)
            return

        x = next_x
        yield Sample(x, on_primary)
