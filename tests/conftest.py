"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
material          — unit-stiffness material (EI = 1e9 → EI' = 1, j2 = 1)
simple_beam       — 6-unit single span used for the simply supported case
two_span_beam     — 4 + 6 unit continuous beam used for the two-span case
analysis          — fresh registry with the built-in analyzers
"""

from __future__ import annotations

import pytest

from beamcalc.core.analysis.beam_analysis import BeamAnalysis
from beamcalc.core.models.base_beam import Beam, Material

# ── Domain primitives ────────────────────────────────────────────────────────


@pytest.fixture
def material() -> Material:
    """Material whose rescaled flexural rigidity is exactly 1."""
    return Material(name="unit", properties={"EI": 1e9, "j2": 1.0})


@pytest.fixture
def simple_beam(material: Material) -> Beam:
    """Single span L = 6, secondary span unused."""
    return Beam(primary_span=6.0, secondary_span=0.0, material=material)


@pytest.fixture
def two_span_beam(material: Material) -> Beam:
    """Continuous beam with L1 = 4 and L2 = 6."""
    return Beam(primary_span=4.0, secondary_span=6.0, material=material)


@pytest.fixture
def analysis() -> BeamAnalysis:
    return BeamAnalysis()
