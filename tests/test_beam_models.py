"""
Unit tests for beam data types and the two analyzers.
"""

import dataclasses

import numpy as np
import pytest

from beamcalc.core.exceptions import InvalidArgumentError, UnsupportedConditionError
from beamcalc.core.models.base_beam import (
    AnalysisCondition,
    Beam,
    Material,
    Quantity,
    Side,
    create_beam,
    create_material,
)
from beamcalc.core.models.simply_supported import SimplySupportedAnalyzer
from beamcalc.core.models.two_span_unequal import TwoSpanReactions, TwoSpanUnequalAnalyzer


class TestMaterial:
    """Tests for the Material value object."""

    def test_properties_are_read_only(self):
        """Properties cannot be changed after construction."""
        material = create_material("steel", {"EI": 1e9, "j2": 1.0})
        with pytest.raises(TypeError):
            material.properties["EI"] = 2e9

    def test_source_mapping_is_copied(self):
        props = {"EI": 1e9, "j2": 1.0}
        material = Material("steel", props)
        props["EI"] = 5.0
        assert material.flexural_rigidity == 1e9

    def test_missing_property(self):
        """Missing coefficients are reported when they are needed."""
        material = Material("bare", {"GA": 3.0})
        with pytest.raises(InvalidArgumentError, match="EI"):
            material.flexural_rigidity

    def test_material_is_hashable(self):
        material = Material("steel", {"EI": 1e9})
        assert hash(material) == hash(Material("steel", {"EI": 2e9}))


class TestBeam:
    """Tests for the Beam value object."""

    def test_total_length(self, two_span_beam):
        assert two_span_beam.total_length(AnalysisCondition.SIMPLY_SUPPORTED) == 4.0
        assert two_span_beam.total_length("two-span-unequal") == 10.0

    def test_total_length_unknown_condition(self, two_span_beam):
        with pytest.raises(UnsupportedConditionError):
            two_span_beam.total_length("cantilever")

    @pytest.mark.parametrize(
        "primary, secondary",
        [(0.0, 1.0), (-2.0, 1.0), (3.0, -1.0), (float("nan"), 1.0), (3.0, float("inf")), ("4", 1.0)],
    )
    def test_invalid_geometry(self, material, primary, secondary):
        with pytest.raises(InvalidArgumentError):
            Beam(primary_span=primary, secondary_span=secondary, material=material)

    def test_beam_is_frozen(self, simple_beam):
        with pytest.raises(dataclasses.FrozenInstanceError):
            simple_beam.primary_span = 10.0

    def test_material_shared_between_beams(self, material):
        a = create_beam(4, 6, material)
        b = create_beam(5, 0, material)
        assert a.material is b.material
        assert isinstance(a.primary_span, float)


class TestSide:
    """Tests for side-hint normalisation."""

    @pytest.mark.parametrize(
        "hint, expected",
        [
            (True, Side.LEFT),
            (False, Side.RIGHT),
            ("left", Side.LEFT),
            (Side.RIGHT, Side.RIGHT),
            (np.bool_(True), Side.LEFT),
            (None, None),
        ],
    )
    def test_coerce(self, hint, expected):
        assert Side.coerce(hint) is expected

    def test_invalid_hint(self):
        with pytest.raises(InvalidArgumentError):
            Side.coerce("up")

    def test_is_primary_span(self):
        assert Side.LEFT.is_primary_span
        assert not Side.RIGHT.is_primary_span


class TestSimplySupported:
    """Tests for the simply supported analyzer (L = 6, w = 10)."""

    @pytest.fixture
    def analyzer(self):
        return SimplySupportedAnalyzer()

    def test_shear_force_at_ends(self, analyzer, simple_beam):
        """V(0) = wL/2 and V(L) = -wL/2."""
        shear = analyzer.get_shear_force_equation(simple_beam, 10)
        assert shear(0).y == pytest.approx(30.0)
        assert shear(6).y == pytest.approx(-30.0)
        assert shear(3).y == pytest.approx(0.0)

    def test_bending_moment(self, analyzer, simple_beam):
        """M(3) = -(10·3/2)(6-3) = -45, zero at both supports."""
        moment = analyzer.get_bending_moment_equation(simple_beam, 10)
        assert moment(3).y == pytest.approx(-45.0)
        assert moment(0).y == 0.0
        assert moment(6).y == pytest.approx(0.0, abs=1e-12)

    def test_midspan_deflection(self, analyzer, simple_beam):
        """Mid-span deflection equals -5wL⁴/(384 EI') · 1000."""
        deflection = analyzer.get_deflection_equation(simple_beam, 10)
        expected = -5 * 10 * 6**4 / 384 * 1000
        assert deflection(3).y == pytest.approx(expected)
        assert expected == pytest.approx(-168750.0)

    def test_deflection_scaling_factor(self, analyzer):
        """Deflection scales linearly with j2 and inversely with EI."""
        base = Beam(6, 0, Material("a", {"EI": 1e9, "j2": 1.0}))
        scaled = Beam(6, 0, Material("b", {"EI": 2e9, "j2": 3.0}))
        d_base = analyzer.get_deflection_equation(base, 10)(2).y
        d_scaled = analyzer.get_deflection_equation(scaled, 10)(2).y
        assert d_scaled == pytest.approx(d_base * 3.0 / 2.0)

    def test_deflection_symmetric_and_zero_at_supports(self, analyzer, simple_beam):
        deflection = analyzer.get_deflection_equation(simple_beam, 10)
        assert deflection(0).y == 0.0
        assert deflection(6).y == pytest.approx(0.0, abs=1e-9)
        assert deflection(2).y == pytest.approx(deflection(4).y)

    def test_secondary_span_ignored(self, analyzer, material):
        """A secondary span does not change the single-span result or domain."""
        beam = Beam(6, 9, material)
        moment = analyzer.get_bending_moment_equation(beam, 10)
        assert moment.total_length == 6.0
        assert moment(3).y == pytest.approx(-45.0)
        with pytest.raises(InvalidArgumentError):
            moment(7)

    def test_side_hint_ignored(self, analyzer, simple_beam):
        shear = analyzer.get_shear_force_equation(simple_beam, 10)
        assert shear(2, True).y == shear(2, False).y == shear(2).y

    def test_missing_stiffness_only_affects_deflection(self, analyzer):
        beam = Beam(6, 0, Material("bare", {}))
        assert analyzer.get_shear_force_equation(beam, 10)(0).y == pytest.approx(30.0)
        with pytest.raises(InvalidArgumentError):
            analyzer.get_deflection_equation(beam, 10)

    @pytest.mark.parametrize("analyzer_cls", [SimplySupportedAnalyzer, TwoSpanUnequalAnalyzer])
    def test_zero_stiffness_rejected(self, analyzer_cls):
        beam = Beam(4, 6, Material("void", {"EI": 0.0, "j2": 1.0}))
        deflection_factory = analyzer_cls().get_deflection_equation
        with pytest.raises(InvalidArgumentError, match="EI = 0"):
            deflection_factory(beam, 10)

    def test_equation_tags(self, analyzer, simple_beam):
        eq = analyzer.get_bending_moment_equation(simple_beam, 10)
        assert eq.condition is AnalysisCondition.SIMPLY_SUPPORTED
        assert eq.quantity is Quantity.BENDING_MOMENT


class TestTwoSpanReactions:
    """Tests for the three-moment reaction solve (L1 = 4, L2 = 6, w = 5)."""

    def test_reactions(self, two_span_beam):
        r = TwoSpanReactions.solve(two_span_beam, 5)
        assert r.m1 == pytest.approx(-17.5)
        assert r.r1 == pytest.approx(5.625)
        assert r.r3 == pytest.approx(12.083333333, rel=1e-9)
        assert r.r2 == pytest.approx(32.291666667, rel=1e-9)

    def test_vertical_equilibrium(self, two_span_beam):
        r = TwoSpanReactions.solve(two_span_beam, 5)
        assert r.r1 + r.r2 + r.r3 == pytest.approx(5 * 10)

    def test_equal_spans(self, material):
        """Equal spans give the textbook 3wL/8, 10wL/8 reactions."""
        r = TwoSpanReactions.solve(Beam(5, 5, material), 2)
        assert r.m1 == pytest.approx(-2 * 25 / 8)
        assert r.r1 == pytest.approx(3 * 2 * 5 / 8)
        assert r.r2 == pytest.approx(10 * 2 * 5 / 8)
        assert r.r3 == pytest.approx(r.r1)

    def test_requires_secondary_span(self, simple_beam):
        with pytest.raises(InvalidArgumentError, match="secondary span"):
            TwoSpanReactions.solve(simple_beam, 5)


class TestTwoSpanUnequal:
    """Tests for the two-span analyzer (L1 = 4, L2 = 6, w = 5)."""

    @pytest.fixture
    def analyzer(self):
        return TwoSpanUnequalAnalyzer()

    def test_shear_force_at_ends(self, analyzer, two_span_beam):
        shear = analyzer.get_shear_force_equation(two_span_beam, 5)
        r = shear.reactions
        assert shear(0).y == pytest.approx(r.r1)
        assert shear(10).y == pytest.approx(r.r1 + r.r2 - 5 * 10)
        assert shear(10).y == pytest.approx(-r.r3)

    def test_shear_force_jump_at_support(self, analyzer, two_span_beam):
        shear = analyzer.get_shear_force_equation(two_span_beam, 5)
        left = shear(4, Side.LEFT).y
        right = shear(4, Side.RIGHT).y
        assert left == pytest.approx(-14.375)
        assert right == pytest.approx(17.916666667, rel=1e-9)
        assert right - left == pytest.approx(shear.reactions.r2)

    def test_shear_force_accepts_boolean_flag(self, analyzer, two_span_beam):
        shear = analyzer.get_shear_force_equation(two_span_beam, 5)
        assert shear(4, True).y == shear(4, Side.LEFT).y
        assert shear(4, False).y == shear(4, Side.RIGHT).y

    def test_shear_force_requires_side_at_support(self, analyzer, two_span_beam):
        shear = analyzer.get_shear_force_equation(two_span_beam, 5)
        with pytest.raises(InvalidArgumentError, match="side"):
            shear(4)

    def test_shear_force_away_from_support(self, analyzer, two_span_beam):
        """Side hints are irrelevant away from the support."""
        shear = analyzer.get_shear_force_equation(two_span_beam, 5)
        assert shear(2).y == pytest.approx(5.625 - 10)
        assert shear(7).y == pytest.approx(5.625 + 32.291666667 - 35, rel=1e-9)
        assert shear(7, True).y == shear(7).y

    def test_bending_moment_boundaries(self, analyzer, two_span_beam):
        moment = analyzer.get_bending_moment_equation(two_span_beam, 5)
        assert moment(0).y == 0.0
        assert moment(10).y == pytest.approx(0.0, abs=1e-9)

    def test_bending_moment_over_support(self, analyzer, two_span_beam):
        """The diagram value over the support is -M1."""
        moment = analyzer.get_bending_moment_equation(two_span_beam, 5)
        assert moment(4).y == pytest.approx(17.5)
        assert moment(4, Side.RIGHT).y == moment(4, Side.LEFT).y

    def test_bending_moment_continuity(self, analyzer, two_span_beam):
        moment = analyzer.get_bending_moment_equation(two_span_beam, 5)
        eps = 1e-9
        assert moment(4 - eps).y == pytest.approx(moment(4 + eps).y, rel=1e-6)

        r = moment.reactions
        left_branch = -(r.r1 * 4 - 5 * 4**2 / 2)
        right_branch = -(r.r1 * 4 + r.r2 * (4 - 4) - 5 * 4**2 / 2)
        assert left_branch == pytest.approx(right_branch, rel=1e-9)

    def test_deflection_zero_at_supports(self, analyzer, two_span_beam):
        deflection = analyzer.get_deflection_equation(two_span_beam, 5)
        assert deflection(0).y == 0.0
        assert deflection(4).y == pytest.approx(0.0, abs=1e-9)
        assert deflection(4 + 1e-9).y == pytest.approx(0.0, abs=1e-3)
        assert deflection(10).y == pytest.approx(0.0, abs=1e-6)

    def test_deflection_values(self, analyzer, two_span_beam):
        """The short span lifts, the long span sags."""
        deflection = analyzer.get_deflection_equation(two_span_beam, 5)
        assert deflection(2).y == pytest.approx(1000 * 10 / 12)
        assert deflection(7).y == pytest.approx(-45000.0)

    def test_deflection_slope_continuous_at_support(self, analyzer, two_span_beam):
        """Finite-difference slopes on both sides of the support agree."""
        deflection = analyzer.get_deflection_equation(two_span_beam, 5)
        h = 1e-4
        left_slope = (deflection(4).y - deflection(4 - h).y) / h
        right_slope = (deflection(4 + h).y - deflection(4).y) / h
        assert left_slope == pytest.approx(-10000.0, rel=1e-3)
        assert right_slope == pytest.approx(left_slope, rel=1e-3)

    @pytest.mark.parametrize("l1, l2, w", [(5.0, 3.0, 2.0), (2.5, 7.5, 12.0), (6.0, 6.0, 1.0)])
    def test_deflection_zero_at_far_end(self, analyzer, material, l1, l2, w):
        deflection = analyzer.get_deflection_equation(Beam(l1, l2, material), w)
        assert deflection(l1 + l2).y == pytest.approx(0.0, abs=1e-6)

    def test_reactions_captured_at_creation(self, analyzer, two_span_beam):
        eq = analyzer.get_bending_moment_equation(two_span_beam, 5)
        assert eq.reactions == TwoSpanReactions.solve(two_span_beam, 5)

    def test_requires_secondary_span(self, analyzer, simple_beam):
        with pytest.raises(InvalidArgumentError):
            analyzer.get_shear_force_equation(simple_beam, 5)
