#!/usr/bin/env python3
"""
Quick Demo: Simply Supported vs Two-Span Continuous Beam

Prints the shear-force and bending-moment diagrams of the same uniformly
loaded beam under both support conditions, then saves the plotted diagrams.
"""

from pathlib import Path

import matplotlib.pyplot as plt

from beamcalc import create_beam, create_material
from beamcalc.core.analysis.diagram import compute_diagram
from beamcalc.core.analysis.visualization import BeamDiagramPlotter
from beamcalc.core.models.base_beam import AnalysisCondition, Quantity
from beamcalc.core.models.two_span_unequal import TwoSpanReactions


def main():
    """Compare the two support conditions for one beam."""
    print("=" * 60)
    print("Simply Supported vs Two-Span Continuous Beam")
    print("=" * 60)

    material = create_material("GL24h", {"EI": 2.0e12, "j2": 1.0})
    beam = create_beam(4000.0, 6000.0, material)
    load = 5.0  # N/mm

    print(f"\nL1 = {beam.primary_span:.0f} mm, L2 = {beam.secondary_span:.0f} mm")
    print(f"Distributed load: {load} N/mm")

    r = TwoSpanReactions.solve(beam, load)
    print(f"\nInterior support moment M1 = {r.m1:.4g}")
    print(f"Reactions: R1 = {r.r1:.4g}, R2 = {r.r2:.4g}, R3 = {r.r3:.4g}")

    plotter = BeamDiagramPlotter(output_dir=Path("outputs/figures"))

    for condition in AnalysisCondition:
        print(f"\n{condition.value}")
        print(f"{'x [mm]':<12}{'span':<12}{'V':<16}{'M':<16}")
        print("-" * 56)

        shear = compute_diagram(beam, load, condition, Quantity.SHEAR_FORCE)
        moment = compute_diagram(beam, load, condition, Quantity.BENDING_MOMENT)

        for x, primary, v, m in zip(shear.x, shear.is_primary_span, shear.y, moment.y):
            span = "primary" if primary else "secondary"
            print(f"{x:<12.1f}{span:<12}{v:<16.4g}{m:<16.4g}")

        deflection = compute_diagram(beam, load, condition, Quantity.DEFLECTION)
        fig = plotter.plot_diagrams(
            [shear, moment, deflection], beam=beam, filename=f"{condition.value}.png"
        )
        plt.close(fig)

    print(f"\nFigures saved to {plotter.output_dir}")


if __name__ == "__main__":
    main()
