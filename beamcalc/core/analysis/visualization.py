"""
Visualization Module for Beam Diagrams.

Renders sampled shear-force, bending-moment and deflection diagrams with
matplotlib. The sample sequence is plotted as-is, so the doubled interior
support point of a two-span beam shows up as a vertical jump.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from beamcalc.core.analysis.diagram import Diagram
from beamcalc.core.models.base_beam import AnalysisCondition, Beam, Quantity

plt.style.use("seaborn-v0_8-whitegrid")

_LABELS = {
    Quantity.DEFLECTION: ("Deflection", "b"),
    Quantity.BENDING_MOMENT: ("Bending moment", "r"),
    Quantity.SHEAR_FORCE: ("Shear force", "g"),
}


class BeamDiagramPlotter:
    """
    Plot diagrams produced by :func:`~beamcalc.core.analysis.diagram.compute_diagram`.

    """

    def __init__(self, output_dir: Path = Path("outputs/figures")):
        """
        Initialize the plotter.

        Args:
            output_dir: Directory for saving figures
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.figsize = (10, 4)
        self.dpi = 150

    def plot_diagram(
        self,
        diagram: Diagram,
        ax: Optional[plt.Axes] = None,
        beam: Optional[Beam] = None,
    ) -> plt.Axes:
        """
        Draw a single diagram.

        Args:
            diagram: Sampled diagram
            ax: Axes to draw on (a new figure is created if omitted)
            beam: Beam, used to mark the interior support

        Returns:
            The axes drawn on
        """
        if ax is None:
            _, ax = plt.subplots(figsize=self.figsize)

        label, color = _LABELS[diagram.quantity]
        ax.plot(diagram.x, diagram.y, f"{color}o-", linewidth=2, markersize=4, label=label)
        ax.fill_between(diagram.x, diagram.y, 0, color=color, alpha=0.15)
        ax.axhline(y=0, color="k", linewidth=0.8)

        if beam is not None and diagram.condition is AnalysisCondition.TWO_SPAN_UNEQUAL:
            ax.axvline(x=beam.primary_span, color="grey", linestyle="--", linewidth=1)

        ax.set_xlabel("Position along beam [mm]", fontsize=11)
        ax.set_ylabel(label, fontsize=11)
        ax.set_title(f"{label} ({diagram.condition.value}, w = {diagram.load:g})", fontsize=12)
        ax.grid(True, alpha=0.3)
        return ax

    def plot_diagrams(
        self,
        diagrams: Sequence[Diagram],
        beam: Optional[Beam] = None,
        save: bool = True,
        filename: str = "beam_diagrams.png",
    ) -> plt.Figure:
        """
        Draw several diagrams stacked in one figure.

        Args:
            diagrams: Diagrams to draw, one subplot each
            beam: Beam, used to mark the interior support
            save: Whether to save the figure
            filename: Output filename

        Returns:
            Matplotlib figure
        """
        n = len(diagrams)
        if n == 0:
            raise ValueError("No diagrams to plot")

        fig, axes = plt.subplots(
            n, 1, figsize=(self.figsize[0], self.figsize[1] * n), sharex=True, squeeze=False
        )

        for ax, diagram in zip(axes[:, 0], diagrams):
            self.plot_diagram(diagram, ax=ax, beam=beam)

        plt.tight_layout()

        if save:
            fig.savefig(self.output_dir / filename, dpi=self.dpi, bbox_inches="tight")

        return fig
