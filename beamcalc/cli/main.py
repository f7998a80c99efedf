#!/usr/bin/env python3
"""
Beam diagram calculator.

Command line entry point. Loads a beam case from YAML, computes the
requested shear-force, bending-moment and deflection diagrams and prints
them as tables, optionally saving the plotted diagrams as PNG files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from beamcalc.core.analysis.diagram import Diagram, compute_diagram
from beamcalc.core.exceptions import BeamAnalysisError
from beamcalc.core.models.base_beam import AnalysisCondition, Beam, Quantity
from beamcalc.core.models.two_span_unequal import TwoSpanReactions
from beamcalc.core.utils.config import (
    analysis_options,
    beam_from_config,
    get_default_config,
    load_config,
    load_from_config,
)
from beamcalc.core.utils.logging_setup import setup_logging

console = Console()


def print_reactions(reactions: TwoSpanReactions) -> None:
    """Print the solved two-span support reactions."""
    table = Table(title="Support reactions", title_style="bold cyan")
    table.add_column("M1", justify="right")
    table.add_column("R1", justify="right")
    table.add_column("R2", justify="right")
    table.add_column("R3", justify="right")
    table.add_row(*(f"{v:.6g}" for v in (reactions.m1, reactions.r1, reactions.r2, reactions.r3)))
    console.print(table)


def print_diagram(diagram: Diagram) -> None:
    """Print one diagram as an x / side / value table."""
    table = Table(title=diagram.quantity.value, title_style="bold cyan")
    table.add_column("x [mm]", justify="right")
    table.add_column("span")
    table.add_column("value", justify="right")

    for point in diagram.points():
        table.add_row(
            f"{point['x']:.6g}",
            "primary" if point["is_primary_span"] else "secondary",
            f"{point['y']:.6g}",
        )
    console.print(table)


def _plot(diagrams: list[Diagram], beam: Beam, output_dir: Path) -> Path:
    import matplotlib.pyplot as plt

    from beamcalc.core.analysis.visualization import BeamDiagramPlotter

    plotter = BeamDiagramPlotter(output_dir=output_dir / "figures")
    filename = f"{diagrams[0].condition.value}_diagrams.png"
    fig = plotter.plot_diagrams(diagrams, beam=beam, filename=filename)
    plt.close(fig)
    return plotter.output_dir / filename


@click.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    default=None,
    help="Path to configuration file (built-in defaults if omitted).",
)
@click.option(
    "--condition",
    type=click.Choice([c.value for c in AnalysisCondition]),
    default=None,
    help="Support condition, overriding the config.",
)
@click.option(
    "--quantity",
    "-q",
    multiple=True,
    type=click.Choice([q.value for q in Quantity]),
    help="Diagram to compute. Can be specified multiple times.",
)
@click.option(
    "--segments",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of sampling segments, overriding the config.",
)
@click.option(
    "--plot",
    is_flag=True,
    default=False,
    help="Save the diagrams as a PNG figure.",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(),
    default=None,
    help="Directory for output files.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode with additional logging.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write every debug record to this file.",
)
def main(
    config: str | None,
    condition: str | None,
    quantity: tuple,
    segments: int | None,
    plot: bool,
    output_dir: str | None,
    verbose: bool,
    debug: bool,
    log_file: str | None,
):
    """
    Compute shear force, bending moment and deflection diagrams for a
    uniformly loaded beam, either simply supported or continuous over two
    unequal spans.
    """
    log_level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logger = setup_logging(log_level, Path(log_file) if log_file else None).getChild("cli")

    try:
        cfg = load_config(config) if config else get_default_config()

        if condition:
            cfg["analysis"]["condition"] = condition
        if quantity:
            cfg["analysis"]["quantities"] = list(quantity)
        if segments:
            cfg["analysis"]["segment_count"] = segments

        beam = beam_from_config(cfg)
        load = load_from_config(cfg)
        options = analysis_options(cfg)
        output_path = Path(output_dir or cfg.get("output_dir", "outputs"))

        console.print(
            f"[bold cyan]{options['condition'].value}[/bold cyan]  "
            f"L1 = {beam.primary_span:g} mm, L2 = {beam.secondary_span:g} mm, w = {load:g}"
        )

        if options["condition"] is AnalysisCondition.TWO_SPAN_UNEQUAL:
            print_reactions(TwoSpanReactions.solve(beam, load))

        diagrams = [
            compute_diagram(beam, load, options["condition"], q, options["segment_count"])
            for q in options["quantities"]
        ]
        for diagram in diagrams:
            print_diagram(diagram)

        if plot and diagrams:
            path = _plot(diagrams, beam, output_path)
            console.print(f"\n[bold green]Saved figure:[/bold green] {path}")

    except FileNotFoundError as e:
        console.print(f"\n[bold red]Configuration error:[/bold red] {e}")
        logger.exception("Configuration file not found")
        raise SystemExit(1) from e

    except BeamAnalysisError as e:
        console.print(f"\n[bold red]Analysis error:[/bold red] {e}")
        logger.debug("Analysis failed", exc_info=True)
        if debug:
            raise
        raise SystemExit(1) from e

    except Exception as e:
        console.print(f"\n[bold red]Unexpected error:[/bold red] {e}")
        logger.exception("Beam calculation failed with error")
        if debug:
            raise
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
