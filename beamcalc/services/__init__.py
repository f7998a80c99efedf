"""Services package – re-exports all public service functions."""

from __future__ import annotations

from beamcalc.services.analysis import evaluate_point, request_from_config, run_analysis

__all__ = ["evaluate_point", "request_from_config", "run_analysis"]
