"""
Exception types raised by the beam analysis engine.
"""

from __future__ import annotations


class BeamAnalysisError(Exception):
    """Base class for all beam analysis errors."""


class UnsupportedConditionError(BeamAnalysisError, ValueError):
    """Raised when no analyzer is registered for a support condition."""

    def __init__(self, condition):
        self.condition = condition
        super().__init__(f"Unsupported analysis condition: {condition!r}")


class InvalidArgumentError(BeamAnalysisError, ValueError):
    """Raised for domain violations (position out of range, missing side, bad geometry)."""


class QuantityNotSupportedError(BeamAnalysisError, NotImplementedError):
    """Raised when an analyzer has no formula for the requested quantity."""

    def __init__(self, analyzer: str, quantity):
        self.analyzer = analyzer
        self.quantity = quantity
        super().__init__(f"{analyzer} does not implement {quantity}")
