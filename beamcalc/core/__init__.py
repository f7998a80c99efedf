"""Calculation engine: analyzers, registry, sampler and shared utilities."""

from __future__ import annotations
