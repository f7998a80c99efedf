"""Configuration and logging helpers."""

from __future__ import annotations
