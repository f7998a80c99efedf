"""FastAPI application serving beam diagrams to the frontend."""

from __future__ import annotations
