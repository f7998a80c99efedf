"""Pydantic schemas for API request / response validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from beamcalc.core.models.base_beam import AnalysisCondition, Quantity

# ── Request models ──────────────────────────────────────────────────────────


class BeamIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    primary_span: float = Field(default=4000.0, gt=0, alias="primarySpan")
    secondary_span: float = Field(default=6000.0, ge=0, alias="secondarySpan")


class MaterialIn(BaseModel):
    name: str = "GL24h"
    properties: dict[str, float] = Field(default_factory=lambda: {"EI": 2.0e12, "j2": 1.0})


class AnalysisRequestIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    beam: BeamIn = BeamIn()
    material: MaterialIn = MaterialIn()
    load: float = 5.0
    condition: AnalysisCondition = AnalysisCondition.TWO_SPAN_UNEQUAL
    quantities: list[Quantity] = Field(default_factory=lambda: list(Quantity), min_length=1)
    segment_count: int = Field(default=10, ge=1, le=10_000, alias="segmentCount")


class EvaluateIn(BaseModel):
    """Single-point evaluation of one diagram."""

    model_config = ConfigDict(populate_by_name=True)

    beam: BeamIn = BeamIn()
    material: MaterialIn = MaterialIn()
    load: float = 5.0
    condition: AnalysisCondition = AnalysisCondition.TWO_SPAN_UNEQUAL
    quantity: Quantity
    x: float
    is_primary_span: bool | None = Field(default=None, alias="isPrimarySpan")


# ── Response models ─────────────────────────────────────────────────────────


class HealthOut(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PointOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: float
    y: float
    is_primary_span: bool = Field(serialization_alias="isPrimarySpan")


class DiagramOut(BaseModel):
    quantity: Quantity
    extreme: float
    points: list[PointOut]


class ReactionsOut(BaseModel):
    """Two-span interior support moment and support reactions."""

    m1: float
    r1: float
    r2: float
    r3: float


class AnalysisOut(BaseModel):
    condition: AnalysisCondition
    load: float
    diagrams: list[DiagramOut]
    reactions: ReactionsOut | None = None


class EvaluationOut(BaseModel):
    condition: AnalysisCondition
    quantity: Quantity
    x: float
    y: float
