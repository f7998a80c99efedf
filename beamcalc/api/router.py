"""API route handlers.

All endpoints are gathered in a single router so they can be included
into the FastAPI application in ``app.py``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from beamcalc.core.exceptions import (
    InvalidArgumentError,
    QuantityNotSupportedError,
    UnsupportedConditionError,
)
from beamcalc.schemas import (
    AnalysisOut,
    AnalysisRequestIn,
    EvaluateIn,
    EvaluationOut,
    HealthOut,
)
from beamcalc.services import evaluate_point, run_analysis

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_http_error(exc: Exception) -> HTTPException:
    """Map engine errors onto HTTP status codes."""
    if isinstance(exc, UnsupportedConditionError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, QuantityNotSupportedError):
        return HTTPException(status_code=501, detail=str(exc))
    return HTTPException(status_code=422, detail=str(exc))


# ── Routes ─────────────────────────────────────────────────────────────────


@router.get("/health", response_model=HealthOut, include_in_schema=False)
async def health_check() -> HealthOut:
    """Liveness probe (suppressed from access log via log filter)."""
    return HealthOut()


@router.get("/config", response_model=AnalysisRequestIn)
async def get_config(request: Request) -> AnalysisRequestIn:
    """Return the default analysis request."""
    return request.app.state.analysis_config


@router.post("/config", response_model=AnalysisRequestIn)
async def set_config(request: Request, cfg: AnalysisRequestIn) -> AnalysisRequestIn:
    """Replace the default analysis request."""
    request.app.state.analysis_config = cfg
    return cfg


@router.post("/analyze", response_model=AnalysisOut)
async def analyze(request: Request, cfg: AnalysisRequestIn | None = None) -> JSONResponse:
    """Compute the requested diagrams.

    Without a body the stored default request is analysed. Returns camelCase
    JSON so the frontend receives consistent key names.
    """
    cfg = cfg or request.app.state.analysis_config
    try:
        result = run_analysis(cfg)
    except (InvalidArgumentError, UnsupportedConditionError, QuantityNotSupportedError) as exc:
        logger.warning("Analysis rejected: %s", exc)
        raise _to_http_error(exc) from exc
    return JSONResponse(content=result.model_dump(mode="json", by_alias=True))


@router.post("/evaluate", response_model=EvaluationOut)
async def evaluate(body: EvaluateIn) -> EvaluationOut:
    """Evaluate one diagram at a single position."""
    try:
        return evaluate_point(body)
    except (InvalidArgumentError, UnsupportedConditionError, QuantityNotSupportedError) as exc:
        logger.warning("Evaluation rejected: %s", exc)
        raise _to_http_error(exc) from exc
