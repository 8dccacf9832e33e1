"""
main.py – FastAPI API for the CARBONIX calculators.

Start:
    cd /path/to/carbonix
    uvicorn carbonix_api.main:app --reload --port 8000

Every endpoint is a stateless call into carbonix.service; nothing is stored
between requests.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from carbonix.config import get_config
from carbonix.schemas import (
    BulkOrderRequest,
    CreditQuoteRequest,
    EcosystemInput,
    EmissionsRequest,
)
from carbonix.service import (
    handle_bulk_order,
    handle_calculate,
    handle_factors,
    handle_predict,
    handle_quote,
)
from carbonix.validators import ValidationError

config = get_config()
config.configure_logging()
log = logging.getLogger(__name__)

app = FastAPI(
    title="CARBONIX – Carbon Credit Estimation API",
    version="1.0.0",
    description="Industry emission estimates, NGO sequestration predictions and credit pricing.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def missing_fields_handler(_request, exc: ValidationError):
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.post("/api/emissions/calculate", summary="Estimate annual industry emissions")
def calculate(body: EmissionsRequest):
    """
    Returns total_emissions (t CO₂/yr), credits_needed, estimated_cost,
    breakdown per category, and recommendations.
    """
    try:
        return handle_calculate(body, config)
    except Exception as exc:
        log.exception("[calculate] failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/sequestration/predict", summary="Predict ecosystem CO₂ sequestration")
def predict(body: EcosystemInput):
    """
    Returns co2_per_year, credits_needed and recommended_ecosystem.
    Responds 422 with the list of missing fields when the form is incomplete.
    """
    return handle_predict(body, config)


@app.post("/api/credits/quote", summary="Price an immediate credit purchase")
def quote(body: CreditQuoteRequest):
    return handle_quote(body, config)


@app.post("/api/credits/bulk-order", summary="Validate a bulk credit order")
def bulk_order(body: BulkOrderRequest):
    """Credit amount and max price are required; 422 otherwise."""
    return handle_bulk_order(body, config)


@app.get("/api/emission-factors", summary="Emission factor table")
def emission_factors():
    return handle_factors()


@app.get("/health")
def health():
    return {"status": "ok"}
