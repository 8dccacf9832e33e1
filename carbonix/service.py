"""
service.py – Callable request handlers shared by the HTTP API and the CLI.

Each handler takes a validated request model plus the runtime Config and
returns a JSON-ready dict.  ValidationError propagates to the caller, which
decides how to present it (HTTP 422, CLI exit code 1).
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from carbonix.calculations import calculate_from_request
from carbonix.config import Config
from carbonix.constants import REPORT_KIND_EMISSIONS, REPORT_KIND_SEQUESTRATION
from carbonix.credits import build_bulk_order, quote_credit_purchase
from carbonix.emission_factors import factor_table
from carbonix.formatting import build_report, format_inr, write_report
from carbonix.schemas import (
    BulkOrderRequest,
    CreditQuoteRequest,
    EcosystemInput,
    EmissionsRequest,
)
from carbonix.sequestration import predict_sequestration

log = logging.getLogger(__name__)


def handle_calculate(
    request: EmissionsRequest,
    config: Config,
    export_path: Path | None = None,
) -> dict[str, Any]:
    """
    Run the industry calculator.  Returns the result dict with a formatted
    cost; when *export_path* is given the JSON report is written there too.
    """
    result = calculate_from_request(request, unit_price=config.credit_unit_price)
    log.info("[calculate] %s", result.summary)

    payload = result.to_dict()
    payload["estimated_cost_display"] = format_inr(result.estimated_cost)
    payload["currency"] = config.currency

    if export_path is not None:
        write_report(export_path, build_report(REPORT_KIND_EMISSIONS, result, config.currency))
        log.info("[calculate] report saved → %s", export_path)
    return payload


def handle_predict(
    ecosystem: EcosystemInput,
    config: Config,
    export_path: Path | None = None,
) -> dict[str, Any]:
    """Run the sequestration predictor.  Raises ValidationError on missing fields."""
    try:
        result = predict_sequestration(ecosystem)
    except ValueError as exc:
        log.warning("[predict] rejected: %s", exc)
        raise
    log.info("[predict] %s", result.summary)

    if export_path is not None:
        write_report(export_path, build_report(REPORT_KIND_SEQUESTRATION, result, config.currency))
        log.info("[predict] report saved → %s", export_path)
    return result.to_dict()


def handle_quote(request: CreditQuoteRequest, config: Config) -> dict[str, Any]:
    quote = quote_credit_purchase(request.credits, config.credit_unit_price)
    log.info("[quote] %s", quote.summary)
    return quote.to_dict()


def handle_bulk_order(request: BulkOrderRequest, config: Config) -> dict[str, Any]:
    """Validate a bulk order.  Raises ValidationError on missing amount/price."""
    order = build_bulk_order(request.credit_amount, request.max_price, request.project_type)
    log.info("[bulk-order] %s", order.summary)
    return {**order.to_dict(), "currency": config.currency}


def handle_factors() -> dict[str, Any]:
    return factor_table()
