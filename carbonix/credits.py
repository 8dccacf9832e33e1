"""
credits.py – Credit requirement, cost estimate, and purchase order helpers.

Policy: 1 credit offsets 1 metric ton CO₂e and costs a fixed unit price
(100 currency units unless the caller passes another price).  There is no
market-rate lookup and no purchase timing.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from carbonix.constants import (
    BULK_ORDER_PROJECT_TYPES,
    DEFAULT_CREDIT_UNIT_PRICE,
    TONS_PER_CREDIT,
)
from carbonix.formatting import format_inr
from carbonix.validators import ValidationError, require

logger = logging.getLogger(__name__)


def credits_for_tons(total_tons: int) -> int:
    """Credits needed to offset *total_tons* (already rounded) of CO₂e."""
    return int(total_tons // TONS_PER_CREDIT)


def estimate_cost(credits: int, unit_price: float | None = None) -> float:
    """Return credits × unit price."""
    price = DEFAULT_CREDIT_UNIT_PRICE if unit_price is None else unit_price
    return credits * price


@dataclass(frozen=True)
class CreditQuote:
    credits: int
    unit_price: float
    total_cost: float

    @property
    def summary(self) -> str:
        return f"Purchasing {self.credits} carbon credits for {format_inr(self.total_cost)}"

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "summary": self.summary}


@dataclass(frozen=True)
class BulkOrder:
    credit_amount: int
    max_price: float
    project_type: str
    max_budget: float

    @property
    def summary(self) -> str:
        return (
            f"Order for {self.credit_amount} credits at {format_inr(self.max_price)} "
            "max per credit has been submitted"
        )

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "summary": self.summary}


def quote_credit_purchase(credits: int, unit_price: float | None = None) -> CreditQuote:
    """Price an immediate purchase of *credits* at the fixed unit price."""
    price = DEFAULT_CREDIT_UNIT_PRICE if unit_price is None else unit_price
    quote = CreditQuote(
        credits=credits,
        unit_price=price,
        total_cost=estimate_cost(credits, price),
    )
    logger.debug("Quote | %d credits × %.2f = %.2f", credits, price, quote.total_cost)
    return quote


def build_bulk_order(
    credit_amount: int | None,
    max_price: float | None,
    project_type: str | None = "any",
) -> BulkOrder:
    """
    Validate and assemble a bulk purchase order.

    Raises
    ------
    ValidationError
        If the credit amount or the max price is missing, or the project
        type is not one of mangrove, seagrass, marsh, any.
    """
    require(
        {"credit_amount": credit_amount, "max_price": max_price},
        "Please fill in credit amount and max price",
    )

    ptype = (project_type or "any").lower().strip()
    if ptype not in BULK_ORDER_PROJECT_TYPES:
        raise ValidationError(
            f"Unknown project type '{project_type}'. "
            f"Choose one of: {', '.join(sorted(BULK_ORDER_PROJECT_TYPES))}",
            ["project_type"],
        )

    order = BulkOrder(
        credit_amount=int(credit_amount),
        max_price=float(max_price),
        project_type=ptype,
        max_budget=int(credit_amount) * float(max_price),
    )
    logger.info(
        "Bulk order | %d credits, max %.2f/credit, project=%s",
        order.credit_amount, order.max_price, order.project_type,
    )
    return order
