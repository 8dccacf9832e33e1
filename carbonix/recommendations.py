"""
recommendations.py – Threshold-based reduction advisories.

Each rule looks at the raw monthly form values (not the computed totals) and,
when its predicate holds, contributes one fixed advisory.  Rules are
independent: any subset may fire, and the output always follows the order
of ``RULES`` below.

Rules
-----
1. Fleet transition   – transport fuel consumption above 1,000 L/month.
2. Renewable energy   – operations electricity above 10,000 kWh/month.
3. Waste optimisation – manufacturing waste above 100 tons/month.
4. Shipping mode      – logistics shipped by air.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from carbonix.constants import (
    ADVICE_FLEET_TRANSITION,
    ADVICE_RENEWABLE_ENERGY,
    ADVICE_SHIPPING_MODE,
    ADVICE_WASTE_OPTIMISATION,
    AIR_SHIPPING_MODE,
    FLEET_FUEL_THRESHOLD_LITERS,
    RENEWABLE_ELECTRICITY_THRESHOLD_KWH,
    WASTE_THRESHOLD_TONS,
)
from carbonix.schemas import (
    LogisticsInput,
    ManufacturingInput,
    OperationsInput,
    TransportInput,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryInputs:
    transport: TransportInput
    manufacturing: ManufacturingInput
    operations: OperationsInput
    logistics: LogisticsInput


@dataclass(frozen=True)
class RecommendationRule:
    name: str
    applies: Callable[[CategoryInputs], bool]
    text: str


RULES: list[RecommendationRule] = [
    RecommendationRule(
        name="fleet_transition",
        applies=lambda i: i.transport.fuel_consumption > FLEET_FUEL_THRESHOLD_LITERS,
        text=ADVICE_FLEET_TRANSITION,
    ),
    RecommendationRule(
        name="renewable_energy",
        applies=lambda i: i.operations.electricity_usage > RENEWABLE_ELECTRICITY_THRESHOLD_KWH,
        text=ADVICE_RENEWABLE_ENERGY,
    ),
    RecommendationRule(
        name="waste_optimisation",
        applies=lambda i: i.manufacturing.waste_generated > WASTE_THRESHOLD_TONS,
        text=ADVICE_WASTE_OPTIMISATION,
    ),
    RecommendationRule(
        name="shipping_mode",
        applies=lambda i: i.logistics.shipping_mode == AIR_SHIPPING_MODE,
        text=ADVICE_SHIPPING_MODE,
    ),
]


def recommend_actions(
    transport: TransportInput,
    manufacturing: ManufacturingInput,
    operations: OperationsInput,
    logistics: LogisticsInput,
) -> list[str]:
    """Evaluate every rule in order and return the advisories that fired."""
    inputs = CategoryInputs(transport, manufacturing, operations, logistics)
    fired = [rule for rule in RULES if rule.applies(inputs)]
    if fired:
        logger.debug("Recommendation rules fired: %s", ", ".join(r.name for r in fired))
    return [rule.text for rule in fired]
