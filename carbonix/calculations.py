"""
calculations.py – Industry emission calculation engine.

Each ``calc_*`` function reduces one calculator tab to annual kg CO₂e.
``calculate_emissions`` combines the four, converts to tons, derives the
credits and cost, and attaches the advisories.  Nothing here keeps state:
the same inputs always give the same CalculationResult.

Emission formula references
────────────────────────────
 Category       Formula (kg CO₂e / year)
 ─────────────────────────────────────────────────────────────────────────
 Transport      fuel_L × fuel_factor × vehicles × 12     (fuel type + litres set)
                + commute × 250 × 0.2
 Manufacturing  kWh × 0.85 × 12 + raw_tons × 0.5 + waste_tons × 0.3
 Operations     kWh × 0.85 × 12 + gas_m3 × 2.03 × 12
                + sq_ft × 0.05 + employees × 4
 Logistics      km × mode_factor × 12                    (mode + distance set)
                + packaging_kg × 0.8

Breakdown vs. total
────────────────────
The headline total is round(sum of the four functions above / 1000).  The
per-category breakdown is produced by flat-rate formulas that always use the
2.5 fuel factor and the 0.1 shipping factor, each rounded on its own, so the
breakdown can differ from the total.  Both figures are reported unchanged.

Usage
──────
    from carbonix.calculations import calculate_emissions
    from carbonix.schemas import TransportInput

    result = calculate_emissions(
        transport=TransportInput(fuel_type="diesel", fuel_consumption=5000, vehicle_count=50),
    )
    result.total_emissions, result.credits_needed, result.recommendations
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any

from carbonix.constants import (
    KG_PER_TON,
    MONTHS_PER_YEAR,
    WORKING_DAYS_PER_YEAR,
)
from carbonix.credits import credits_for_tons, estimate_cost
from carbonix.emission_factors import (
    COMMUTE_FACTOR,
    DEFAULT_FUEL_FACTOR,
    DEFAULT_SHIPPING_FACTOR,
    ELECTRICITY_FACTOR,
    EMPLOYEE_FACTOR,
    FACILITY_FACTOR,
    NATURAL_GAS_FACTOR,
    PACKAGING_FACTOR,
    RAW_MATERIAL_FACTOR,
    WASTE_FACTOR,
    get_fuel_factor,
    get_shipping_factor,
)
from carbonix.recommendations import recommend_actions
from carbonix.schemas import (
    EmissionsRequest,
    LogisticsInput,
    ManufacturingInput,
    OperationsInput,
    TransportInput,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves go up (2.5 → 3, -2.5 → -2)."""
    return int(math.floor(value + 0.5))


# ─────────────────────────────────────────────────────────────────────────────
# Result dataclasses
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EmissionBreakdown:
    """Per-category tons CO₂e / year, each rounded independently."""
    transport: int = 0
    manufacturing: int = 0
    operations: int = 0
    logistics: int = 0

    @property
    def total(self) -> int:
        return self.transport + self.manufacturing + self.operations + self.logistics


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one calculator run."""
    total_emissions: int          # tons CO₂e / year
    credits_needed: int
    estimated_cost: float
    breakdown: EmissionBreakdown
    recommendations: list[str] = field(default_factory=list)
    total_kg_co2e: float = 0.0    # unrounded sum of the category functions

    @property
    def summary(self) -> str:
        return (
            f"Total emissions: {self.total_emissions} tons CO₂. "
            f"Credits needed: {self.credits_needed} (1 metric ton CO₂ = 1 credit)"
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["breakdown"]["total"] = self.breakdown.total
        data["summary"] = self.summary
        return data


# ─────────────────────────────────────────────────────────────────────────────
# 1. Transport
# Formula: fuel_L × fuel_factor × vehicles × 12 + commute × 250 × 0.2
# ─────────────────────────────────────────────────────────────────────────────

def calc_transport_emissions(transport: TransportInput) -> float:
    """
    Annual kg CO₂e for fleet fuel plus employee commuting.

    The fuel term needs both a fuel type and a non-zero consumption; without
    either it contributes nothing.  Unknown fuel types use the 2.5 fallback.
    """
    fuel_kg = 0.0
    if transport.fuel_type and transport.fuel_consumption:
        factor = get_fuel_factor(transport.fuel_type)
        fuel_kg = (
            transport.fuel_consumption * factor * transport.vehicle_count * MONTHS_PER_YEAR
        )
        logger.debug(
            "Transport fuel | %s %.2f L × %.2f × %g vehicles × 12 = %.2f kg CO₂e",
            transport.fuel_type, transport.fuel_consumption, factor,
            transport.vehicle_count, fuel_kg,
        )

    commute_kg = transport.employee_commute * WORKING_DAYS_PER_YEAR * COMMUTE_FACTOR
    return fuel_kg + commute_kg


# ─────────────────────────────────────────────────────────────────────────────
# 2. Manufacturing
# Formula: kWh × 0.85 × 12 + raw_tons × 0.5 + waste_tons × 0.3
# ─────────────────────────────────────────────────────────────────────────────

def calc_manufacturing_emissions(manufacturing: ManufacturingInput) -> float:
    """Annual kg CO₂e for process energy, raw materials and waste."""
    return (
        manufacturing.energy_consumption * ELECTRICITY_FACTOR * MONTHS_PER_YEAR
        + manufacturing.raw_materials * RAW_MATERIAL_FACTOR
        + manufacturing.waste_generated * WASTE_FACTOR
    )


# ─────────────────────────────────────────────────────────────────────────────
# 3. Operations
# Formula: kWh × 0.85 × 12 + gas_m3 × 2.03 × 12 + sq_ft × 0.05 + employees × 4
# ─────────────────────────────────────────────────────────────────────────────

def calc_operations_emissions(operations: OperationsInput) -> float:
    """Annual kg CO₂e for facility electricity, gas, floor area and staff."""
    return (
        operations.electricity_usage * ELECTRICITY_FACTOR * MONTHS_PER_YEAR
        + operations.natural_gas_usage * NATURAL_GAS_FACTOR * MONTHS_PER_YEAR
        + operations.facility_size * FACILITY_FACTOR
        + operations.employee_count * EMPLOYEE_FACTOR
    )


# ─────────────────────────────────────────────────────────────────────────────
# 4. Logistics
# Formula: km × mode_factor × 12 + packaging_kg × 0.8
# ─────────────────────────────────────────────────────────────────────────────

def calc_logistics_emissions(logistics: LogisticsInput) -> float:
    """
    Annual kg CO₂e for shipping and packaging.

    The shipping term needs both a mode and a non-zero distance.  Unknown
    modes (rail included) use the 0.1 fallback.
    """
    shipping_kg = 0.0
    if logistics.shipping_mode and logistics.shipping_distance:
        factor = get_shipping_factor(logistics.shipping_mode)
        shipping_kg = logistics.shipping_distance * factor * MONTHS_PER_YEAR
        logger.debug(
            "Shipping | %s %.2f km × %.2f × 12 = %.2f kg CO₂e",
            logistics.shipping_mode, logistics.shipping_distance, factor, shipping_kg,
        )

    return shipping_kg + logistics.packaging_materials * PACKAGING_FACTOR


# ─────────────────────────────────────────────────────────────────────────────
# Breakdown (flat-rate, rounded per category)
# ─────────────────────────────────────────────────────────────────────────────

def calc_breakdown(
    transport: TransportInput,
    manufacturing: ManufacturingInput,
    operations: OperationsInput,
    logistics: LogisticsInput,
) -> EmissionBreakdown:
    """Per-category tons for display; see the module docstring."""
    transport_kg = (
        transport.fuel_consumption * DEFAULT_FUEL_FACTOR * transport.vehicle_count * MONTHS_PER_YEAR
        + transport.employee_commute * WORKING_DAYS_PER_YEAR * COMMUTE_FACTOR
    )
    logistics_kg = (
        logistics.shipping_distance * DEFAULT_SHIPPING_FACTOR * MONTHS_PER_YEAR
        + logistics.packaging_materials * PACKAGING_FACTOR
    )
    return EmissionBreakdown(
        transport=round_half_up(transport_kg / KG_PER_TON),
        manufacturing=round_half_up(calc_manufacturing_emissions(manufacturing) / KG_PER_TON),
        operations=round_half_up(calc_operations_emissions(operations) / KG_PER_TON),
        logistics=round_half_up(logistics_kg / KG_PER_TON),
    )


def calc_total_emissions(category_kg: list[float]) -> int:
    """Sum category kg CO₂e and return whole tons, rounded once."""
    return round_half_up(sum(category_kg) / KG_PER_TON)


# ─────────────────────────────────────────────────────────────────────────────
# Orchestrator
# ─────────────────────────────────────────────────────────────────────────────

def calculate_emissions(
    transport: TransportInput | None = None,
    manufacturing: ManufacturingInput | None = None,
    operations: OperationsInput | None = None,
    logistics: LogisticsInput | None = None,
    *,
    unit_price: float | None = None,
) -> CalculationResult:
    """
    Run the full calculator on one snapshot of the four tabs.

    Parameters
    ──────────
    transport, manufacturing, operations, logistics :
        Category inputs.  A tab that is omitted counts as all zeros.
    unit_price :
        Price per credit used for the cost estimate.  Defaults to the
        fixed marketplace price.

    Returns
    ───────
    A new CalculationResult.  Never raises for unknown selections.
    """
    transport = transport or TransportInput()
    manufacturing = manufacturing or ManufacturingInput()
    operations = operations or OperationsInput()
    logistics = logistics or LogisticsInput()

    category_kg = [
        calc_transport_emissions(transport),
        calc_manufacturing_emissions(manufacturing),
        calc_operations_emissions(operations),
        calc_logistics_emissions(logistics),
    ]
    total_kg = sum(category_kg)
    total_tons = calc_total_emissions(category_kg)
    credits = credits_for_tons(total_tons)

    result = CalculationResult(
        total_emissions=total_tons,
        credits_needed=credits,
        estimated_cost=estimate_cost(credits, unit_price),
        breakdown=calc_breakdown(transport, manufacturing, operations, logistics),
        recommendations=recommend_actions(transport, manufacturing, operations, logistics),
        total_kg_co2e=total_kg,
    )
    logger.info(
        "Calculated %.2f kg CO₂e → %d t, %d credits, %d recommendation(s)",
        total_kg, total_tons, credits, len(result.recommendations),
    )
    return result


def calculate_from_request(request: EmissionsRequest, *, unit_price: float | None = None) -> CalculationResult:
    """Convenience wrapper for the combined API/CLI payload."""
    return calculate_emissions(
        request.transport,
        request.manufacturing,
        request.operations,
        request.logistics,
        unit_price=unit_price,
    )
