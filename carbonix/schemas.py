"""
schemas.py – Pydantic models for the calculator and predictor inputs.

Every model is frozen: a calculation receives a snapshot of the form and
cannot change it.  Numeric fields default to 0; a categorical selection that
was never made is None (an empty string is treated the same way).

Field names are snake_case; camelCase aliases (``fuelConsumption``) are
accepted as well so dashboard payloads can be posted unchanged.
NaN and infinity are rejected so every accepted value yields a figure.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _FormInput(BaseModel):
    """Base config shared by all input snapshots."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


# ─────────────────────────────────────────────────────────────
# Industry calculator categories
# ─────────────────────────────────────────────────────────────

class TransportInput(_FormInput):
    """Fleet fuel and employee commuting."""

    fuel_type: Optional[str] = Field(None, description="diesel, petrol, cng or electric")
    fuel_consumption: float = Field(0.0, description="Fuel used per vehicle, litres/month")
    vehicle_count: float = Field(0.0, description="Number of fleet vehicles")
    employee_commute: float = Field(0.0, description="Employee commute, person-km/month")


class ManufacturingInput(_FormInput):
    """Process energy, raw materials and waste."""

    process_type: Optional[str] = Field(None, description="Process label; does not affect the figures")
    energy_consumption: float = Field(0.0, description="Process energy, kWh/month")
    raw_materials: float = Field(0.0, description="Raw materials, tons/month")
    waste_generated: float = Field(0.0, description="Waste generated, tons/month")


class OperationsInput(_FormInput):
    """Facility energy and headcount."""

    electricity_usage: float = Field(0.0, description="Electricity, kWh/month")
    natural_gas_usage: float = Field(0.0, description="Natural gas, m³/month")
    facility_size: float = Field(0.0, description="Facility floor area, sq ft")
    employee_count: float = Field(0.0, description="Number of employees")


class LogisticsInput(_FormInput):
    """Outbound shipping and packaging."""

    shipping_mode: Optional[str] = Field(None, description="truck, ship, air or rail")
    shipping_distance: float = Field(0.0, description="Shipping distance, km/month")
    packaging_type: Optional[str] = Field(None, description="Packaging label; does not affect the figures")
    packaging_materials: float = Field(0.0, description="Packaging materials, kg/month")


class EmissionsRequest(_FormInput):
    """All four calculator tabs in one payload."""

    transport: TransportInput = Field(default_factory=TransportInput)
    manufacturing: ManufacturingInput = Field(default_factory=ManufacturingInput)
    operations: OperationsInput = Field(default_factory=OperationsInput)
    logistics: LogisticsInput = Field(default_factory=LogisticsInput)


# ─────────────────────────────────────────────────────────────
# NGO ecosystem predictor
# ─────────────────────────────────────────────────────────────

class EcosystemInput(_FormInput):
    """
    Site description for the sequestration predictor.

    All four fields are required by the predictor; they are optional here so
    that an incomplete form reaches it and is reported as a whole.
    """

    soil_type: Optional[str] = Field(None, description="alluvial, coastal, clayey or saline")
    trees_count: Optional[float] = Field(None, description="Number of trees")
    area_size: Optional[float] = Field(None, description="Site area in hectares")
    rainfall: Optional[float] = Field(None, description="Annual rainfall in mm")


# ─────────────────────────────────────────────────────────────
# Credit purchase
# ─────────────────────────────────────────────────────────────

class CreditQuoteRequest(_FormInput):
    credits: int = Field(0, ge=0, description="Number of credits to buy")


class BulkOrderRequest(_FormInput):
    credit_amount: Optional[int] = Field(None, description="Number of credits in the order")
    max_price: Optional[float] = Field(None, description="Highest acceptable price per credit")
    project_type: str = Field("any", description="mangrove, seagrass, marsh or any")
