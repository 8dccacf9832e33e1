"""
emission_factors.py – Emission factor constants used by the carbon calculator.

All factors are in kg CO₂e per unit of activity.  The values are the
simplified factors shown on the industry dashboard and must not be tuned:
downstream reports compare against totals produced with exactly these numbers.

Unknown selections never raise; they fall back to a documented default so
that a half-filled form still produces a figure.  Keys match exactly, the
way the form submits them (``"Diesel"`` is not ``"diesel"``).
"""
from __future__ import annotations

# ─────────────────────────────────────────────────────────────
# Transport fuel (kg CO₂e / litre)
# ─────────────────────────────────────────────────────────────
FUEL_FACTORS: dict[str, float] = {
    "diesel": 2.68,
    "petrol": 2.31,
}

# Used for fuels offered by the form but not in the table (cng, electric).
DEFAULT_FUEL_FACTOR: float = 2.5


def get_fuel_factor(fuel_type: str | None) -> float:
    """Return kg CO₂e per litre for *fuel_type*, or the 2.5 fallback."""
    return FUEL_FACTORS.get(fuel_type or "", DEFAULT_FUEL_FACTOR)


# ─────────────────────────────────────────────────────────────
# Purchased energy
# ─────────────────────────────────────────────────────────────
ELECTRICITY_FACTOR: float = 0.85     # kg CO₂e / kWh
NATURAL_GAS_FACTOR: float = 2.03     # kg CO₂e / m³


# ─────────────────────────────────────────────────────────────
# Shipping (kg CO₂e / km)
# ─────────────────────────────────────────────────────────────
SHIPPING_MODE_FACTORS: dict[str, float] = {
    "truck": 0.10,
    "ship":  0.03,
    "air":   0.50,
}

# rail and anything else
DEFAULT_SHIPPING_FACTOR: float = 0.1


def get_shipping_factor(mode: str | None) -> float:
    """Return kg CO₂e per km for the given shipping mode."""
    return SHIPPING_MODE_FACTORS.get(mode or "", DEFAULT_SHIPPING_FACTOR)


# ─────────────────────────────────────────────────────────────
# Flat activity factors
# ─────────────────────────────────────────────────────────────
COMMUTE_FACTOR: float = 0.2              # kg CO₂e / commute unit / working day
RAW_MATERIAL_FACTOR: float = 0.5         # kg CO₂e / ton of raw material
WASTE_FACTOR: float = 0.3                # kg CO₂e / ton of waste
FACILITY_FACTOR: float = 0.05            # kg CO₂e / sq ft / year
EMPLOYEE_FACTOR: float = 4.0             # kg CO₂e / employee / year
PACKAGING_FACTOR: float = 0.8            # kg CO₂e / kg of packaging


def factor_table() -> dict[str, dict[str, float] | float]:
    """Return a JSON-serialisable snapshot of every factor above."""
    return {
        "fuel": {**FUEL_FACTORS, "default": DEFAULT_FUEL_FACTOR},
        "electricity": ELECTRICITY_FACTOR,
        "natural_gas": NATURAL_GAS_FACTOR,
        "shipping": {**SHIPPING_MODE_FACTORS, "default": DEFAULT_SHIPPING_FACTOR},
        "commute": COMMUTE_FACTOR,
        "raw_materials": RAW_MATERIAL_FACTOR,
        "waste": WASTE_FACTOR,
        "facility": FACILITY_FACTOR,
        "employee": EMPLOYEE_FACTOR,
        "packaging": PACKAGING_FACTOR,
    }
