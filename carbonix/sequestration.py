"""
sequestration.py – Ecosystem CO₂ sequestration predictor for NGO projects.

Formula
───────
 base           = trees × 0.25
 area_bonus     = hectares × 2.5
 rainfall_bonus = min(rainfall_mm / 100, 15)
 soil_bonus     = 1.2 alluvial | 1.1 coastal | 1.0 otherwise

 co2_per_year   = round((base + area_bonus + rainfall_bonus) × soil_bonus)   tons
 credits_needed = ceil(co2_per_year × 0.1)

The recommended ecosystem follows the soil type: alluvial → Mangrove
Restoration, coastal → Seagrass Conservation, anything else → Mixed Coastal
Ecosystem.
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

from carbonix.calculations import round_half_up
from carbonix.constants import (
    CO2_PER_HECTARE_TONS,
    CO2_PER_TREE_TONS,
    DEFAULT_ECOSYSTEM,
    DEFAULT_SOIL_MULTIPLIER,
    ECOSYSTEM_BY_SOIL,
    RAINFALL_BONUS_CAP,
    RAINFALL_DIVISOR_MM,
    SEQUESTRATION_CREDIT_RATIO,
    SOIL_MULTIPLIERS,
)
from carbonix.schemas import EcosystemInput
from carbonix.validators import require

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all ecosystem prediction fields"


@dataclass(frozen=True)
class PredictionResult:
    co2_per_year: int             # tons CO₂ sequestered / year
    credits_needed: int
    recommended_ecosystem: str

    @property
    def summary(self) -> str:
        return f"Predicted {self.co2_per_year} tons CO₂/year sequestration"

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "summary": self.summary}


def soil_multiplier(soil_type: str) -> float:
    return SOIL_MULTIPLIERS.get(soil_type, DEFAULT_SOIL_MULTIPLIER)


def recommended_ecosystem(soil_type: str) -> str:
    return ECOSYSTEM_BY_SOIL.get(soil_type, DEFAULT_ECOSYSTEM)


def predict_sequestration(ecosystem: EcosystemInput) -> PredictionResult:
    """
    Predict annual sequestration, credits and ecosystem type for a site.

    Raises
    ------
    ValidationError
        If soil type, tree count, area or rainfall is missing (None, blank
        or zero).  Every missing field is listed; nothing is computed.
    """
    require(
        {
            "soil_type": ecosystem.soil_type,
            "trees_count": ecosystem.trees_count,
            "area_size": ecosystem.area_size,
            "rainfall": ecosystem.rainfall,
        },
        MISSING_FIELDS_MESSAGE,
    )

    base_co2 = ecosystem.trees_count * CO2_PER_TREE_TONS
    area_bonus = ecosystem.area_size * CO2_PER_HECTARE_TONS
    rainfall_bonus = min(ecosystem.rainfall / RAINFALL_DIVISOR_MM, RAINFALL_BONUS_CAP)
    soil_bonus = soil_multiplier(ecosystem.soil_type)

    co2_per_year = round_half_up((base_co2 + area_bonus + rainfall_bonus) * soil_bonus)
    credits = math.ceil(co2_per_year * SEQUESTRATION_CREDIT_RATIO)

    result = PredictionResult(
        co2_per_year=co2_per_year,
        credits_needed=credits,
        recommended_ecosystem=recommended_ecosystem(ecosystem.soil_type),
    )
    logger.debug(
        "Sequestration | (%.2f + %.2f + %.2f) × %.1f = %d t CO₂/yr → %d credits",
        base_co2, area_bonus, rainfall_bonus, soil_bonus, co2_per_year, credits,
    )
    return result
