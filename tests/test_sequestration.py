"""
Unit tests for carbonix/sequestration.py
"""
import math

import pytest
from unittest.mock import patch

from carbonix.schemas import EcosystemInput
from carbonix.sequestration import (
    MISSING_FIELDS_MESSAGE,
    PredictionResult,
    predict_sequestration,
    recommended_ecosystem,
    soil_multiplier,
)
from carbonix.validators import ValidationError


@pytest.fixture
def sundarbans():
    return EcosystemInput(soil_type="alluvial", trees_count=12500, area_size=450, rainfall=1200)


class TestPredictSequestration:

    def test_returns_prediction_result(self, sundarbans):
        assert isinstance(predict_sequestration(sundarbans), PredictionResult)

    def test_alluvial_example(self, sundarbans):
        # (3125 + 1125 + 12) × 1.2 = 5114.4 → 5114
        result = predict_sequestration(sundarbans)
        assert result.co2_per_year == 5114
        assert result.credits_needed == math.ceil(result.co2_per_year * 0.1) == 512
        assert result.recommended_ecosystem == "Mangrove Restoration"

    def test_coastal_rainfall_bonus_is_capped(self):
        eco = EcosystemInput(soil_type="coastal", trees_count=1000, area_size=10, rainfall=3000)
        # (250 + 25 + 15) × 1.1 = 319
        result = predict_sequestration(eco)
        assert result.co2_per_year == 319
        assert result.credits_needed == 32
        assert result.recommended_ecosystem == "Seagrass Conservation"

    def test_other_soil_uses_neutral_multiplier(self):
        eco = EcosystemInput(soil_type="clayey", trees_count=400, area_size=4, rainfall=500)
        # 100 + 10 + 5 = 115
        result = predict_sequestration(eco)
        assert result.co2_per_year == 115
        assert result.credits_needed == 12
        assert result.recommended_ecosystem == "Mixed Coastal Ecosystem"

    def test_half_rounds_up(self):
        eco = EcosystemInput(soil_type="saline", trees_count=2, area_size=1, rainfall=150)
        # 0.5 + 2.5 + 1.5 = 4.5 → 5
        assert predict_sequestration(eco).co2_per_year == 5

    def test_idempotent(self, sundarbans):
        assert predict_sequestration(sundarbans) == predict_sequestration(sundarbans)

    def test_summary(self, sundarbans):
        assert predict_sequestration(sundarbans).summary == (
            "Predicted 5114 tons CO₂/year sequestration"
        )

    def test_camel_case_payload(self):
        eco = EcosystemInput.model_validate(
            {"soilType": "alluvial", "treesCount": 12500, "areaSize": 450, "rainfall": 1200}
        )
        assert predict_sequestration(eco).co2_per_year == 5114


class TestPredictSequestrationValidation:

    @pytest.mark.parametrize("field", ["soil_type", "trees_count", "area_size", "rainfall"])
    def test_each_missing_field_is_rejected(self, sundarbans, field):
        eco = sundarbans.model_copy(update={field: None})
        with pytest.raises(ValidationError) as exc_info:
            predict_sequestration(eco)
        assert exc_info.value.missing == (field,)
        assert str(exc_info.value) == MISSING_FIELDS_MESSAGE

    @pytest.mark.parametrize("field,value", [
        ("soil_type", ""),
        ("soil_type", "   "),
        ("trees_count", 0),
        ("area_size", 0.0),
        ("rainfall", 0),
    ])
    def test_blank_or_zero_counts_as_missing(self, sundarbans, field, value):
        eco = sundarbans.model_copy(update={field: value})
        with pytest.raises(ValidationError):
            predict_sequestration(eco)

    def test_all_missing_fields_listed_in_order(self):
        with pytest.raises(ValidationError) as exc_info:
            predict_sequestration(EcosystemInput())
        assert exc_info.value.missing == ("soil_type", "trees_count", "area_size", "rainfall")

    def test_nothing_computed_on_failure(self):
        with patch("carbonix.sequestration.soil_multiplier") as soil, \
             patch("carbonix.sequestration.round_half_up") as rounding:
            with pytest.raises(ValidationError):
                predict_sequestration(EcosystemInput(soil_type="alluvial"))
        soil.assert_not_called()
        rounding.assert_not_called()

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            predict_sequestration(EcosystemInput())


class TestSoilLookups:

    def test_multipliers(self):
        assert soil_multiplier("alluvial") == 1.2
        assert soil_multiplier("coastal") == 1.1
        assert soil_multiplier("clayey") == 1.0

    def test_ecosystems(self):
        assert recommended_ecosystem("alluvial") == "Mangrove Restoration"
        assert recommended_ecosystem("coastal") == "Seagrass Conservation"
        assert recommended_ecosystem("saline") == "Mixed Coastal Ecosystem"
