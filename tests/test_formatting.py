"""
Unit tests for carbonix/formatting.py
"""
import json

import pytest

from carbonix.calculations import calculate_emissions
from carbonix.formatting import build_report, format_inr, write_report
from carbonix.schemas import EcosystemInput, TransportInput
from carbonix.sequestration import predict_sequestration


class TestFormatInr:

    @pytest.mark.parametrize("amount,expected", [
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (50000, "₹50,000"),
        (185000, "₹1,85,000"),
        (4520000, "₹45,20,000"),
        (12345678, "₹1,23,45,678"),
        (99.5, "₹100"),
        (99.4, "₹99"),
        (-1500.5, "-₹1,501"),
    ])
    def test_format(self, amount, expected):
        assert format_inr(amount) == expected


class TestReports:

    def test_build_emissions_report(self):
        result = calculate_emissions(transport=TransportInput(employee_commute=20000))
        report = build_report("emissions", result)
        assert report["kind"] == "emissions"
        assert report["currency"] == "INR"
        assert report["result"]["total_emissions"] == 1000
        assert "generated_at" in report

    def test_write_report_creates_parents(self, tmp_path):
        result = predict_sequestration(
            EcosystemInput(soil_type="alluvial", trees_count=12500, area_size=450, rainfall=1200)
        )
        path = write_report(tmp_path / "nested" / "report.json", build_report("sequestration", result))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["result"]["co2_per_year"] == 5114
        assert data["result"]["recommended_ecosystem"] == "Mangrove Restoration"
