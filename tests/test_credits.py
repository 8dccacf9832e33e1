"""
Unit tests for carbonix/credits.py
"""
import pytest

from carbonix.credits import (
    BulkOrder,
    CreditQuote,
    build_bulk_order,
    credits_for_tons,
    estimate_cost,
    quote_credit_purchase,
)
from carbonix.validators import ValidationError


class TestCreditDerivation:

    def test_one_credit_per_ton(self):
        assert credits_for_tons(0) == 0
        assert credits_for_tons(8450) == 8450

    def test_cost_uses_fixed_price_by_default(self):
        assert estimate_cost(500) == 50_000

    def test_cost_with_explicit_price(self):
        assert estimate_cost(300, 95) == 28_500


class TestQuoteCreditPurchase:

    def test_quote(self):
        quote = quote_credit_purchase(500)
        assert quote == CreditQuote(credits=500, unit_price=100, total_cost=50_000)

    def test_summary(self):
        assert quote_credit_purchase(500).summary == "Purchasing 500 carbon credits for ₹50,000"

    def test_to_dict(self):
        data = quote_credit_purchase(2000).to_dict()
        assert data["total_cost"] == 200_000
        assert data["summary"].endswith("₹2,00,000")


class TestBuildBulkOrder:

    def test_valid_order(self):
        order = build_bulk_order(2000, 95, "Mangrove")
        assert order == BulkOrder(
            credit_amount=2000, max_price=95.0, project_type="mangrove", max_budget=190_000.0,
        )

    def test_default_project_type(self):
        assert build_bulk_order(10, 100).project_type == "any"
        assert build_bulk_order(10, 100, None).project_type == "any"

    def test_summary(self):
        assert build_bulk_order(2000, 95).summary == (
            "Order for 2000 credits at ₹95 max per credit has been submitted"
        )

    @pytest.mark.parametrize("amount,price,missing", [
        (None, 95, ("credit_amount",)),
        (2000, None, ("max_price",)),
        (0, 0, ("credit_amount", "max_price")),
    ])
    def test_missing_fields(self, amount, price, missing):
        with pytest.raises(ValidationError) as exc_info:
            build_bulk_order(amount, price)
        assert exc_info.value.missing == missing
        assert "credit amount and max price" in exc_info.value.message

    def test_unknown_project_type(self):
        with pytest.raises(ValidationError) as exc_info:
            build_bulk_order(10, 100, "forest")
        assert exc_info.value.missing == ("project_type",)
