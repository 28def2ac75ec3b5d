# This project was developed with assistance from AI tools.
"""Unit tests for the loan scenario comparison calculator."""

import pytest
from pydantic import ValidationError

from underwriting.schemas.calculator import LoanScenarioInput
from underwriting.services.amortization import monthly_principal_and_interest
from underwriting.services.calculator import (
    PRESETS,
    calculate_difference,
    calculate_loan_scenario,
    find_comparison_highlights,
    scenario_pmi,
)


def _scenario(**overrides) -> LoanScenarioInput:
    fields = {
        "label": "30-Year Fixed",
        "purchase_price": 400000,
        "down_payment": 80000,
        "interest_rate": 0.0675,
        "term_years": 30,
    }
    fields.update(overrides)
    return LoanScenarioInput(**fields)


# ---------------------------------------------------------------------------
# Single scenario
# ---------------------------------------------------------------------------


class TestCalculateLoanScenario:
    def test_twenty_percent_down(self):
        """20% down: no PMI, default tax and insurance."""
        result = calculate_loan_scenario(_scenario())
        assert result.loan_amount == 320000
        assert result.ltv_ratio == 80.0
        assert result.down_payment_percent == 20.0
        assert result.monthly_pmi == 0
        assert result.monthly_tax == 400.0
        assert result.monthly_insurance == 116.67
        assert result.monthly_pi == monthly_principal_and_interest(320000, 0.0675, 360)
        assert result.monthly_total == pytest.approx(result.monthly_pi + 400 + 116.67)

    def test_total_payments_without_pmi(self):
        result = calculate_loan_scenario(_scenario())
        expected = (result.monthly_pi + result.monthly_tax + result.monthly_insurance) * 360
        assert result.total_payments == pytest.approx(expected, abs=0.01)

    def test_five_percent_down_pmi_tier(self):
        """95% LTV falls in the 0.75% tier."""
        result = calculate_loan_scenario(_scenario(down_payment=20000))
        assert result.ltv_ratio == 95.0
        assert result.monthly_pmi == 237.5

    def test_pmi_paid_for_limited_months(self):
        """At 85% LTV PMI drops off after 400 months, capped at the 360-month term."""
        with_pmi = calculate_loan_scenario(_scenario(down_payment=60000))
        base = with_pmi.monthly_pi + with_pmi.monthly_tax + with_pmi.monthly_insurance
        assert with_pmi.total_payments == pytest.approx(
            base * 360 + with_pmi.monthly_pmi * 360, abs=0.01
        )

    def test_pmi_months_shorter_than_term(self):
        """At 81.2525% LTV PMI lasts ceil(1.2525 / 0.15 * 12) = 101 months."""
        result = calculate_loan_scenario(_scenario(down_payment=74990))
        base = result.monthly_pi + result.monthly_tax + result.monthly_insurance
        assert result.total_payments == pytest.approx(
            base * 360 + result.monthly_pmi * 101, abs=0.01
        )

    def test_explicit_tax_and_insurance(self):
        result = calculate_loan_scenario(
            _scenario(annual_property_tax=6000, annual_insurance=1800)
        )
        assert result.monthly_tax == 500.0
        assert result.monthly_insurance == 150.0

    def test_zero_rate(self):
        result = calculate_loan_scenario(_scenario(interest_rate=0))
        assert result.monthly_pi == pytest.approx(320000 / 360)
        assert result.total_interest == 0

    def test_all_cash(self):
        """No loan -> no P&I, no PMI."""
        result = calculate_loan_scenario(_scenario(down_payment=400000))
        assert result.loan_amount == 0
        assert result.monthly_pi == 0
        assert result.monthly_pmi == 0

    def test_down_payment_over_price_rejected(self):
        with pytest.raises(ValidationError):
            _scenario(down_payment=500000)

    def test_shorter_term_less_interest(self):
        thirty = calculate_loan_scenario(_scenario())
        fifteen = calculate_loan_scenario(_scenario(term_years=15, interest_rate=0.0625))
        assert fifteen.monthly_pi > thirty.monthly_pi
        assert fifteen.total_interest < thirty.total_interest


class TestScenarioPmi:
    @pytest.mark.parametrize(
        "ltv, expected",
        [(80, 0), (85, 125.0), (90, 125.0), (92, 187.5), (95, 187.5), (97, 237.5)],
    )
    def test_tiers(self, ltv, expected):
        assert scenario_pmi(300000, ltv) == expected


# ---------------------------------------------------------------------------
# Highlights
# ---------------------------------------------------------------------------


class TestHighlights:
    def test_lowest_of_each_metric(self):
        thirty = calculate_loan_scenario(_scenario())
        fifteen = calculate_loan_scenario(
            _scenario(label="15-Year Fixed", term_years=15, interest_rate=0.0625)
        )
        highlights = find_comparison_highlights([thirty, fifteen])
        assert highlights.lowest_monthly_pi == thirty.monthly_pi
        assert highlights.lowest_monthly_total == thirty.monthly_total
        assert highlights.lowest_total_interest == fifteen.total_interest
        assert highlights.lowest_total_cost == min(thirty.total_payments, fifteen.total_payments)

    def test_empty(self):
        highlights = find_comparison_highlights([])
        assert highlights.lowest_monthly_pi == 0
        assert highlights.lowest_total_cost == 0

    def test_difference(self):
        assert calculate_difference(2100.5, 2000) == 100.5
        assert calculate_difference(2000, 2000) == 0


class TestPresets:
    def test_preset_keys(self):
        assert set(PRESETS) == {"15vs30", "downPayment", "convVsFha"}

    def test_presets_have_two_scenarios(self):
        assert all(len(p["scenarios"]) == 2 for p in PRESETS.values())
