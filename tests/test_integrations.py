# This project was developed with assistance from AI tools.
"""Unit tests for the mock credit, income, and valuation providers."""

from datetime import UTC, date, datetime

import pytest

from underwriting.enums import (
    CreditCategory,
    PropertyType,
    ValuationConfidence,
    VerificationStatus,
)
from underwriting.schemas.integrations import (
    AVMRequest,
    CreditPullRequest,
    IncomeVerificationRequest,
)
from underwriting.services.integrations import (
    credit_rate_adjustment,
    get_property_valuation,
    income_stability_score,
    ltv_risk_level,
    simulate_credit_pull,
    validate_property_value,
    verify_income,
)
from underwriting.services.integrations.credit import score_category
from underwriting.services.integrations.income import last_pay_date

# 2026-03-16 is a Monday
NOW = datetime(2026, 3, 16, 15, 0, 0, tzinfo=UTC)


def _credit_request(ssn: str) -> CreditPullRequest:
    return CreditPullRequest(ssn=ssn, first_name="Sarah", last_name="Mitchell")


def _income_request(ssn: str, stated: float = 120000) -> IncomeVerificationRequest:
    return IncomeVerificationRequest(
        employer_name="Acme Logistics",
        job_title="Operations Manager",
        start_date=date(2019, 4, 1),
        stated_annual_income=stated,
        borrower_name="Sarah Mitchell",
        ssn=ssn,
    )


def _avm_request(**overrides) -> AVMRequest:
    fields = {"address": "742 Evergreen Ter", "city": "Austin", "state": "TX", "zip": "78701"}
    fields.update(overrides)
    return AVMRequest(**fields)


# ---------------------------------------------------------------------------
# Credit
# ---------------------------------------------------------------------------


class TestScoreCategory:
    @pytest.mark.parametrize(
        "ssn, category, base",
        [
            ("123-45-6780", CreditCategory.POOR, 550),
            ("123-45-6782", CreditCategory.POOR, 610),
            ("123-45-6784", CreditCategory.FAIR, 675),
            ("123-45-6785", CreditCategory.GOOD, 700),
            ("123-45-6786", CreditCategory.GOOD, 725),
            ("123-45-6789", CreditCategory.EXCELLENT, 810),
        ],
    )
    def test_last_digit(self, ssn, category, base):
        assert score_category(ssn) == (category, base)

    def test_non_digit_treated_as_zero(self):
        assert score_category("123-45-678X") == (CreditCategory.POOR, 550)


class TestSimulateCreditPull:
    def test_excellent_profile(self):
        report = simulate_credit_pull(_credit_request("123-45-6787"), now=NOW)
        assert [s.score for s in report.scores] == [745, 753, 752]
        assert [s.bureau for s in report.scores] == ["Equifax", "Experian", "TransUnion"]
        assert report.average_score == 750
        assert report.score_category == CreditCategory.EXCELLENT
        assert len(report.tradelines) == 4
        assert report.total_debt == 6700
        assert report.total_credit_limit == 45000
        assert report.utilization_rate == 4
        assert report.inquiries == 1
        assert report.collections == 0

    def test_poor_profile(self):
        report = simulate_credit_pull(_credit_request("123-45-6780"), now=NOW)
        assert report.average_score == 550
        assert report.tradelines[0].status == "Late30"
        assert report.total_debt == 27200
        assert report.utilization_rate == 65
        assert report.inquiries == 5
        assert report.public_records == 1
        assert report.collections == 1

    def test_stamped_with_pull_time(self):
        report = simulate_credit_pull(_credit_request("123-45-6785"), now=NOW)
        assert report.pull_date == NOW
        assert all(s.date == NOW.date() for s in report.scores)
        assert report.reference_number.startswith("CR-")

    def test_rate_adjustment_uses_pricing_table(self):
        assert credit_rate_adjustment(785) == -25
        assert credit_rate_adjustment(700) == 75
        assert credit_rate_adjustment(600) == 350


# ---------------------------------------------------------------------------
# Income
# ---------------------------------------------------------------------------


class TestVerifyIncome:
    def test_verified(self):
        result = verify_income(_income_request("123-45-6784"), now=NOW)
        assert result.employment.status == VerificationStatus.VERIFIED
        assert result.income.verified_annual == 120000
        assert result.income.variance == 0
        assert result.income.within_tolerance is True
        assert result.ytd_earnings == 30000
        assert result.last_pay_date == date(2026, 3, 13)
        assert result.pay_frequency == "Bi-Weekly"
        assert result.reference_number.startswith("IV-")

    def test_discrepancy_within_tolerance(self):
        result = verify_income(_income_request("123-45-6783", stated=100000), now=NOW)
        assert result.employment.status == VerificationStatus.DISCREPANCY_FOUND
        assert result.income.verified_annual == 95000
        assert result.income.variance == -5000
        assert result.income.variance_percent == -5
        assert result.income.within_tolerance is True
        assert "Stated income: $100,000" in result.notes
        assert "Verified income: $95,000" in result.notes
        assert result.notes[-1] == "Variance is within acceptable tolerance."

    def test_discrepancy_over_tolerance(self):
        result = verify_income(_income_request("123-45-6781", stated=40000), now=NOW)
        assert result.income.within_tolerance is False
        assert result.notes[-1].startswith("Variance exceeds tolerance")

    def test_unable_to_verify(self):
        result = verify_income(_income_request("123-45-6785"), now=NOW)
        assert result.success is False
        assert result.employment.status == VerificationStatus.UNABLE_TO_VERIFY
        assert result.employer.verified is False
        assert result.income.verified_annual == 0
        assert result.income.variance_percent == -100
        assert result.ytd_earnings is None
        assert result.last_pay_date is None


class TestLastPayDate:
    @pytest.mark.parametrize(
        "today, expected",
        [
            (date(2026, 3, 13), date(2026, 3, 13)),
            (date(2026, 3, 14), date(2026, 3, 13)),
            (date(2026, 3, 16), date(2026, 3, 13)),
            (date(2026, 3, 19), date(2026, 3, 13)),
        ],
    )
    def test_most_recent_friday(self, today, expected):
        assert last_pay_date(today) == expected


class TestIncomeStability:
    @pytest.mark.parametrize(
        "start, score, rating",
        [
            (date(2020, 1, 1), 100, "Excellent"),
            (date(2022, 6, 1), 85, "Good"),
            (date(2023, 9, 1), 70, "Satisfactory"),
            (date(2024, 6, 1), 55, "Fair"),
            (date(2025, 6, 1), 40, "Limited History"),
        ],
    )
    def test_tiers(self, start, score, rating):
        result = income_stability_score(start, today=date(2026, 1, 1))
        assert (result.score, result.rating) == (score, rating)


# ---------------------------------------------------------------------------
# Valuation
# ---------------------------------------------------------------------------


class TestPropertyValuation:
    def test_defaults_only(self):
        """1,800 sqft at the Texas rate, low confidence without details."""
        result = get_property_valuation(_avm_request(), now=NOW)
        assert result.valuation.estimated_value == 324000
        assert result.valuation.confidence == ValuationConfidence.LOW
        assert result.valuation.confidence_score == 70
        assert result.property_details.square_feet == 1800
        assert result.market_trends.inventory_level == "Normal"

    def test_detailed_request(self):
        """New 4-bed/3-bath California home gets every uplift and high confidence."""
        result = get_property_valuation(
            _avm_request(
                state="CA", square_feet=2000, bedrooms=4, bathrooms=3, year_built=2024
            ),
            now=NOW,
        )
        assert result.valuation.estimated_value == 1249000
        assert result.valuation.confidence == ValuationConfidence.HIGH
        assert result.valuation.low_range == 1187000
        assert result.valuation.high_range == 1311000
        assert result.market_trends.inventory_level == "Low"
        assert result.market_trends.median_days_on_market == 14

    def test_property_type_multiplier(self):
        result = get_property_valuation(_avm_request(property_type=PropertyType.CONDO), now=NOW)
        assert result.valuation.estimated_value == 275000

    def test_comparables_deterministic(self):
        """Same address -> same comparables."""
        first = get_property_valuation(_avm_request(), now=NOW)
        second = get_property_valuation(_avm_request(), now=NOW)
        assert first.comparables == second.comparables
        assert len(first.comparables) == 4

    def test_comparables_sorted_by_distance(self):
        comps = get_property_valuation(_avm_request(), now=NOW).comparables
        distances = [c.distance for c in comps]
        assert distances == sorted(distances)
        assert all(0.2 <= d <= 1.7 for d in distances)
        assert all(c.square_feet >= 1000 for c in comps)

    def test_purchase_price_note(self):
        result = get_property_valuation(_avm_request(purchase_price=400000), now=NOW)
        assert result.notes[0] == "Valuation based on 4 comparable sales within 2 miles."
        assert result.notes[1] == "Market activity indicates low confidence level."
        assert result.notes[2] == (
            "Estimated value is 19.0% below purchase price - may require review."
        )


class TestLtvRiskLevel:
    @pytest.mark.parametrize(
        "loan, expected",
        [
            (80000, "Low - No PMI required"),
            (85000, "Moderate - PMI required"),
            (92000, "Elevated - Higher PMI"),
            (96500, "High - Maximum conventional"),
            (98000, "Exceeds conventional limits"),
        ],
    )
    def test_levels(self, loan, expected):
        ltv, level = ltv_risk_level(loan, 100000)
        assert ltv == loan / 1000
        assert level == expected


class TestValidatePropertyValue:
    def test_low_appraisal(self):
        """Appraisal below price drives LTV over 97%."""
        check = validate_property_value(400000, 380000, 370000)
        assert check.valid is False
        assert check.usable_value == 380000
        assert check.ltv == 97.4
        assert check.notes[0] == "Appraised value ($380,000) is below purchase price ($400,000)."

    def test_clean(self):
        check = validate_property_value(400000, 420000, 320000)
        assert check.valid is True
        assert check.usable_value == 400000
        assert check.notes == []

    def test_pmi_note(self):
        check = validate_property_value(400000, 400000, 340000)
        assert check.valid is True
        assert check.notes == ["LTV exceeds 80% - Private Mortgage Insurance (PMI) required."]
