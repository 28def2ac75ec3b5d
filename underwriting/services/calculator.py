# This project was developed with assistance from AI tools.
"""Loan scenario comparison calculator.

Pure math, no I/O. Backs the side-by-side comparison tool: each scenario is
a purchase price, down payment, rate, and term; results include full PITI
and lifetime totals so borrowers can compare e.g. 15 vs 30 years.
"""

import math

from ..schemas.calculator import ComparisonHighlights, LoanCalculationResult, LoanScenarioInput
from .amortization import monthly_principal_and_interest, round_half_up, total_interest_over_term

_DEFAULT_TAX_PCT = 0.012
_DEFAULT_INSURANCE_PCT = 0.0035

# LTV points paid down per year, used to estimate how long PMI stays on
_LTV_PAYDOWN_PER_YEAR = 0.15

PRESETS: dict[str, dict] = {
    "15vs30": {
        "name": "15yr vs 30yr",
        "description": "Compare different loan terms",
        "scenarios": [
            {"label": "30-Year Fixed", "term_years": 30, "interest_rate": 0.0675},
            {"label": "15-Year Fixed", "term_years": 15, "interest_rate": 0.0625},
        ],
    },
    "downPayment": {
        "name": "5% vs 20% Down",
        "description": "Compare PMI impact",
        "scenarios": [
            {"label": "5% Down", "down_payment_percent": 5},
            {"label": "20% Down", "down_payment_percent": 20},
        ],
    },
    "convVsFha": {
        "name": "Conv vs FHA",
        "description": "Compare loan types",
        "scenarios": [
            {"label": "Conventional", "interest_rate": 0.0675},
            {"label": "FHA", "interest_rate": 0.065},
        ],
    },
}


def scenario_pmi(loan_amount: float, ltv: float) -> float:
    """Tiered PMI estimate for the comparison tool (0.5% / 0.75% / 0.95% annual)."""
    if ltv <= 80:
        return 0.0
    annual_rate = 0.005
    if ltv > 95:
        annual_rate = 0.0095
    elif ltv > 90:
        annual_rate = 0.0075
    return round_half_up(loan_amount * annual_rate / 12, 2)


def calculate_loan_scenario(scenario: LoanScenarioInput) -> LoanCalculationResult:
    """Compute monthly and lifetime costs for one scenario."""
    loan_amount = scenario.purchase_price - scenario.down_payment
    ltv = loan_amount / scenario.purchase_price * 100 if scenario.purchase_price > 0 else 0.0
    down_pct = (
        scenario.down_payment / scenario.purchase_price * 100 if scenario.purchase_price > 0 else 0.0
    )
    n_payments = scenario.term_years * 12

    monthly_pi = monthly_principal_and_interest(loan_amount, scenario.interest_rate, n_payments)
    monthly_pmi = scenario_pmi(loan_amount, ltv)

    annual_tax = (
        scenario.annual_property_tax
        if scenario.annual_property_tax is not None
        else scenario.purchase_price * _DEFAULT_TAX_PCT
    )
    annual_insurance = (
        scenario.annual_insurance
        if scenario.annual_insurance is not None
        else scenario.purchase_price * _DEFAULT_INSURANCE_PCT
    )
    monthly_tax = round_half_up(annual_tax / 12, 2)
    monthly_insurance = round_half_up(annual_insurance / 12, 2)
    monthly_total = round_half_up(monthly_pi + monthly_pmi + monthly_tax + monthly_insurance, 2)

    # PMI drops off once amortization brings LTV to 80%
    pmi_months = (
        min(n_payments, math.ceil((ltv - 80) / _LTV_PAYDOWN_PER_YEAR * 12)) if ltv > 80 else 0
    )
    total_payments = round_half_up(
        monthly_pi * n_payments
        + monthly_pmi * pmi_months
        + monthly_tax * n_payments
        + monthly_insurance * n_payments,
        2,
    )

    return LoanCalculationResult(
        label=scenario.label,
        loan_amount=round_half_up(loan_amount, 2),
        monthly_pi=monthly_pi,
        monthly_pmi=monthly_pmi,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        monthly_total=monthly_total,
        total_payments=total_payments,
        total_interest=total_interest_over_term(monthly_pi, n_payments, loan_amount),
        ltv_ratio=round_half_up(ltv, 2),
        down_payment_percent=round_half_up(down_pct, 2),
    )


def find_comparison_highlights(results: list[LoanCalculationResult]) -> ComparisonHighlights:
    """Best (lowest) value of each headline metric across scenarios."""
    if not results:
        return ComparisonHighlights(
            lowest_monthly_pi=0,
            lowest_monthly_total=0,
            lowest_total_cost=0,
            lowest_total_interest=0,
        )
    return ComparisonHighlights(
        lowest_monthly_pi=min(r.monthly_pi for r in results),
        lowest_monthly_total=min(r.monthly_total for r in results),
        lowest_total_cost=min(r.total_payments for r in results),
        lowest_total_interest=min(r.total_interest for r in results),
    )


def calculate_difference(value: float, best: float) -> float:
    """How far a value sits above the best value, in cents precision."""
    return round_half_up(value - best, 2)
