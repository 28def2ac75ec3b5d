# This project was developed with assistance from AI tools.
"""Loan payment and ratio math.

Pure functions, no I/O. Shared by the pricing composer, the qualification
engine, and the loan scenario calculator. Degenerate inputs (zero income,
zero property value, zero principal) return a neutral 0 instead of raising,
so a partially filled application can always be displayed.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

# Qualifying ratio limits (percent)
FRONT_END_DTI_LIMIT = 28
BACK_END_DTI_LIMIT = 43

# PMI annual rates by LTV tier
_PMI_BASE_RATE = 0.005
_PMI_RATE_ABOVE_90 = 0.008
_PMI_RATE_ABOVE_95 = 0.01
_PMI_LOW_CREDIT_SURCHARGE = 0.002
_PMI_LOW_CREDIT_SCORE = 700
_PMI_LTV_THRESHOLD = 80


@dataclass(frozen=True)
class DTIResult:
    """Front-end and back-end debt-to-income, as whole percents."""

    front_end: int
    back_end: int
    within_limits: bool


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals with .5 going away from zero.

    Python's ``round`` uses banker's rounding, which would put e.g. a 42.5%
    DTI on the wrong side of a policy limit.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def monthly_principal_and_interest(
    principal: float, annual_rate: float, term_months: int
) -> float:
    """Fully amortizing monthly payment.

    M = P * [r(1+r)^n] / [(1+r)^n - 1], with r = annual_rate / 12.

    Args:
        principal: Loan amount.
        annual_rate: Annual interest rate as a fraction (0.0675 for 6.75%).
        term_months: Number of monthly payments.

    Returns:
        Payment rounded to cents; ``principal / term_months`` when the rate
        is zero; 0 when principal or term is not positive.
    """
    if principal <= 0 or term_months <= 0:
        return 0.0
    if annual_rate <= 0:
        return principal / term_months

    monthly_rate = annual_rate / 12
    factor = (1 + monthly_rate) ** term_months
    payment = principal * (monthly_rate * factor) / (factor - 1)
    return round_half_up(payment, 2)


def loan_to_value(loan_amount: float, property_value: float) -> float:
    """LTV percent rounded to one decimal; 0 when property value is not positive."""
    if property_value <= 0:
        return 0.0
    return round_half_up(loan_amount / property_value * 100, 1)


def debt_to_income(
    monthly_income: float, monthly_debts: float, proposed_payment: float
) -> DTIResult:
    """Compute front-end (housing only) and back-end (housing + debts) DTI."""
    if monthly_income <= 0:
        front_end = 0
        back_end = 0
    else:
        front_end = int(round_half_up(proposed_payment / monthly_income * 100, 0))
        back_end = int(round_half_up((monthly_debts + proposed_payment) / monthly_income * 100, 0))

    within_limits = front_end <= FRONT_END_DTI_LIMIT and back_end <= BACK_END_DTI_LIMIT
    return DTIResult(front_end=front_end, back_end=back_end, within_limits=within_limits)


def monthly_pmi(loan_amount: float, ltv: float, credit_score: int) -> float:
    """Estimated monthly private mortgage insurance; 0 at or below 80% LTV."""
    if ltv <= _PMI_LTV_THRESHOLD or loan_amount <= 0:
        return 0.0

    annual_rate = _PMI_BASE_RATE
    if ltv > 95:
        annual_rate = _PMI_RATE_ABOVE_95
    elif ltv > 90:
        annual_rate = _PMI_RATE_ABOVE_90
    if credit_score < _PMI_LOW_CREDIT_SCORE:
        annual_rate += _PMI_LOW_CREDIT_SURCHARGE

    return round_half_up(loan_amount * annual_rate / 12, 2)


def total_interest_over_term(monthly_payment: float, term_months: int, principal: float) -> float:
    """Interest paid over the full term: all payments minus the principal."""
    return round_half_up(monthly_payment * term_months - principal, 2)
