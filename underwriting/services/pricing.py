# This project was developed with assistance from AI tools.
"""Rate adjustment composer and pricing quote builder.

Pure functions -- no I/O. A quote starts from the rate sheet's base rate for
the loan type and accumulates basis-point adjustments from six independent
axes (term, credit score, LTV, property type, occupancy, purpose). Every
nonzero adjustment is kept as its own RateAdjustment so the final rate can
be explained line by line.

Category axes are fail-open: a value outside the closed enums contributes
no adjustment and logs a warning. Request models reject such values at the
API boundary, so this only applies to in-process callers.
"""

import enum
import logging
from datetime import UTC, datetime
from typing import TypeVar

from ..core.reference import make_reference_number
from ..enums import LoanPurpose, LoanType, PropertyOccupancy, PropertyType
from ..schemas.policy import DEFAULT_RATE_SHEET, Band, RateSheet
from ..schemas.pricing import (
    ClosingCosts,
    LoanDetails,
    MonthlyBreakdown,
    PricingRequest,
    PricingResult,
    PricingScenario,
    RateAdjustment,
)
from .amortization import (
    loan_to_value,
    monthly_pmi,
    monthly_principal_and_interest,
    round_half_up,
    total_interest_over_term,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)

# Closing cost estimate constants
_ORIGINATION_PCT = 0.01
_TITLE_INSURANCE_PCT = 0.005
_APPRAISAL_FEE = 550
_ESCROW_FEES = 1500
_RECORDING_FEES = 150
_OTHER_FEES = 800  # credit report, flood cert, etc.

# Escrow estimates for the monthly breakdown (annual, fraction of value)
_ANNUAL_TAX_PCT = 0.012
_ANNUAL_INSURANCE_PCT = 0.005


def _as_member(value: E | str, enum_cls: type[E]) -> E | None:
    """Coerce a raw category to its enum member, or None when unrecognized."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(
            "Unrecognized %s %r -- applying no rate adjustment", enum_cls.__name__, value
        )
        return None


def _first_at_most(value: float, bands: list[Band], fallback: int) -> int:
    for band in bands:
        if value <= band.threshold:
            return band.impact
    return fallback


def _first_at_least(value: float, bands: list[Band], fallback: int) -> int:
    for band in bands:
        if value >= band.threshold:
            return band.impact
    return fallback


# ---------------------------------------------------------------------------
# Adjustment axes (basis points)
# ---------------------------------------------------------------------------


def term_adjustment(term_months: int, sheet: RateSheet = DEFAULT_RATE_SHEET) -> int:
    """Shorter terms price better: <=180 months -50bp, <=240 months -25bp."""
    return _first_at_most(term_months, sheet.term_bands, sheet.term_fallback_impact)


def credit_adjustment(credit_score: int, sheet: RateSheet = DEFAULT_RATE_SHEET) -> int:
    """Credit score bands from >=780 (-25bp) down to <640 (+350bp)."""
    return _first_at_least(credit_score, sheet.credit_bands, sheet.credit_fallback_impact)


def ltv_adjustment(ltv: float, sheet: RateSheet = DEFAULT_RATE_SHEET) -> int:
    """LTV bands from <=60% (-25bp) up to >95% (+100bp)."""
    return _first_at_most(ltv, sheet.ltv_bands, sheet.ltv_fallback_impact)


def property_type_adjustment(
    property_type: PropertyType | str, sheet: RateSheet = DEFAULT_RATE_SHEET
) -> int:
    member = _as_member(property_type, PropertyType)
    return 0 if member is None else sheet.property_type_adjustments[member]


def occupancy_adjustment(
    occupancy: PropertyOccupancy | str, sheet: RateSheet = DEFAULT_RATE_SHEET
) -> int:
    member = _as_member(occupancy, PropertyOccupancy)
    return 0 if member is None else sheet.occupancy_adjustments[member]


def purpose_adjustment(purpose: LoanPurpose | str, sheet: RateSheet = DEFAULT_RATE_SHEET) -> int:
    member = _as_member(purpose, LoanPurpose)
    return 0 if member is None else sheet.purpose_adjustments[member]


def base_rate(loan_type: LoanType | str, sheet: RateSheet = DEFAULT_RATE_SHEET) -> float:
    """Starting rate (percent) for a loan type; unknown types price as Conventional."""
    member = _as_member(loan_type, LoanType)
    return sheet.base_rates[member or LoanType.CONVENTIONAL]


def _category_label(value: enum.Enum | str) -> str:
    return value.value if isinstance(value, enum.Enum) else str(value)


def _term_label(term_months: int) -> str:
    if term_months % 12 == 0:
        return f"{term_months // 12}-year term"
    return f"{term_months}-month term"


def compose_adjustments(
    request: PricingRequest, sheet: RateSheet = DEFAULT_RATE_SHEET
) -> list[RateAdjustment]:
    """Evaluate all six axes and return the nonzero adjustments in axis order."""
    ltv = loan_to_value(request.loan_amount, request.property_value)

    candidates = [
        (_term_label(request.term_months), term_adjustment(request.term_months, sheet)),
        (f"Credit score {request.credit_score}", credit_adjustment(request.credit_score, sheet)),
        (f"LTV {ltv:g}%", ltv_adjustment(ltv, sheet)),
        (
            f"Property type: {_category_label(request.property_type)}",
            property_type_adjustment(request.property_type, sheet),
        ),
        (
            f"Occupancy: {_category_label(request.property_occupancy)}",
            occupancy_adjustment(request.property_occupancy, sheet),
        ),
        (
            f"Purpose: {_category_label(request.loan_purpose)}",
            purpose_adjustment(request.loan_purpose, sheet),
        ),
    ]
    return [
        RateAdjustment(description=description, impact=impact)
        for description, impact in candidates
        if impact != 0
    ]


def adjusted_rate(base: float, adjustments: list[RateAdjustment]) -> float:
    """Base rate plus the summed adjustments (bp -> percent), to three decimals."""
    total_bp = sum(a.impact for a in adjustments)
    return round_half_up(base + total_bp / 100, 3)


# ---------------------------------------------------------------------------
# Buydown scenarios
# ---------------------------------------------------------------------------


def _scenario_label(points: int, reduction_bp: int) -> str:
    if points == 0:
        return "No Points (Par Rate)"
    noun = "Point" if points == 1 else "Points"
    return f"{points} {noun} (-{points * reduction_bp / 100:.2f}%)"


def generate_scenarios(
    rate: float,
    loan_amount: float,
    term_months: int,
    sheet: RateSheet = DEFAULT_RATE_SHEET,
) -> list[PricingScenario]:
    """Build one scenario per points option, ordered by points ascending.

    Each point costs 1% of the loan amount and lowers the rate by the sheet's
    point_rate_reduction_bp. APR spreads the points cost over the term.
    """
    scenarios: list[PricingScenario] = []
    for points in sheet.points_options:
        scenario_rate = round_half_up(rate - points * sheet.point_rate_reduction_bp / 100, 3)
        points_cost = round_half_up(loan_amount * points / 100, 0)
        payment = monthly_principal_and_interest(loan_amount, scenario_rate / 100, term_months)
        total_interest = total_interest_over_term(payment, term_months, loan_amount)

        if loan_amount > 0 and term_months > 0:
            effective_rate = scenario_rate + (points_cost / loan_amount) * (12 / (term_months / 12))
        else:
            effective_rate = scenario_rate

        scenarios.append(
            PricingScenario(
                rate=scenario_rate,
                apr=round_half_up(effective_rate, 3),
                points=points,
                points_cost=points_cost,
                monthly_payment=payment,
                total_interest=total_interest,
                total_cost=round_half_up(total_interest + points_cost, 2),
                label=_scenario_label(points, sheet.point_rate_reduction_bp),
            )
        )
    return scenarios


# ---------------------------------------------------------------------------
# Fees and monthly breakdown
# ---------------------------------------------------------------------------


def estimate_closing_costs(loan_amount: float, property_value: float) -> ClosingCosts:
    """Rough closing cost estimate; whole dollars."""
    origination = round_half_up(loan_amount * _ORIGINATION_PCT, 0)
    title = round_half_up(property_value * _TITLE_INSURANCE_PCT, 0)
    total = origination + _APPRAISAL_FEE + title + _ESCROW_FEES + _RECORDING_FEES + _OTHER_FEES
    return ClosingCosts(
        origination_fee=origination,
        appraisal_fee=_APPRAISAL_FEE,
        title_insurance=title,
        escrow_fees=_ESCROW_FEES,
        recording_fees=_RECORDING_FEES,
        other_fees=_OTHER_FEES,
        total_closing_costs=total,
    )


def monthly_breakdown(
    scenario: PricingScenario,
    loan_amount: float,
    property_value: float,
    pmi: float,
) -> MonthlyBreakdown:
    """First-month PITI split for a scenario (interest uses the first month's balance)."""
    first_month_interest = loan_amount * scenario.rate / 100 / 12
    taxes = round_half_up(property_value * _ANNUAL_TAX_PCT / 12, 0)
    insurance = round_half_up(property_value * _ANNUAL_INSURANCE_PCT / 12, 0)
    return MonthlyBreakdown(
        principal=round_half_up(scenario.monthly_payment - first_month_interest, 2),
        interest=round_half_up(first_month_interest, 2),
        taxes=taxes,
        insurance=insurance,
        pmi=pmi,
        total=round_half_up(scenario.monthly_payment + taxes + insurance + pmi, 2),
    )


def _pricing_notes(
    request: PricingRequest,
    base: float,
    total_adjustment_bp: int,
    ltv: float,
    pmi: float,
    sheet: RateSheet,
) -> list[str]:
    loan_type = _category_label(request.loan_type)
    sign = "+" if total_adjustment_bp >= 0 else ""
    notes = [
        f"Base rate for {loan_type}: {base:g}%",
        f"Total rate adjustment: {sign}{total_adjustment_bp} basis points",
    ]
    if ltv > sheet.qualification.pmi_ltv:
        notes.append(f"PMI required due to LTV > {sheet.qualification.pmi_ltv:g}% (${pmi:,.2f}/month)")
    if request.credit_score < sheet.qualification.credit_warning_score:
        notes.append("Credit improvement could significantly lower rate")
    if request.is_first_time_buyer:
        notes.append("First-time buyer programs may be available")
    return notes


# ---------------------------------------------------------------------------
# Quote
# ---------------------------------------------------------------------------


def calculate_pricing(
    request: PricingRequest,
    rate_sheet: RateSheet | None = None,
    *,
    now: datetime | None = None,
) -> PricingResult:
    """Price a loan: adjustments, final rate, buydown scenarios, fees, and notes.

    Args:
        request: Loan, property, and borrower attributes.
        rate_sheet: Market configuration; defaults to DEFAULT_RATE_SHEET.
        now: Override the pricing timestamp (for testing).

    Returns:
        PricingResult with the par scenario selected.
    """
    sheet = rate_sheet or DEFAULT_RATE_SHEET
    if now is None:
        now = datetime.now(UTC)

    ltv = loan_to_value(request.loan_amount, request.property_value)
    adjustments = compose_adjustments(request, sheet)
    total_adjustment_bp = sum(a.impact for a in adjustments)
    base = base_rate(request.loan_type, sheet)
    rate = adjusted_rate(base, adjustments)

    scenarios = generate_scenarios(rate, request.loan_amount, request.term_months, sheet)
    par = next(s for s in scenarios if s.points == 0)
    pmi = monthly_pmi(request.loan_amount, ltv, request.credit_score)

    logger.debug(
        "Priced %s loan of %.2f at %.3f%% (%+d bp, LTV %.1f%%, market %s)",
        _category_label(request.loan_type),
        request.loan_amount,
        rate,
        total_adjustment_bp,
        ltv,
        sheet.market,
    )

    return PricingResult(
        reference_number=make_reference_number("PR", now),
        pricing_date=now,
        market=sheet.market,
        lock_period=sheet.lock_period_days,
        base_rate=base,
        total_adjustment_bp=total_adjustment_bp,
        final_rate=rate,
        scenarios=scenarios,
        selected_scenario=par,
        loan_details=LoanDetails(
            loan_amount=request.loan_amount,
            loan_type=request.loan_type,
            loan_purpose=request.loan_purpose,
            term_months=request.term_months,
            ltv=ltv,
            credit_score=request.credit_score,
        ),
        fees=estimate_closing_costs(request.loan_amount, request.property_value),
        adjustments=adjustments,
        monthly_breakdown=monthly_breakdown(par, request.loan_amount, request.property_value, pmi),
        notes=_pricing_notes(request, base, total_adjustment_bp, ltv, pmi, sheet),
    )


def rate_quote_summary(result: PricingResult) -> str:
    """One-line quote, e.g. ``6.75% rate (6.75% APR) - $2,594.39/month P&I``."""
    scenario = result.selected_scenario or result.scenarios[0]
    return (
        f"{scenario.rate:g}% rate ({scenario.apr:g}% APR) - "
        f"${scenario.monthly_payment:,.2f}/month P&I"
    )
