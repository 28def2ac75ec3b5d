# This project was developed with assistance from AI tools.
"""Mock employment and income verification.

Outcome is chosen by the last digit of the SSN:

  even      Verified
  1, 3      Discrepancy Found (verified income $5,000 below stated)
  5, 7, 9   Unable to Verify (verified income 0)
"""

import logging
from datetime import UTC, date, datetime, timedelta

from ...core.reference import make_reference_number
from ...enums import VerificationStatus
from ...schemas.integrations import (
    EmployerInfo,
    EmploymentInfo,
    IncomeDetail,
    IncomeStability,
    IncomeVerification,
    IncomeVerificationRequest,
)
from ..amortization import round_half_up

logger = logging.getLogger(__name__)

DISCREPANCY_AMOUNT = -5000
VARIANCE_TOLERANCE_PCT = 10

# (minimum years employed, score, rating), checked top-down
_STABILITY_TIERS = (
    (5, 100, "Excellent"),
    (3, 85, "Good"),
    (2, 70, "Satisfactory"),
    (1, 55, "Fair"),
)


def verification_outcome(ssn: str) -> tuple[VerificationStatus, float]:
    """Map an SSN to the demo verification status and income variance."""
    tail = ssn.strip()[-1:]
    digit = int(tail) if tail.isdigit() else 0
    if digit % 2 == 0:
        return VerificationStatus.VERIFIED, 0
    if digit in (1, 3):
        return VerificationStatus.DISCREPANCY_FOUND, DISCREPANCY_AMOUNT
    return VerificationStatus.UNABLE_TO_VERIFY, 0


def _money(value: float) -> str:
    return f"${value:,.0f}" if float(value).is_integer() else f"${value:,.2f}"


def last_pay_date(today: date) -> date:
    """Most recent Friday on or before ``today``."""
    return today - timedelta(days=(today.weekday() - 4) % 7)


def verify_income(
    request: IncomeVerificationRequest, *, now: datetime | None = None
) -> IncomeVerification:
    """Verify the borrower's employment and stated income."""
    now = now or datetime.now(UTC)
    status, variance_amount = verification_outcome(request.ssn)
    unverified = status == VerificationStatus.UNABLE_TO_VERIFY

    stated = request.stated_annual_income
    verified_annual = 0 if unverified else stated + variance_amount
    variance = verified_annual - stated
    variance_percent = int(round_half_up(variance / stated * 100, 0)) if stated > 0 else 0
    within_tolerance = abs(variance_percent) <= VARIANCE_TOLERANCE_PCT

    notes: list[str] = []
    if status == VerificationStatus.VERIFIED:
        notes.append("Employment and income verified successfully.")
        notes.append("Employer confirmed current employment status.")
    elif status == VerificationStatus.DISCREPANCY_FOUND:
        notes.append("Employment verified but income discrepancy found.")
        notes.append(f"Stated income: {_money(stated)}")
        notes.append(f"Verified income: {_money(verified_annual)}")
        if within_tolerance:
            notes.append("Variance is within acceptable tolerance.")
        else:
            notes.append("Variance exceeds tolerance - additional documentation may be required.")
    else:
        notes.append("Unable to verify employment information.")
        notes.append("Employer did not respond to verification request.")
        notes.append("Manual verification or additional documentation required.")

    ytd_earnings = round_half_up(verified_annual / 12 * now.month, 0)

    logger.info("Income verification completed: %s", status.value)
    return IncomeVerification(
        success=not unverified,
        reference_number=make_reference_number("IV", now),
        verification_date=now,
        employer=EmployerInfo(
            name=request.employer_name,
            verified=not unverified,
            phone=request.employer_phone,
            address=request.employer_address,
        ),
        employment=EmploymentInfo(
            status=status,
            start_date=request.start_date,
            job_title=request.job_title,
            employment_type=request.employment_type,
        ),
        income=IncomeDetail(
            verified=not unverified,
            stated_annual=stated,
            verified_annual=verified_annual,
            variance=variance,
            variance_percent=variance_percent,
            within_tolerance=within_tolerance,
        ),
        ytd_earnings=None if unverified else ytd_earnings,
        last_pay_date=None if unverified else last_pay_date(now.date()),
        pay_frequency="Bi-Weekly",
        notes=notes,
    )


def income_stability_score(start_date: date, *, today: date | None = None) -> IncomeStability:
    """Score employment tenure: 5+ years is Excellent, under a year is Limited History."""
    today = today or datetime.now(UTC).date()
    years_employed = (today - start_date).days / 365
    for min_years, score, rating in _STABILITY_TIERS:
        if years_employed >= min_years:
            return IncomeStability(score=score, rating=rating)
    return IncomeStability(score=40, rating="Limited History")
