# This project was developed with assistance from AI tools.
"""Mock credit bureau.

Deterministic demo provider: the score band is chosen by the last digit of
the SSN so that every borrower profile can be reproduced on demand. No real
bureau is contacted.

  0-2  Poor       550 + 30d
  3-4  Fair       650 + 25(d-3)
  5-6  Good       700 + 25(d-5)
  7-9  Excellent  750 + 30(d-7)
"""

import logging
from datetime import UTC, date, datetime

from ...core.reference import make_reference_number
from ...enums import CreditCategory
from ...schemas.integrations import BureauScore, CreditPullRequest, CreditReport, CreditTradeline
from ...schemas.policy import DEFAULT_RATE_SHEET, RateSheet
from ..amortization import round_half_up
from ..pricing import credit_adjustment

logger = logging.getLogger(__name__)

# Per-bureau offsets from the base score
_BUREAU_OFFSETS = (("Equifax", -5), ("Experian", 3), ("TransUnion", 2))

_INQUIRIES = {
    CreditCategory.POOR: 5,
    CreditCategory.FAIR: 3,
    CreditCategory.GOOD: 2,
    CreditCategory.EXCELLENT: 1,
}


def _last_digit(ssn: str) -> int:
    tail = ssn.strip()[-1:]
    return int(tail) if tail.isdigit() else 0


def score_category(ssn: str) -> tuple[CreditCategory, int]:
    """Map an SSN to its demo category and base score."""
    digit = _last_digit(ssn)
    if digit <= 2:
        return CreditCategory.POOR, 550 + digit * 30
    if digit <= 4:
        return CreditCategory.FAIR, 650 + (digit - 3) * 25
    if digit <= 6:
        return CreditCategory.GOOD, 700 + (digit - 5) * 25
    return CreditCategory.EXCELLENT, 750 + (digit - 7) * 30


def _tradelines(category: CreditCategory) -> list[CreditTradeline]:
    card = {
        "creditor": "Chase Credit Card",
        "account_type": "Revolving",
        "balance": 2500,
        "credit_limit": 10000,
        "monthly_payment": 75,
        "status": "Current",
        "open_date": date(2020, 3, 15),
    }
    auto = {
        "creditor": "Bank of America Auto Loan",
        "account_type": "Installment",
        "balance": 15000,
        "credit_limit": 25000,
        "monthly_payment": 450,
        "status": "Current",
        "open_date": date(2022, 6, 1),
    }
    second_card = {
        "creditor": "Capital One Card",
        "account_type": "Revolving",
        "balance": 1200,
        "credit_limit": 5000,
        "monthly_payment": 50,
        "status": "Current",
        "open_date": date(2019, 9, 20),
    }
    extra: list[dict] = []

    if category == CreditCategory.POOR:
        card.update(status="Late30", balance=8500)
        extra.append(
            {
                "creditor": "Medical Collection",
                "account_type": "Collection",
                "balance": 2500,
                "credit_limit": 0,
                "monthly_payment": 0,
                "status": "Collection",
                "open_date": date(2023, 1, 15),
            }
        )
    elif category == CreditCategory.FAIR:
        card.update(balance=6000)
    elif category == CreditCategory.GOOD:
        card.update(balance=3000)
        auto.update(balance=10000)
    else:
        card.update(balance=500, credit_limit=15000)
        auto.update(balance=5000)
        extra.append(
            {
                "creditor": "American Express Platinum",
                "account_type": "Revolving",
                "balance": 0,
                "credit_limit": 25000,
                "monthly_payment": 0,
                "status": "Current",
                "open_date": date(2018, 5, 10),
            }
        )

    return [CreditTradeline(**t) for t in (card, auto, second_card, *extra)]


def simulate_credit_pull(request: CreditPullRequest, *, now: datetime | None = None) -> CreditReport:
    """Return a tri-bureau credit report for the borrower."""
    now = now or datetime.now(UTC)
    category, base_score = score_category(request.ssn)

    scores = [
        BureauScore(bureau=bureau, score=base_score + offset, date=now.date())
        for bureau, offset in _BUREAU_OFFSETS
    ]
    average_score = int(round_half_up(sum(s.score for s in scores) / len(scores), 0))

    tradelines = _tradelines(category)
    revolving = [t for t in tradelines if t.account_type == "Revolving"]
    total_debt = sum(t.balance for t in tradelines)
    total_credit_limit = sum(t.credit_limit for t in revolving)
    utilization_rate = (
        int(round_half_up(sum(t.balance for t in revolving) / total_credit_limit * 100, 0))
        if total_credit_limit > 0
        else 0
    )

    poor = category == CreditCategory.POOR
    logger.info("Credit pull completed: %s (%d)", category.value, average_score)
    return CreditReport(
        success=True,
        reference_number=make_reference_number("CR", now),
        pull_date=now,
        scores=scores,
        average_score=average_score,
        score_category=category,
        tradelines=tradelines,
        total_debt=total_debt,
        total_credit_limit=total_credit_limit,
        utilization_rate=utilization_rate,
        inquiries=_INQUIRIES[category],
        public_records=1 if poor else 0,
        collections=1 if poor else 0,
    )


def credit_rate_adjustment(score: int, sheet: RateSheet = DEFAULT_RATE_SHEET) -> int:
    """Basis points the credit score adds to the base rate (same table as pricing)."""
    return credit_adjustment(score, sheet)
