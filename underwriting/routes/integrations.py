# This project was developed with assistance from AI tools.
"""Mock provider routes -- credit pull, income verification, AVM."""

from fastapi import APIRouter

from ..schemas.integrations import (
    AVMRequest,
    AVMResult,
    CreditPullRequest,
    CreditReport,
    IncomeVerification,
    IncomeVerificationRequest,
)
from ..services.integrations import get_property_valuation, simulate_credit_pull, verify_income

router = APIRouter()


@router.post("/credit-pull", response_model=CreditReport)
async def credit_pull(req: CreditPullRequest) -> CreditReport:
    """Simulate a tri-bureau credit pull."""
    return simulate_credit_pull(req)


@router.post("/verify-income", response_model=IncomeVerification)
async def income_verification(req: IncomeVerificationRequest) -> IncomeVerification:
    """Simulate employer verification of employment and income."""
    return verify_income(req)


@router.post("/property-value", response_model=AVMResult)
async def property_value(req: AVMRequest) -> AVMResult:
    """Run the mock automated valuation model."""
    return get_property_valuation(req)
