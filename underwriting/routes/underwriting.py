# This project was developed with assistance from AI tools.
"""Underwriting console routes -- qualification verdict and risk badges."""

import logging

from fastapi import APIRouter

from ..schemas.underwriting import (
    QualificationRequest,
    QualificationResult,
    RiskBadgeRequest,
    RiskBadgeResponse,
)
from ..services.qualification import calculate_qualification
from ..services.rate_sheet import get_rate_sheet
from ..services.risk import risk_badges

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/qualification", response_model=QualificationResult)
async def qualification(req: QualificationRequest) -> QualificationResult:
    """Derive the qualification status from the supplied underwriting checks.

    Thresholds come from the default market's rate sheet.
    """
    policy = get_rate_sheet().qualification
    result = calculate_qualification(
        req.underwriting,
        req.loan_amount,
        policy=policy,
        as_of=req.as_of,
    )
    logger.info("Qualification: %s (%d reasons)", result.status.value, len(result.reasons))
    return result


@router.post("/risk-badges", response_model=RiskBadgeResponse)
async def badges(req: RiskBadgeRequest) -> RiskBadgeResponse:
    """Band each supplied metric into a low/medium/high badge."""
    return risk_badges(req)
