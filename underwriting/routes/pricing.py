# This project was developed with assistance from AI tools.
"""Pricing routes -- rate quotes and points scenario comparison."""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ..schemas.pricing import (
    PricingRequest,
    PricingResult,
    ScenarioComparison,
    ScenarioComparisonRequest,
)
from ..services.comparison import compare_scenarios
from ..services.pricing import calculate_pricing
from ..services.rate_sheet import RateSheetError, get_rate_sheet, list_markets

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/markets", response_model=list[str])
async def get_markets() -> list[str]:
    """Return the markets that have a rate sheet on disk."""
    return list_markets()


@router.post("/quote", response_model=PricingResult)
async def quote(
    req: PricingRequest,
    market: str | None = Query(default=None, pattern=r"^[a-z0-9][a-z0-9_-]*$"),
) -> PricingResult:
    """Price a loan against the rate sheet for ``market`` (default market if omitted)."""
    if req.loan_amount > req.property_value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Loan amount cannot exceed property value",
        )

    try:
        sheet = get_rate_sheet(market)
    except FileNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No rate sheet for market '{market}'",
        ) from None
    except RateSheetError as exc:
        logger.warning("Rate sheet for market %s is unusable: %s", market, exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Rate sheet for market '{market}' is unavailable",
        ) from None

    result = calculate_pricing(req, sheet)
    logger.info(
        "Quote %s: %.3f%% (%s market)", result.reference_number, result.final_rate, result.market
    )
    return result


@router.post("/compare", response_model=ScenarioComparison)
async def compare(req: ScenarioComparisonRequest) -> ScenarioComparison:
    """Compare two points scenarios over a holding period."""
    return compare_scenarios(req.scenario_1, req.scenario_2, req.hold_years)
