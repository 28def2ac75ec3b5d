# This project was developed with assistance from AI tools.
"""Loan scenario calculator routes -- no authentication required."""

from fastapi import APIRouter

from ..schemas.calculator import ScenarioCompareRequest, ScenarioCompareResponse
from ..services.calculator import PRESETS, calculate_loan_scenario, find_comparison_highlights

router = APIRouter()


@router.get("/presets")
async def get_presets() -> dict[str, dict]:
    """Return the preset comparisons offered by the calculator UI."""
    return PRESETS


@router.post("/scenarios", response_model=ScenarioCompareResponse)
async def compare_loan_scenarios(req: ScenarioCompareRequest) -> ScenarioCompareResponse:
    """Calculate each scenario and highlight the best value of each metric."""
    results = [calculate_loan_scenario(s) for s in req.scenarios]
    return ScenarioCompareResponse(
        results=results,
        highlights=find_comparison_highlights(results),
    )
