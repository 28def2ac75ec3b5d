# This project was developed with assistance from AI tools.
"""Loan scenario comparison calculator schemas."""

from pydantic import BaseModel, Field, model_validator


class LoanScenarioInput(BaseModel):
    """One side-by-side scenario in the comparison tool."""

    label: str
    purchase_price: float = Field(gt=0)
    down_payment: float = Field(ge=0)
    interest_rate: float = Field(ge=0, le=0.25, description="Annual rate as a fraction.")
    term_years: int = Field(default=30, gt=0, le=40)
    annual_property_tax: float | None = Field(
        default=None, ge=0, description="Defaults to 1.2% of purchase price."
    )
    annual_insurance: float | None = Field(
        default=None, ge=0, description="Defaults to 0.35% of purchase price."
    )

    @model_validator(mode="after")
    def _down_payment_within_price(self) -> "LoanScenarioInput":
        if self.down_payment > self.purchase_price:
            raise ValueError("down_payment cannot exceed purchase_price")
        return self


class LoanCalculationResult(BaseModel):
    label: str
    loan_amount: float
    monthly_pi: float
    monthly_pmi: float
    monthly_tax: float
    monthly_insurance: float
    monthly_total: float
    total_payments: float
    total_interest: float
    ltv_ratio: float
    down_payment_percent: float


class ComparisonHighlights(BaseModel):
    lowest_monthly_pi: float
    lowest_monthly_total: float
    lowest_total_cost: float
    lowest_total_interest: float


class ScenarioCompareRequest(BaseModel):
    """Input for POST /api/calculator/scenarios."""

    scenarios: list[LoanScenarioInput] = Field(min_length=1, max_length=4)


class ScenarioCompareResponse(BaseModel):
    results: list[LoanCalculationResult]
    highlights: ComparisonHighlights
