# This project was developed with assistance from AI tools.
"""Pricing engine schemas: loan inputs, scenarios, and the full quote."""

from datetime import datetime

from pydantic import BaseModel, Field

from ..enums import LoanPurpose, LoanType, PropertyOccupancy, PropertyType
from . import ValueObject


class LoanTerms(ValueObject):
    """Principal, annual rate (fraction, e.g. 0.0675) and term."""

    principal: float = Field(ge=0)
    annual_rate: float = Field(ge=0)
    term_months: int = Field(gt=0)


class PropertyContext(ValueObject):
    property_value: float = Field(ge=0)
    property_type: PropertyType = PropertyType.SINGLE_FAMILY
    occupancy: PropertyOccupancy = PropertyOccupancy.PRIMARY_RESIDENCE
    state: str = Field(default="CA", min_length=2, max_length=2)


class BorrowerFinancials(ValueObject):
    credit_score: int = Field(ge=300, le=850)
    annual_income: float = Field(default=0, ge=0)
    monthly_debts: float = Field(default=0, ge=0)


class PricingRequest(BaseModel):
    """Input for a pricing quote."""

    loan_amount: float = Field(ge=0)
    property_value: float = Field(gt=0)
    credit_score: int = Field(ge=300, le=850)
    loan_type: LoanType = LoanType.CONVENTIONAL
    loan_purpose: LoanPurpose = LoanPurpose.PURCHASE
    term_months: int = Field(default=360, gt=0, le=480)
    property_occupancy: PropertyOccupancy = PropertyOccupancy.PRIMARY_RESIDENCE
    property_type: PropertyType = PropertyType.SINGLE_FAMILY
    state: str = Field(default="CA", min_length=2, max_length=2)
    is_first_time_buyer: bool = False

    @classmethod
    def from_parts(
        cls,
        terms: LoanTerms,
        prop: PropertyContext,
        borrower: BorrowerFinancials,
        *,
        loan_type: LoanType = LoanType.CONVENTIONAL,
        loan_purpose: LoanPurpose = LoanPurpose.PURCHASE,
        is_first_time_buyer: bool = False,
    ) -> "PricingRequest":
        """Assemble a request from the wizard's loan, property and borrower sections."""
        return cls(
            loan_amount=terms.principal,
            property_value=prop.property_value,
            credit_score=borrower.credit_score,
            loan_type=loan_type,
            loan_purpose=loan_purpose,
            term_months=terms.term_months,
            property_occupancy=prop.occupancy,
            property_type=prop.property_type,
            state=prop.state,
            is_first_time_buyer=is_first_time_buyer,
        )


class RateAdjustment(ValueObject):
    """One traceable pricing adjustment, in basis points."""

    description: str
    impact: int


class PricingScenario(ValueObject):
    """A single buydown option. Rates and APR are percentages (6.75 = 6.75%)."""

    rate: float
    apr: float
    points: int
    points_cost: float
    monthly_payment: float
    total_interest: float
    total_cost: float
    label: str


class LoanDetails(ValueObject):
    loan_amount: float
    loan_type: LoanType
    loan_purpose: LoanPurpose
    term_months: int
    ltv: float
    credit_score: int


class ClosingCosts(ValueObject):
    origination_fee: float
    appraisal_fee: float
    title_insurance: float
    escrow_fees: float
    recording_fees: float
    other_fees: float
    total_closing_costs: float


class MonthlyBreakdown(ValueObject):
    principal: float
    interest: float
    taxes: float
    insurance: float
    pmi: float
    total: float


class PricingResult(BaseModel):
    """Full pricing quote returned by the composer."""

    success: bool = True
    reference_number: str
    pricing_date: datetime
    market: str
    lock_period: int
    base_rate: float
    total_adjustment_bp: int
    final_rate: float
    scenarios: list[PricingScenario]
    selected_scenario: PricingScenario | None = None
    loan_details: LoanDetails
    fees: ClosingCosts
    adjustments: list[RateAdjustment]
    monthly_breakdown: MonthlyBreakdown
    notes: list[str] = Field(default_factory=list)


class ScenarioComparisonRequest(BaseModel):
    """Input for POST /api/pricing/compare."""

    scenario_1: PricingScenario
    scenario_2: PricingScenario
    hold_years: float = Field(gt=0, le=40)


class ScenarioComparison(ValueObject):
    """Points vs. no-points outcome over a holding period."""

    winner: int
    savings: float
    break_even_months: int
    total_cost_1: float
    total_cost_2: float
