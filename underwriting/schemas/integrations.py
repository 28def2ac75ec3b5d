# This project was developed with assistance from AI tools.
"""Schemas for the mock credit, income verification, and valuation providers.

These are the result shapes the underwriting console stores in the
UnderwritingData slots. Most fields carry defaults so that a report can be
assembled from partial provider data.
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from ..enums import (
    CreditCategory,
    EmploymentType,
    PropertyType,
    ValuationConfidence,
    VerificationStatus,
)

# ---------------------------------------------------------------------------
# Credit
# ---------------------------------------------------------------------------

Bureau = Literal["Equifax", "Experian", "TransUnion"]
TradelineStatus = Literal["Current", "Late30", "Late60", "Late90", "Collection", "ChargedOff"]


class Address(BaseModel):
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""


class CreditPullRequest(BaseModel):
    ssn: str = Field(min_length=4)
    first_name: str
    last_name: str
    date_of_birth: date | None = None
    current_address: Address = Field(default_factory=Address)


class BureauScore(BaseModel):
    bureau: Bureau
    score: int
    date: date


class CreditTradeline(BaseModel):
    creditor: str
    account_type: str
    balance: float
    credit_limit: float
    monthly_payment: float
    status: TradelineStatus
    open_date: date


class CreditReport(BaseModel):
    success: bool = True
    reference_number: str = ""
    pull_date: datetime | None = None
    scores: list[BureauScore] = Field(default_factory=list)
    average_score: int = Field(ge=300, le=850)
    score_category: CreditCategory | None = None
    tradelines: list[CreditTradeline] = Field(default_factory=list)
    total_debt: float = 0
    total_credit_limit: float = 0
    utilization_rate: int = 0
    inquiries: int = 0
    public_records: int = 0
    collections: int = 0


# ---------------------------------------------------------------------------
# Income
# ---------------------------------------------------------------------------

PayFrequency = Literal["Weekly", "Bi-Weekly", "Semi-Monthly", "Monthly"]


class IncomeVerificationRequest(BaseModel):
    employer_name: str
    employer_phone: str | None = None
    employer_address: str | None = None
    job_title: str
    start_date: date
    stated_annual_income: float = Field(ge=0)
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    borrower_name: str
    ssn: str = Field(min_length=4)


class EmployerInfo(BaseModel):
    name: str = ""
    verified: bool = False
    phone: str | None = None
    address: str | None = None


class EmploymentInfo(BaseModel):
    status: VerificationStatus
    start_date: date | None = None
    job_title: str = ""
    employment_type: EmploymentType = EmploymentType.FULL_TIME


class IncomeDetail(BaseModel):
    verified: bool = False
    stated_annual: float = 0
    verified_annual: float = 0
    variance: float = 0
    variance_percent: int = 0
    within_tolerance: bool = True


class IncomeVerification(BaseModel):
    success: bool = True
    reference_number: str = ""
    verification_date: datetime | None = None
    employer: EmployerInfo = Field(default_factory=EmployerInfo)
    employment: EmploymentInfo
    income: IncomeDetail = Field(default_factory=IncomeDetail)
    ytd_earnings: float | None = None
    last_pay_date: date | None = None
    pay_frequency: PayFrequency | None = None
    notes: list[str] = Field(default_factory=list)


class IncomeStability(BaseModel):
    score: int
    rating: str


# ---------------------------------------------------------------------------
# Automated valuation (AVM)
# ---------------------------------------------------------------------------


class AVMRequest(BaseModel):
    address: str
    city: str
    state: str = Field(min_length=2, max_length=2)
    zip: str
    property_type: PropertyType = PropertyType.SINGLE_FAMILY
    purchase_price: float | None = Field(default=None, gt=0)
    square_feet: int | None = Field(default=None, gt=0)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: float | None = Field(default=None, ge=0)
    year_built: int | None = Field(default=None, ge=1700)


class ComparableSale(BaseModel):
    address: str
    sale_price: float
    sale_date: date
    square_feet: int
    bedrooms: int
    bathrooms: float
    distance: float
    adjusted_price: float


class PropertySummary(BaseModel):
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    property_type: PropertyType = PropertyType.SINGLE_FAMILY


class Valuation(BaseModel):
    estimated_value: float = Field(ge=0)
    low_range: float = 0
    high_range: float = 0
    confidence_score: int = 0
    confidence: ValuationConfidence
    price_per_sq_ft: float = 0


class MarketTrends(BaseModel):
    year_over_year_change: float
    month_over_month_change: float
    median_days_on_market: int
    inventory_level: Literal["Low", "Normal", "High"]


class PropertyDetails(BaseModel):
    square_feet: int
    lot_size: int
    year_built: int
    bedrooms: int
    bathrooms: float


class AVMResult(BaseModel):
    success: bool = True
    reference_number: str = ""
    valuation_date: datetime | None = None
    property: PropertySummary = Field(default_factory=PropertySummary)
    valuation: Valuation
    comparables: list[ComparableSale] = Field(default_factory=list)
    market_trends: MarketTrends | None = None
    property_details: PropertyDetails | None = None
    notes: list[str] = Field(default_factory=list)


class PropertyValueCheck(BaseModel):
    valid: bool
    usable_value: float
    ltv: float
    notes: list[str] = Field(default_factory=list)
