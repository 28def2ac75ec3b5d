# This project was developed with assistance from AI tools.
"""Rate sheet and underwriting policy schemas.

A rate sheet is the complete pricing configuration for one market: base
rates per loan type, the threshold tables for each adjustment axis, and the
qualification thresholds. Sheets are loaded from YAML (see
services/rate_sheet.py) or built in code, and passed explicitly into the
pricing and qualification engines.
"""

import enum
from datetime import date

from pydantic import Field, model_validator

from ..enums import LoanPurpose, LoanType, PropertyOccupancy, PropertyType
from . import ValueObject


class Band(ValueObject):
    """One row of a step-function table: a threshold and its basis-point impact."""

    threshold: float
    impact: int


class QualificationPolicy(ValueObject):
    """Blocker/warning thresholds used by the qualification engine."""

    min_credit_score: int = 620
    credit_warning_score: int = 680
    max_dti: float = 50.0
    dti_warning: float = 43.0
    max_ltv: float = 97.0
    ltv_warning: float = 95.0
    pmi_ltv: float = 80.0


def _check_exhaustive(table: dict, enum_cls: type[enum.Enum], name: str) -> None:
    missing = [m.value for m in enum_cls if m not in table]
    if missing:
        raise ValueError(f"{name} is missing entries for: {', '.join(missing)}")


class RateSheet(ValueObject):
    """Pricing configuration for one market.

    Band tables are evaluated in order and the first matching row wins:
      - term_bands: term_months <= threshold (ascending thresholds)
      - credit_bands: credit_score >= threshold (descending thresholds)
      - ltv_bands: ltv <= threshold (ascending thresholds)
    Values falling past the last row take the matching ``*_fallback_impact``.
    """

    market: str = "default"
    effective_date: date | None = None

    base_rates: dict[LoanType, float]

    term_bands: list[Band]
    term_fallback_impact: int = 0
    credit_bands: list[Band]
    credit_fallback_impact: int
    ltv_bands: list[Band]
    ltv_fallback_impact: int

    property_type_adjustments: dict[PropertyType, int]
    occupancy_adjustments: dict[PropertyOccupancy, int]
    purpose_adjustments: dict[LoanPurpose, int]

    points_options: list[int] = Field(default_factory=lambda: [0, 1, 2])
    point_rate_reduction_bp: int = 25
    lock_period_days: int = 30

    qualification: QualificationPolicy = Field(default_factory=QualificationPolicy)

    @model_validator(mode="after")
    def _validate_tables(self) -> "RateSheet":
        _check_exhaustive(self.base_rates, LoanType, "base_rates")
        _check_exhaustive(self.property_type_adjustments, PropertyType, "property_type_adjustments")
        _check_exhaustive(self.occupancy_adjustments, PropertyOccupancy, "occupancy_adjustments")
        _check_exhaustive(self.purpose_adjustments, LoanPurpose, "purpose_adjustments")

        ascending = [("term_bands", self.term_bands), ("ltv_bands", self.ltv_bands)]
        for name, bands in ascending:
            thresholds = [b.threshold for b in bands]
            if thresholds != sorted(thresholds):
                raise ValueError(f"{name} thresholds must be ascending")
        credit_thresholds = [b.threshold for b in self.credit_bands]
        if credit_thresholds != sorted(credit_thresholds, reverse=True):
            raise ValueError("credit_bands thresholds must be descending")

        if sorted(set(self.points_options)) != self.points_options:
            raise ValueError("points_options must be unique and ascending")
        if any(p < 0 for p in self.points_options):
            raise ValueError("points_options cannot be negative")
        if 0 not in self.points_options:
            raise ValueError("points_options must include 0 (the par scenario)")
        if self.point_rate_reduction_bp < 0:
            raise ValueError("point_rate_reduction_bp cannot be negative")
        return self


DEFAULT_RATE_SHEET = RateSheet(
    market="default",
    base_rates={
        LoanType.CONVENTIONAL: 6.75,
        LoanType.FHA: 6.50,
        LoanType.VA: 6.25,
        LoanType.USDA: 6.50,
        LoanType.JUMBO: 7.00,
    },
    term_bands=[
        Band(threshold=180, impact=-50),
        Band(threshold=240, impact=-25),
    ],
    term_fallback_impact=0,
    credit_bands=[
        Band(threshold=780, impact=-25),
        Band(threshold=760, impact=0),
        Band(threshold=740, impact=25),
        Band(threshold=720, impact=50),
        Band(threshold=700, impact=75),
        Band(threshold=680, impact=125),
        Band(threshold=660, impact=175),
        Band(threshold=640, impact=250),
    ],
    credit_fallback_impact=350,
    ltv_bands=[
        Band(threshold=60, impact=-25),
        Band(threshold=70, impact=-12),
        Band(threshold=75, impact=0),
        Band(threshold=80, impact=12),
        Band(threshold=85, impact=25),
        Band(threshold=90, impact=50),
        Band(threshold=95, impact=75),
    ],
    ltv_fallback_impact=100,
    property_type_adjustments={
        PropertyType.SINGLE_FAMILY: 0,
        PropertyType.TOWNHOUSE: 12,
        PropertyType.CONDO: 25,
        PropertyType.MULTI_FAMILY: 50,
        PropertyType.MANUFACTURED: 75,
        PropertyType.PUD: 0,
    },
    occupancy_adjustments={
        PropertyOccupancy.PRIMARY_RESIDENCE: 0,
        PropertyOccupancy.SECOND_HOME: 37,
        PropertyOccupancy.INVESTMENT: 75,
    },
    purpose_adjustments={
        LoanPurpose.PURCHASE: 0,
        LoanPurpose.REFINANCE: 12,
        LoanPurpose.CASH_OUT: 37,
    },
)
