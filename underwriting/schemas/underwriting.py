# This project was developed with assistance from AI tools.
"""Underwriting console schemas: check slots, qualification, and risk badges."""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..enums import QualificationStatus, RiskLevel, SlotState, ValuationConfidence, VerificationStatus
from . import ValueObject
from .integrations import AVMResult, CreditReport, IncomeVerification
from .pricing import PricingResult

ResultT = TypeVar("ResultT")


class UnderwritingSlot(BaseModel, Generic[ResultT]):
    """One underwriting check and the outcome of its most recent run.

    ``completed`` slots carry a result, ``failed`` slots carry an error.
    Re-running a check replaces the whole slot; results are never merged.
    """

    model_config = ConfigDict(frozen=True)

    state: SlotState = SlotState.NOT_RUN
    result: ResultT | None = None
    error: str | None = None
    recorded_at: datetime | None = None
    recorded_by: str | None = None

    @model_validator(mode="after")
    def _check_state(self) -> "UnderwritingSlot[ResultT]":
        if self.state == SlotState.COMPLETED and self.result is None:
            raise ValueError("completed slot requires a result")
        if self.state == SlotState.FAILED and not self.error:
            raise ValueError("failed slot requires an error message")
        if self.state in (SlotState.NOT_RUN, SlotState.PENDING) and self.result is not None:
            raise ValueError(f"{self.state.value} slot cannot carry a result")
        return self

    @classmethod
    def completed(cls, result, *, at: datetime | None = None, by: str | None = None):
        return cls(
            state=SlotState.COMPLETED,
            result=result,
            recorded_at=at or datetime.now(UTC),
            recorded_by=by,
        )

    @classmethod
    def failed(cls, error: str, *, at: datetime | None = None, by: str | None = None):
        return cls(
            state=SlotState.FAILED,
            error=error,
            recorded_at=at or datetime.now(UTC),
            recorded_by=by,
        )

    @classmethod
    def pending(cls, *, at: datetime | None = None, by: str | None = None):
        return cls(state=SlotState.PENDING, recorded_at=at or datetime.now(UTC), recorded_by=by)

    @property
    def is_completed(self) -> bool:
        return self.state == SlotState.COMPLETED


class UnderwritingData(BaseModel):
    """The four independently re-runnable underwriting checks for an application."""

    model_config = ConfigDict(validate_assignment=True)

    credit: UnderwritingSlot[CreditReport] = Field(default_factory=UnderwritingSlot[CreditReport])
    income: UnderwritingSlot[IncomeVerification] = Field(
        default_factory=UnderwritingSlot[IncomeVerification]
    )
    property: UnderwritingSlot[AVMResult] = Field(default_factory=UnderwritingSlot[AVMResult])
    pricing: UnderwritingSlot[PricingResult] = Field(
        default_factory=UnderwritingSlot[PricingResult]
    )


class QualificationResult(ValueObject):
    status: QualificationStatus
    calculated_at: datetime | None = None
    reasons: list[str] = Field(default_factory=list)


class QualificationRequest(BaseModel):
    """Input for POST /api/underwriting/qualification."""

    underwriting: UnderwritingData = Field(default_factory=UnderwritingData)
    loan_amount: float | None = Field(default=None, gt=0)
    as_of: datetime | None = None


class RiskBadge(ValueObject):
    level: RiskLevel
    label: str
    color_class: str


class StatusBadge(ValueObject):
    label: str
    color_class: str


class RiskBadgeRequest(BaseModel):
    """Metrics to band; any subset may be supplied."""

    credit_score: int | None = Field(default=None, ge=300, le=850)
    back_end_dti: float | None = Field(default=None, ge=0)
    ltv: float | None = Field(default=None, ge=0)
    income_status: VerificationStatus | None = None
    valuation_confidence: ValuationConfidence | None = None


class RiskBadgeResponse(BaseModel):
    credit: RiskBadge | None = None
    dti: RiskBadge | None = None
    ltv: RiskBadge | None = None
    income: RiskBadge | None = None
    property_confidence: RiskBadge | None = None
