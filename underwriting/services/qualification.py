# This project was developed with assistance from AI tools.
"""Qualification engine for the underwriting console.

Pure functions -- no I/O, no clock reads. Derives one of four statuses from
whatever underwriting checks have completed:

  pending                  no check has completed yet
  not_qualified            at least one blocker
  conditionally_qualified  warnings but no blockers
  qualified                no blockers and no warnings

Reasons are emitted in a fixed evaluation order -- credit, income, DTI, LTV,
valuation confidence -- which the console renders as-is.
"""

import enum
from dataclasses import dataclass
from datetime import datetime

from ..enums import QualificationStatus, SlotState, ValuationConfidence, VerificationStatus
from ..schemas.policy import QualificationPolicy
from ..schemas.underwriting import QualificationResult, UnderwritingData, UnderwritingSlot

PENDING_REASON = "Run underwriting checks to determine qualification"
ALL_PASSED_REASON = "All underwriting checks passed"


class Severity(str, enum.Enum):
    """How a finding affects the verdict. NOTE is informational only."""

    NOTE = "note"
    WARNING = "warning"
    BLOCKER = "blocker"


@dataclass(frozen=True)
class Finding:
    severity: Severity
    reason: str


def _failure(slot: UnderwritingSlot, check_name: str) -> list[Finding]:
    """A check that ran but failed leaves its signal missing: warn, never block."""
    if slot.state == SlotState.FAILED:
        return [Finding(Severity.WARNING, f"{check_name} check failed: {slot.error}")]
    return []


# ---------------------------------------------------------------------------
# Individual checks (called in evaluation order by evaluate_findings)
# ---------------------------------------------------------------------------


def check_credit(data: UnderwritingData, policy: QualificationPolicy) -> list[Finding]:
    if not data.credit.is_completed:
        return _failure(data.credit, "Credit")

    score = data.credit.result.average_score
    if score < policy.min_credit_score:
        return [
            Finding(
                Severity.BLOCKER,
                f"Credit score ({score}) below minimum requirement ({policy.min_credit_score})",
            )
        ]
    if score < policy.credit_warning_score:
        return [Finding(Severity.WARNING, f"Credit score ({score}) may limit loan options")]
    return []


def check_income(data: UnderwritingData, policy: QualificationPolicy) -> list[Finding]:
    if not data.income.is_completed:
        return _failure(data.income, "Income verification")

    verification = data.income.result
    status = verification.employment.status
    if status == VerificationStatus.UNABLE_TO_VERIFY:
        return [Finding(Severity.BLOCKER, "Income could not be verified")]
    if status == VerificationStatus.DISCREPANCY_FOUND:
        variance = verification.income.variance_percent
        sign = "+" if variance > 0 else ""
        return [Finding(Severity.WARNING, f"Income discrepancy detected ({sign}{variance}%)")]
    return []


def check_dti(data: UnderwritingData, policy: QualificationPolicy) -> list[Finding]:
    """Housing payment against verified income; needs both income and pricing."""
    findings = _failure(data.pricing, "Pricing")
    if not (data.income.is_completed and data.pricing.is_completed):
        return findings

    monthly_income = data.income.result.income.verified_annual / 12
    if monthly_income <= 0:
        return findings

    monthly_payment = data.pricing.result.monthly_breakdown.total
    dti = monthly_payment / monthly_income * 100
    if dti > policy.max_dti:
        findings.append(
            Finding(Severity.BLOCKER, f"DTI ratio ({dti:.1f}%) exceeds maximum ({policy.max_dti:g}%)")
        )
    elif dti > policy.dti_warning:
        findings.append(Finding(Severity.WARNING, f"DTI ratio ({dti:.1f}%) is elevated"))
    return findings


def check_ltv(
    data: UnderwritingData, policy: QualificationPolicy, loan_amount: float | None
) -> list[Finding]:
    """Loan amount against the AVM estimate; needs the property check and a loan amount."""
    if not data.property.is_completed:
        return _failure(data.property, "Property valuation")
    if not loan_amount:
        return []

    estimated_value = data.property.result.valuation.estimated_value
    if estimated_value <= 0:
        return []

    ltv = loan_amount / estimated_value * 100
    if ltv > policy.max_ltv:
        return [Finding(Severity.BLOCKER, f"LTV ({ltv:.1f}%) exceeds maximum ({policy.max_ltv:g}%)")]
    if ltv > policy.ltv_warning:
        return [Finding(Severity.WARNING, f"High LTV ({ltv:.1f}%) may limit options")]
    if ltv > policy.pmi_ltv:
        return [Finding(Severity.NOTE, f"LTV ({ltv:.1f}%) requires PMI")]
    return []


def check_valuation_confidence(data: UnderwritingData) -> list[Finding]:
    if not data.property.is_completed:
        return []
    if data.property.result.valuation.confidence == ValuationConfidence.LOW:
        return [
            Finding(
                Severity.WARNING,
                "Property valuation has low confidence - appraisal recommended",
            )
        ]
    return []


def evaluate_findings(
    data: UnderwritingData,
    policy: QualificationPolicy,
    loan_amount: float | None = None,
) -> list[Finding]:
    """Run every check in the documented order and concatenate their findings."""
    findings: list[Finding] = []
    findings.extend(check_credit(data, policy))
    findings.extend(check_income(data, policy))
    findings.extend(check_dti(data, policy))
    findings.extend(check_ltv(data, policy, loan_amount))
    findings.extend(check_valuation_confidence(data))
    return findings


# ---------------------------------------------------------------------------
# Verdict
# ---------------------------------------------------------------------------


def _slots(data: UnderwritingData) -> tuple[UnderwritingSlot, ...]:
    return (data.credit, data.income, data.property, data.pricing)


def _latest_recorded_at(data: UnderwritingData) -> datetime | None:
    stamps = [s.recorded_at for s in _slots(data) if s.recorded_at is not None]
    return max(stamps) if stamps else None


def calculate_qualification(
    data: UnderwritingData,
    loan_amount: float | None = None,
    *,
    policy: QualificationPolicy | None = None,
    as_of: datetime | None = None,
) -> QualificationResult:
    """Derive the qualification verdict from the completed underwriting checks.

    Idempotent: ``calculated_at`` is ``as_of`` when given, otherwise the most
    recent slot timestamp, so identical input always yields an identical
    result. The input is never modified.

    Args:
        data: Underwriting slots for the application.
        loan_amount: Requested loan amount; LTV is skipped without it.
        policy: Thresholds; defaults to QualificationPolicy().
        as_of: Timestamp to stamp on the result.
    """
    policy = policy or QualificationPolicy()
    calculated_at = as_of or _latest_recorded_at(data)

    if not any(slot.state in SlotState.ran() for slot in _slots(data)):
        return QualificationResult(
            status=QualificationStatus.PENDING,
            calculated_at=calculated_at,
            reasons=[PENDING_REASON],
        )

    findings = evaluate_findings(data, policy, loan_amount)
    reasons = [f.reason for f in findings]
    severities = {f.severity for f in findings}

    if Severity.BLOCKER in severities:
        status = QualificationStatus.NOT_QUALIFIED
    elif Severity.WARNING in severities:
        status = QualificationStatus.CONDITIONALLY_QUALIFIED
    else:
        status = QualificationStatus.QUALIFIED
        if not reasons:
            reasons.append(ALL_PASSED_REASON)

    return QualificationResult(status=status, calculated_at=calculated_at, reasons=reasons)
