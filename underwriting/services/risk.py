# This project was developed with assistance from AI tools.
"""Risk badges for the underwriting console.

Pure functions mapping one metric each to a low/medium/high badge. Bands are
inclusive on the safer side: a credit score of exactly 740 is low risk, an
LTV of exactly 80% is low risk.
"""

from ..enums import QualificationStatus, RiskLevel, ValuationConfidence, VerificationStatus
from ..schemas.underwriting import RiskBadge, RiskBadgeRequest, RiskBadgeResponse, StatusBadge

_GREEN = "bg-green-100 text-green-800"
_YELLOW = "bg-yellow-100 text-yellow-800"
_RED = "bg-red-100 text-red-800"
_GRAY = "bg-gray-100 text-gray-800"


def _low(label: str) -> RiskBadge:
    return RiskBadge(level=RiskLevel.LOW, label=label, color_class=_GREEN)


def _medium(label: str) -> RiskBadge:
    return RiskBadge(level=RiskLevel.MEDIUM, label=label, color_class=_YELLOW)


def _high(label: str) -> RiskBadge:
    return RiskBadge(level=RiskLevel.HIGH, label=label, color_class=_RED)


def credit_risk_badge(score: int) -> RiskBadge:
    """>=740 low, 680-739 medium, below 680 high."""
    if score >= 740:
        return _low("Excellent")
    if score >= 680:
        return _medium("Good")
    return _high("Below Standard")


def dti_risk_badge(back_end_dti: float) -> RiskBadge:
    """Back-end DTI: <=36 low, <=43 medium, above 43 high."""
    if back_end_dti <= 36:
        return _low("Low DTI")
    if back_end_dti <= 43:
        return _medium("Acceptable")
    return _high("High DTI")


def ltv_risk_badge(ltv: float) -> RiskBadge:
    """<=80 low (no PMI), <=95 medium (PMI), above 95 high."""
    if ltv <= 80:
        return _low("No PMI")
    if ltv <= 95:
        return _medium("PMI Required")
    return _high("High LTV")


def income_risk_badge(status: VerificationStatus | str) -> RiskBadge:
    if status == VerificationStatus.VERIFIED:
        return _low("Verified")
    if status == VerificationStatus.DISCREPANCY_FOUND:
        return _medium("Discrepancy")
    return _high("Unverified")


def property_confidence_risk_badge(confidence: ValuationConfidence | str) -> RiskBadge:
    if confidence == ValuationConfidence.HIGH:
        return _low("High Confidence")
    if confidence == ValuationConfidence.MEDIUM:
        return _medium("Medium Confidence")
    return _high("Low Confidence")


def risk_badges(metrics: RiskBadgeRequest) -> RiskBadgeResponse:
    """Band every supplied metric; omitted metrics get no badge."""
    return RiskBadgeResponse(
        credit=credit_risk_badge(metrics.credit_score) if metrics.credit_score is not None else None,
        dti=dti_risk_badge(metrics.back_end_dti) if metrics.back_end_dti is not None else None,
        ltv=ltv_risk_badge(metrics.ltv) if metrics.ltv is not None else None,
        income=income_risk_badge(metrics.income_status) if metrics.income_status else None,
        property_confidence=(
            property_confidence_risk_badge(metrics.valuation_confidence)
            if metrics.valuation_confidence
            else None
        ),
    )


_QUALIFICATION_BADGES: dict[QualificationStatus, StatusBadge] = {
    QualificationStatus.QUALIFIED: StatusBadge(label="Qualified", color_class=_GREEN),
    QualificationStatus.CONDITIONALLY_QUALIFIED: StatusBadge(label="Conditional", color_class=_YELLOW),
    QualificationStatus.NOT_QUALIFIED: StatusBadge(label="Not Qualified", color_class=_RED),
    QualificationStatus.PENDING: StatusBadge(label="Pending", color_class=_GRAY),
}


def qualification_badge(status: QualificationStatus) -> StatusBadge:
    return _QUALIFICATION_BADGES[status]


def credit_score_description(score: int) -> str:
    """Borrower-facing description of a credit score."""
    if score >= 750:
        return "Excellent credit - Best rates available"
    if score >= 700:
        return "Good credit - Competitive rates"
    if score >= 650:
        return "Fair credit - Standard rates"
    return "Poor credit - May require additional documentation"
