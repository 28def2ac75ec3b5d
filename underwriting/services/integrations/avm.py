# This project was developed with assistance from AI tools.
"""Mock automated valuation model (AVM).

Values a property from a per-state price per square foot, a property-type
multiplier, and small age/bedroom/bathroom adjustments. Comparable sales are
drawn from a PRNG seeded by the property address, so the same property always
gets the same comparables.
"""

import logging
import random
from datetime import UTC, datetime, timedelta

from ...core.reference import make_reference_number
from ...enums import PropertyType, ValuationConfidence
from ...schemas.integrations import (
    AVMRequest,
    AVMResult,
    ComparableSale,
    MarketTrends,
    PropertyDetails,
    PropertySummary,
    PropertyValueCheck,
    Valuation,
)
from ..amortization import loan_to_value, round_half_up

logger = logging.getLogger(__name__)

STATE_PRICE_PER_SQFT: dict[str, int] = {
    "CA": 550, "NY": 450, "TX": 180, "FL": 280, "WA": 400,
    "CO": 350, "AZ": 280, "MA": 420, "IL": 200, "GA": 220,
    "NC": 200, "PA": 180, "NJ": 320, "VA": 280, "OH": 150,
}  # fmt: skip
DEFAULT_PRICE_PER_SQFT = 200

# States at or above this $/sqft are treated as hot markets
_HOT_MARKET_PRICE = 350

PROPERTY_TYPE_MULTIPLIER: dict[PropertyType, float] = {
    PropertyType.SINGLE_FAMILY: 1.0,
    PropertyType.TOWNHOUSE: 0.9,
    PropertyType.CONDO: 0.85,
    PropertyType.PUD: 0.95,
    PropertyType.MULTI_FAMILY: 1.1,
    PropertyType.MANUFACTURED: 0.7,
}

# Half-width of the value range by confidence
_RANGE_PCT = {
    ValuationConfidence.HIGH: 0.05,
    ValuationConfidence.MEDIUM: 0.08,
    ValuationConfidence.LOW: 0.12,
}

_DEFAULT_SQFT = 1800
_DEFAULT_BEDS = 3
_DEFAULT_BATHS = 2
_COMPARABLE_STREETS = ("Oak St", "Maple Ave", "Pine Dr", "Cedar Ln")


def _round_thousand(value: float) -> float:
    return round_half_up(value / 1000, 0) * 1000


def estimate_value(request: AVMRequest, *, year: int) -> tuple[float, ValuationConfidence, int]:
    """Return (value, confidence, confidence_score) for the subject property."""
    price = STATE_PRICE_PER_SQFT.get(request.state.upper(), DEFAULT_PRICE_PER_SQFT)
    sqft = request.square_feet or _DEFAULT_SQFT
    value = price * PROPERTY_TYPE_MULTIPLIER[request.property_type] * sqft

    if request.year_built:
        age = year - request.year_built
        if age < 5:
            value *= 1.05
        elif age < 10:
            value *= 1.02
        elif age > 50:
            value *= 0.95

    if (request.bedrooms or _DEFAULT_BEDS) >= 4:
        value *= 1.05
    if (request.bathrooms or _DEFAULT_BATHS) >= 3:
        value *= 1.03

    confidence_score = 70
    if request.square_feet:
        confidence_score += 10
    if request.year_built:
        confidence_score += 5
    if request.bedrooms and request.bathrooms:
        confidence_score += 10

    if confidence_score >= 90:
        confidence = ValuationConfidence.HIGH
    elif confidence_score >= 75:
        confidence = ValuationConfidence.MEDIUM
    else:
        confidence = ValuationConfidence.LOW

    return _round_thousand(value), confidence, confidence_score


def generate_comparables(
    request: AVMRequest, value: float, *, today: datetime
) -> list[ComparableSale]:
    """Four nearby sales within +/-10% of the subject value, nearest first."""
    rng = random.Random(f"{request.address}|{request.city}|{request.state}|{request.zip}".lower())
    sqft = request.square_feet or _DEFAULT_SQFT
    beds = request.bedrooms or _DEFAULT_BEDS
    baths = request.bathrooms or _DEFAULT_BATHS

    comparables = []
    for i, street in enumerate(_COMPARABLE_STREETS):
        variance = rng.uniform(-0.1, 0.1)
        comp_sqft = max(1000, sqft + rng.randint(-200, 199))
        comp_price = _round_thousand(value * (1 + variance))
        comparables.append(
            ComparableSale(
                address=f"{100 + i * 20 + rng.randint(0, 9)} {street}",
                sale_price=comp_price,
                sale_date=(today - timedelta(days=rng.randint(0, 179))).date(),
                square_feet=comp_sqft,
                bedrooms=beds + (1 if rng.random() > 0.7 else 0) - (1 if rng.random() > 0.7 else 0),
                bathrooms=baths + (0.5 if rng.random() > 0.8 else 0),
                distance=round_half_up(rng.uniform(0.2, 1.7), 1),
                adjusted_price=_round_thousand(comp_price * sqft / comp_sqft),
            )
        )
    return sorted(comparables, key=lambda c: c.distance)


def _purchase_price_note(value: float, purchase_price: float) -> str:
    diff = (value - purchase_price) / purchase_price * 100
    if diff > 5:
        return f"Estimated value is {diff:.1f}% above purchase price - favorable."
    if diff < -5:
        return f"Estimated value is {abs(diff):.1f}% below purchase price - may require review."
    return "Estimated value is within 5% of purchase price - reasonable."


def get_property_valuation(request: AVMRequest, *, now: datetime | None = None) -> AVMResult:
    """Run the AVM for one property."""
    now = now or datetime.now(UTC)
    value, confidence, confidence_score = estimate_value(request, year=now.year)

    range_pct = _RANGE_PCT[confidence]
    sqft = request.square_feet or _DEFAULT_SQFT
    comparables = generate_comparables(request, value, today=now)

    notes = [
        f"Valuation based on {len(comparables)} comparable sales within 2 miles.",
        f"Market activity indicates {confidence.value.lower()} confidence level.",
    ]
    if request.purchase_price:
        notes.append(_purchase_price_note(value, request.purchase_price))

    hot_market = (
        STATE_PRICE_PER_SQFT.get(request.state.upper(), DEFAULT_PRICE_PER_SQFT) >= _HOT_MARKET_PRICE
    )

    logger.info("AVM valuation for %s: %s (%s)", request.zip, value, confidence.value)
    return AVMResult(
        success=True,
        reference_number=make_reference_number("AVM", now),
        valuation_date=now,
        property=PropertySummary(
            address=request.address,
            city=request.city,
            state=request.state,
            zip=request.zip,
            property_type=request.property_type,
        ),
        valuation=Valuation(
            estimated_value=value,
            low_range=_round_thousand(value * (1 - range_pct)),
            high_range=_round_thousand(value * (1 + range_pct)),
            confidence_score=confidence_score,
            confidence=confidence,
            price_per_sq_ft=round_half_up(value / sqft, 0),
        ),
        comparables=comparables,
        market_trends=MarketTrends(
            year_over_year_change=8.5 if hot_market else 5.2,
            month_over_month_change=0.4,
            median_days_on_market=14 if hot_market else 28,
            inventory_level="Low" if hot_market else "Normal",
        ),
        property_details=PropertyDetails(
            square_feet=sqft,
            lot_size=sqft * 3,
            year_built=request.year_built or 2000,
            bedrooms=request.bedrooms or _DEFAULT_BEDS,
            bathrooms=request.bathrooms or _DEFAULT_BATHS,
        ),
        notes=notes,
    )


def ltv_risk_level(loan_amount: float, property_value: float) -> tuple[float, str]:
    """LTV (one decimal) and a short risk description."""
    ltv = loan_to_value(loan_amount, property_value)
    if ltv <= 80:
        level = "Low - No PMI required"
    elif ltv <= 90:
        level = "Moderate - PMI required"
    elif ltv <= 95:
        level = "Elevated - Higher PMI"
    elif ltv <= 97:
        level = "High - Maximum conventional"
    else:
        level = "Exceeds conventional limits"
    return ltv, level


def validate_property_value(
    purchase_price: float, appraised_value: float, loan_amount: float
) -> PropertyValueCheck:
    """Check the loan against the lower of purchase price and appraised value."""
    usable_value = min(purchase_price, appraised_value)
    ltv, _ = ltv_risk_level(loan_amount, usable_value)

    notes: list[str] = []
    valid = True
    if appraised_value < purchase_price:
        notes.append(
            f"Appraised value (${appraised_value:,.0f}) is below purchase price "
            f"(${purchase_price:,.0f})."
        )
        notes.append("Loan amount will be based on appraised value.")

    if ltv > 97:
        valid = False
        notes.append("LTV exceeds 97% - does not meet conventional loan requirements.")
    elif ltv > 95:
        notes.append("LTV exceeds 95% - limited loan program options.")
    elif ltv > 80:
        notes.append("LTV exceeds 80% - Private Mortgage Insurance (PMI) required.")

    return PropertyValueCheck(valid=valid, usable_value=usable_value, ltv=ltv, notes=notes)
