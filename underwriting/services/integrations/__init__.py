# This project was developed with assistance from AI tools.
"""Mock third-party providers -- credit bureau, income verification, AVM."""

from .avm import get_property_valuation, ltv_risk_level, validate_property_value
from .credit import credit_rate_adjustment, simulate_credit_pull
from .income import income_stability_score, verify_income

__all__ = [
    "credit_rate_adjustment",
    "get_property_valuation",
    "income_stability_score",
    "ltv_risk_level",
    "simulate_credit_pull",
    "validate_property_value",
    "verify_income",
]
