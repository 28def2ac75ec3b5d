# This project was developed with assistance from AI tools.
"""
Domain enums for mortgage pricing and underwriting.

Shared domain types used by the pricing engine, the qualification engine,
the mock integrations, and the Pydantic schemas. Values match the wire
strings the application wizard and underwriting console exchange.
"""

import enum


class LoanType(str, enum.Enum):
    CONVENTIONAL = "Conventional"
    FHA = "FHA"
    VA = "VA"
    USDA = "USDA"
    JUMBO = "Jumbo"


class LoanPurpose(str, enum.Enum):
    PURCHASE = "Purchase"
    REFINANCE = "Refinance"
    CASH_OUT = "CashOut"


class PropertyOccupancy(str, enum.Enum):
    PRIMARY_RESIDENCE = "PrimaryResidence"
    SECOND_HOME = "SecondHome"
    INVESTMENT = "Investment"


class PropertyType(str, enum.Enum):
    SINGLE_FAMILY = "SingleFamily"
    CONDO = "Condo"
    TOWNHOUSE = "Townhouse"
    MULTI_FAMILY = "MultiFamily"
    MANUFACTURED = "Manufactured"
    PUD = "PUD"


class EmploymentType(str, enum.Enum):
    FULL_TIME = "Full-Time"
    PART_TIME = "Part-Time"
    CONTRACT = "Contract"
    SELF_EMPLOYED = "Self-Employed"


class VerificationStatus(str, enum.Enum):
    """Outcome of an employment/income verification."""

    VERIFIED = "Verified"
    UNABLE_TO_VERIFY = "Unable to Verify"
    DISCREPANCY_FOUND = "Discrepancy Found"


class ValuationConfidence(str, enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class CreditCategory(str, enum.Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class RiskLevel(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QualificationStatus(str, enum.Enum):
    QUALIFIED = "qualified"
    CONDITIONALLY_QUALIFIED = "conditionally_qualified"
    NOT_QUALIFIED = "not_qualified"
    PENDING = "pending"


class SlotState(str, enum.Enum):
    """Lifecycle of one underwriting check slot."""

    NOT_RUN = "not_run"
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def ran(cls) -> frozenset["SlotState"]:
        """States where the check has been executed (successfully or not)."""
        return frozenset({cls.COMPLETED, cls.FAILED})
