# This project was developed with assistance from AI tools.
"""Reference numbers for quotes and provider results."""

import uuid
from datetime import datetime


def make_reference_number(prefix: str, now: datetime) -> str:
    """Build a reference like ``PR-1767225600000-a1b2c3`` (epoch millis + random suffix)."""
    return f"{prefix}-{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:6]}"
