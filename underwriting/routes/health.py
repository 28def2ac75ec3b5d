# This project was developed with assistance from AI tools.
"""Liveness check: the API itself plus the configured rate sheet."""

import logging

from fastapi import APIRouter

from .. import __version__
from ..core.config import settings
from ..schemas.health import HealthItem
from ..services.rate_sheet import RateSheetError, get_rate_sheet

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=list[HealthItem])
async def health_check() -> list[HealthItem]:
    """Report API status and whether the default rate sheet loads."""
    items = [HealthItem(name="API", status="healthy", message="Running", version=__version__)]
    try:
        sheet = get_rate_sheet(settings.RATE_SHEET_MARKET)
    except (FileNotFoundError, RateSheetError) as exc:
        logger.warning("Rate sheet health check failed: %s", exc)
        items.append(HealthItem(name="Rate Sheet", status="unhealthy", message=str(exc)))
    else:
        items.append(
            HealthItem(
                name="Rate Sheet",
                status="healthy",
                message=f"Market '{sheet.market}' effective {sheet.effective_date}",
            )
        )
    return items
