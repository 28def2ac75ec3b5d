# This project was developed with assistance from AI tools.
"""Rate sheet registry -- loads per-market pricing configuration from YAML.

Each market is a YAML file in ``settings.RATE_SHEET_DIR`` named
``<market>.yaml`` and validated into a RateSheet. Sheets are cached and
re-read when the file's mtime changes. If a reload fails (bad YAML or a
table that no longer validates), the last valid sheet is kept and a warning
is logged.
"""

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.config import settings
from ..schemas.policy import DEFAULT_RATE_SHEET, RateSheet

logger = logging.getLogger(__name__)

_MARKET_NAME = re.compile(r"^[a-z0-9][a-z0-9_-]*$")

# Loaded sheet cache: path -> (sheet, mtime)
_sheets: dict[Path, tuple[RateSheet, float]] = {}


class RateSheetError(ValueError):
    """A rate sheet file exists but cannot be parsed or validated."""


def _sheet_path(market: str, sheet_dir: Path | None = None) -> Path:
    if not _MARKET_NAME.match(market):
        raise RateSheetError(f"Invalid market name: {market!r}")
    return (sheet_dir or settings.RATE_SHEET_DIR) / f"{market}.yaml"


def load_rate_sheet(market: str, sheet_dir: Path | None = None) -> RateSheet:
    """Read and validate a single market's YAML rate sheet (uncached)."""
    path = _sheet_path(market, sheet_dir)
    if not path.exists():
        raise FileNotFoundError(f"Rate sheet not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise RateSheetError(f"Rate sheet {path.name} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise RateSheetError(f"Rate sheet {path.name} must be a mapping")

    data.setdefault("market", market)
    try:
        return RateSheet.model_validate(data)
    except ValidationError as exc:
        raise RateSheetError(f"Rate sheet {path.name} failed validation: {exc}") from exc


def get_rate_sheet(market: str | None = None, sheet_dir: Path | None = None) -> RateSheet:
    """Return the rate sheet for ``market`` (default: settings.RATE_SHEET_MARKET).

    The built-in DEFAULT_RATE_SHEET is used when the default market has no
    file on disk. Any other missing market raises FileNotFoundError.
    """
    market = market or settings.RATE_SHEET_MARKET
    path = _sheet_path(market, sheet_dir)

    try:
        current_mtime = path.stat().st_mtime
    except FileNotFoundError:
        if path in _sheets:
            logger.warning("Rate sheet disappeared for %s, using cached sheet", market)
            return _sheets[path][0]
        if market == "default":
            return DEFAULT_RATE_SHEET
        raise FileNotFoundError(f"Rate sheet not found: {path}") from None

    if path in _sheets:
        cached_sheet, cached_mtime = _sheets[path]
        if current_mtime <= cached_mtime:
            return cached_sheet

    try:
        sheet = load_rate_sheet(market, sheet_dir)
    except RateSheetError as exc:
        if path in _sheets:
            logger.warning(
                "Failed to reload rate sheet for %s (%s), keeping last valid sheet",
                market,
                exc,
            )
            _sheets[path] = (_sheets[path][0], current_mtime)
            return _sheets[path][0]
        raise

    _sheets[path] = (sheet, current_mtime)
    logger.info("Loaded rate sheet for market %s", market)
    return sheet


def clear_rate_sheet_cache() -> None:
    """Clear all cached rate sheets (useful for testing)."""
    _sheets.clear()


def list_markets(sheet_dir: Path | None = None) -> list[str]:
    """Return names of all markets with a rate sheet on disk."""
    directory = sheet_dir or settings.RATE_SHEET_DIR
    if not directory.exists():
        return []
    return sorted(p.stem for p in directory.glob("*.yaml"))
