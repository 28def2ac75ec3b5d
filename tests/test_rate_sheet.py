# This project was developed with assistance from AI tools.
"""Tests for rate sheet loading, validation, and caching."""

import logging
import os

import pytest
import yaml
from pydantic import ValidationError

from underwriting.enums import LoanType, PropertyType
from underwriting.schemas.policy import DEFAULT_RATE_SHEET, Band, RateSheet
from underwriting.services.rate_sheet import (
    RateSheetError,
    get_rate_sheet,
    list_markets,
    load_rate_sheet,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sheet_data(**overrides) -> dict:
    data = DEFAULT_RATE_SHEET.model_dump(mode="json")
    data.pop("market")
    data.update(overrides)
    return data


def _write_sheet(directory, market, data) -> None:
    (directory / f"{market}.yaml").write_text(yaml.safe_dump(data))


def _bump_mtime(path) -> None:
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + 10))


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadRateSheet:
    def test_loads_and_names_market(self, tmp_path):
        """Market defaults to the file name when the YAML omits it."""
        _write_sheet(tmp_path, "coastal", _sheet_data())
        sheet = load_rate_sheet("coastal", tmp_path)
        assert sheet.market == "coastal"
        assert sheet.base_rates[LoanType.CONVENTIONAL] == 6.75

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rate_sheet("nowhere", tmp_path)

    def test_invalid_market_name(self, tmp_path):
        with pytest.raises(RateSheetError):
            load_rate_sheet("../secrets", tmp_path)

    def test_not_a_mapping(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("- just\n- a list\n")
        with pytest.raises(RateSheetError, match="must be a mapping"):
            load_rate_sheet("broken", tmp_path)

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("base_rates: [unclosed\n")
        with pytest.raises(RateSheetError, match="not valid YAML"):
            load_rate_sheet("broken", tmp_path)

    def test_incomplete_category_table(self, tmp_path):
        """Every property type must have an entry."""
        data = _sheet_data()
        del data["property_type_adjustments"]["PUD"]
        _write_sheet(tmp_path, "partial", data)
        with pytest.raises(RateSheetError, match="PUD"):
            load_rate_sheet("partial", tmp_path)

    def test_shipped_sheets_validate(self):
        """Every sheet in config/rate_sheets loads cleanly."""
        markets = list_markets()
        assert "default" in markets
        for market in markets:
            assert load_rate_sheet(market).market == market

    def test_shipped_default_matches_builtin(self):
        sheet = load_rate_sheet("default")
        assert sheet.base_rates == DEFAULT_RATE_SHEET.base_rates
        assert sheet.credit_bands == DEFAULT_RATE_SHEET.credit_bands
        assert sheet.ltv_bands == DEFAULT_RATE_SHEET.ltv_bands
        assert sheet.property_type_adjustments == DEFAULT_RATE_SHEET.property_type_adjustments


# ---------------------------------------------------------------------------
# Model validation
# ---------------------------------------------------------------------------


class TestRateSheetValidation:
    def test_credit_bands_must_descend(self):
        data = _sheet_data(
            credit_bands=[{"threshold": 640, "impact": 250}, {"threshold": 780, "impact": -25}]
        )
        with pytest.raises(ValidationError, match="descending"):
            RateSheet.model_validate(data)

    def test_ltv_bands_must_ascend(self):
        data = _sheet_data(
            ltv_bands=[{"threshold": 95, "impact": 75}, {"threshold": 60, "impact": -25}]
        )
        with pytest.raises(ValidationError, match="ascending"):
            RateSheet.model_validate(data)

    def test_points_options_unique(self):
        with pytest.raises(ValidationError, match="points_options"):
            RateSheet.model_validate(_sheet_data(points_options=[0, 1, 1]))

    @pytest.mark.parametrize("options", [[], [1, 2]])
    def test_points_options_require_par(self, options):
        """Every sheet must offer the zero-point scenario the quote is built on."""
        with pytest.raises(ValidationError, match="points_options must include 0"):
            RateSheet.model_validate(_sheet_data(points_options=options))

    def test_sheet_is_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_RATE_SHEET.lock_period_days = 60

    def test_band_rows(self):
        assert DEFAULT_RATE_SHEET.term_bands[0] == Band(threshold=180, impact=-50)
        assert DEFAULT_RATE_SHEET.property_type_adjustments[PropertyType.PUD] == 0


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class TestGetRateSheet:
    def test_cached_until_file_changes(self, tmp_path):
        _write_sheet(tmp_path, "coastal", _sheet_data())
        first = get_rate_sheet("coastal", tmp_path)
        assert get_rate_sheet("coastal", tmp_path) is first

        data = _sheet_data(lock_period_days=60)
        _write_sheet(tmp_path, "coastal", data)
        _bump_mtime(tmp_path / "coastal.yaml")
        assert get_rate_sheet("coastal", tmp_path).lock_period_days == 60

    def test_bad_reload_keeps_last_valid(self, tmp_path, caplog):
        """A broken edit does not take the market offline."""
        _write_sheet(tmp_path, "coastal", _sheet_data())
        good = get_rate_sheet("coastal", tmp_path)

        (tmp_path / "coastal.yaml").write_text("base_rates: [unclosed\n")
        _bump_mtime(tmp_path / "coastal.yaml")
        with caplog.at_level(logging.WARNING):
            assert get_rate_sheet("coastal", tmp_path) is good
        assert "keeping last valid sheet" in caplog.text

    def test_bad_first_load_raises(self, tmp_path):
        (tmp_path / "coastal.yaml").write_text("base_rates: [unclosed\n")
        with pytest.raises(RateSheetError):
            get_rate_sheet("coastal", tmp_path)

    def test_missing_default_uses_builtin(self, tmp_path):
        assert get_rate_sheet("default", tmp_path) is DEFAULT_RATE_SHEET

    def test_missing_market_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_rate_sheet("nowhere", tmp_path)

    def test_list_markets(self, tmp_path):
        _write_sheet(tmp_path, "coastal", _sheet_data())
        _write_sheet(tmp_path, "rural", _sheet_data())
        assert list_markets(tmp_path) == ["coastal", "rural"]

    def test_list_markets_missing_dir(self, tmp_path):
        assert list_markets(tmp_path / "absent") == []
