# This project was developed with assistance from AI tools.
"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from underwriting.main import app
from underwriting.services.rate_sheet import clear_rate_sheet_cache


@pytest.fixture(autouse=True)
def _fresh_rate_sheets():
    clear_rate_sheet_cache()
    yield
    clear_rate_sheet_cache()


@pytest.fixture
def client():
    return TestClient(app)
