"""Shared test fixtures for the Succession Advisor tests."""
import pytest
from fastapi.testclient import TestClient

from data_models import SuccessionInput


FAMILY_EXAMPLE = {
    "successor_identified": "yes",
    "successor_type": "family",
    "timeframe": "under_2y",
    "owner_age": 62,
    "is_family_business": "yes",
    "employee_count": 55,
    "annual_revenue": "over_10m",
    "emotional_attachment": "high",
}

SALE_EXAMPLE = {
    "successor_identified": "no",
    "timeframe": "over_5y",
    "annual_revenue": "over_10m",
    "employee_count": 25,
}


@pytest.fixture
def family_answers():
    return dict(FAMILY_EXAMPLE)


@pytest.fixture
def sale_answers():
    return dict(SALE_EXAMPLE)


@pytest.fixture
def family_input():
    """Identified family successor, urgent handover, large family business."""
    return SuccessionInput(**FAMILY_EXAMPLE)


@pytest.fixture
def sale_input():
    """No successor in sight: falls back to a sale."""
    return SuccessionInput(**SALE_EXAMPLE)


@pytest.fixture
def client():
    """API test client with dependency overrides cleared afterwards."""
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
