"""Tests for the FastAPI service."""

import pytest
from fakes import FakeValidator
from fastapi.testclient import TestClient

from phonecheck.api.app import app, get_validator
from phonecheck.api_manager.base import MISSING_COUNTRY_MESSAGE, MISSING_NUMBER_MESSAGE
from phonecheck.core.controller import FAILURE_MESSAGE


@pytest.fixture
def validator():
    fake = FakeValidator(payload={"valid": True, "country": {"name": "India"}, "type": "mobile"})
    app.dependency_overrides[get_validator] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "ok"


def test_countries(client):
    options = client.get("/countries").json()
    assert options[2] == {"value": "+91", "label": "🇮🇳 India (+91)", "code": "IN"}


def test_validate_success(client, validator):
    response = client.post("/validate", json={"prefix": "+91", "number": "9876543210"})

    assert response.status_code == 200
    body = response.json()
    assert body["panel"] == "results"
    assert body["phone_number"] == "+919876543210"
    assert body["rows"][0] == {"label": "Validation Status", "value": "Valid", "style": "valid"}
    assert [r["label"] for r in body["rows"]] == [
        "Validation Status", "Phone Number", "Country", "Line Type",
    ]


def test_validate_numeric_fields_are_rendered(client):
    app.dependency_overrides[get_validator] = lambda: FakeValidator(
        payload={"valid": True, "country": {"name": "India"}, "location": 42, "carrier": 7}
    )
    try:
        response = client.post("/validate", json={"prefix": "+91", "number": "9876543210"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    rows = {r["label"]: r["value"] for r in response.json()["rows"]}
    assert rows["Location"] == "42"
    assert rows["Carrier"] == "7"


@pytest.mark.parametrize(
    "body,message",
    [
        ({"prefix": "", "number": "123"}, MISSING_COUNTRY_MESSAGE),
        ({"prefix": "+1", "number": "  "}, MISSING_NUMBER_MESSAGE),
    ],
)
def test_validate_input_errors(client, validator, body, message):
    response = client.post("/validate", json=body)

    assert response.status_code == 400
    assert response.json()["detail"] == message
    assert validator.requests == []


def test_validate_provider_failure(client):
    app.dependency_overrides[get_validator] = lambda: FakeValidator(fail=True)
    try:
        response = client.post("/validate", json={"prefix": "+1", "number": "4155550100"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 502
    assert response.json()["detail"] == FAILURE_MESSAGE
