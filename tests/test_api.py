"""Tests for HTTP endpoints."""

from uuid import uuid4

import httpx
import pytest
from fastapi.testclient import TestClient

from nutrient_profiler.api.app import create_app
from nutrient_profiler.containers import AppContainer
from tests.conftest import SODA_FDC_ID

_HEADERS = {"X-Api-Token": "api-token"}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_normalize_analytic_entries(client: TestClient) -> None:
    payload = {
        "analytic_entries": [
            {"name": "Energy", "value": 130},
            {"name": "carbohydrate", "value": "28"},
            {"name": "Sugars, total", "value": 0.5},
        ],
        "label": {"calories": 999, "serving_size": 10, "serving_unit": "g"},
        "portion_grams": 200,
    }

    response = client.post("/nutrition/normalize", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["basis"] == "analytic_per_100g"
    assert data["profile"]["calories"] == pytest.approx(260)
    assert data["profile"]["carbs"] == pytest.approx(56)
    assert data["profile"]["fiber"] == 0
    assert data["risk_tier"] == "High"


def test_normalize_gram_label(client: TestClient) -> None:
    payload = {
        "label": {
            "calories": 200,
            "carbs": "10",
            "serving_size": 50,
            "serving_unit": "g",
        },
        "portion_grams": 100,
    }

    response = client.post("/nutrition/normalize", json=payload)

    data = response.json()
    assert data["basis"] == "label_per_serving"
    assert data["profile"]["calories"] == pytest.approx(400)
    assert data["risk_tier"] == "Moderate"


def test_normalize_non_gram_label_ignores_portion(client: TestClient) -> None:
    payload = {
        "label": {
            "calories": 150,
            "sugar": 9,
            "serving_size": 1,
            "serving_unit": "cup",
        },
        "portion_grams": 750,
    }

    data = client.post("/nutrition/normalize", json=payload).json()

    assert data["basis"] == "label_raw"
    assert data["profile"]["calories"] == 150
    assert data["risk_tier"] == "Low"


def test_normalize_empty_record(client: TestClient) -> None:
    data = client.post("/nutrition/normalize", json={"portion_grams": 100}).json()

    assert data == {
        "profile": {
            "calories": 0.0,
            "carbs": 0.0,
            "sugar": 0.0,
            "protein": 0.0,
            "fat": 0.0,
            "fiber": 0.0,
        },
        "basis": "none",
        "risk_tier": "Low",
    }


@pytest.mark.parametrize("portion", [0, -10, 10_001, 1e308])
def test_normalize_rejects_out_of_range_portion(
    client: TestClient, portion: float
) -> None:
    response = client.post("/nutrition/normalize", json={"portion_grams": portion})

    assert response.status_code == 422


def test_search_returns_summaries(client: TestClient) -> None:
    response = client.get("/nutrition/search", params={"query": "cola", "limit": 1})

    assert response.status_code == 200
    assert response.json()["foods"][0]["fdc_id"] == SODA_FDC_ID


def test_analyze_requires_token(client: TestClient) -> None:
    response = client.post(
        "/meals/analyze", json={"user_id": str(uuid4()), "food_name": "oatmeal"}
    )

    assert response.status_code == 401


def test_analyze_and_history(client: TestClient) -> None:
    user_id = str(uuid4())

    response = client.post(
        "/meals/analyze",
        json={
            "user_id": user_id,
            "food_name": "cola",
            "portion_grams": 100,
            "confidence": 0.4,
        },
        headers=_HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["fdc_id"] == SODA_FDC_ID
    assert data["nutrition"]["basis"] == "label_per_serving"
    assert data["nutrition"]["risk_tier"] == "High"
    assert len(data["warnings"]) == 2

    history = client.get(f"/meals/history/{user_id}", headers=_HEADERS)

    assert history.status_code == 200
    items = history.json()["items"]
    assert [item["id"] for item in items] == [data["id"]]
    assert items[0]["profile"]["calories"] == pytest.approx(400)


def test_analyze_provider_failure_returns_bad_gateway(
    container: AppContainer, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def failing_resolve(food_name: str) -> None:
        raise httpx.ConnectError("provider down")

    monkeypatch.setattr(container.nutrition_service, "resolve", failing_resolve)
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/analyze",
        json={"user_id": str(uuid4()), "food_name": "oatmeal"},
        headers=_HEADERS,
    )

    assert response.status_code == 502


def test_normalize_treats_boolean_values_as_unknown(client: TestClient) -> None:
    payload = {
        "analytic_entries": [
            {"name": "Energy", "value": True},
            {"name": "Protein", "value": False},
        ],
        "label": {"calories": True, "serving_size": 50, "serving_unit": "g"},
        "portion_grams": 100,
    }

    data = client.post("/nutrition/normalize", json=payload).json()

    assert data["basis"] == "label_per_serving"
    assert set(data["profile"].values()) == {0.0}


def test_normalize_boolean_only_record_has_no_basis(client: TestClient) -> None:
    payload = {
        "analytic_entries": [{"name": "Energy", "value": True}],
        "portion_grams": 100,
    }

    data = client.post("/nutrition/normalize", json=payload).json()

    assert data["basis"] == "none"
    assert set(data["profile"].values()) == {0.0}


def test_normalize_accepts_maximum_portion(client: TestClient) -> None:
    payload = {
        "analytic_entries": [{"name": "Energy", "value": 900}],
        "portion_grams": 10_000,
    }

    data = client.post("/nutrition/normalize", json=payload).json()

    assert data["profile"]["calories"] == pytest.approx(90_000)


@pytest.mark.parametrize("limit", [0, -3, 51])
def test_search_rejects_out_of_range_limit(client: TestClient, limit: int) -> None:
    response = client.get("/nutrition/search", params={"query": "cola", "limit": limit})

    assert response.status_code == 422


@pytest.mark.parametrize("limit", [0, 101])
def test_history_rejects_out_of_range_limit(client: TestClient, limit: int) -> None:
    response = client.get(
        f"/meals/history/{uuid4()}", params={"limit": limit}, headers=_HEADERS
    )

    assert response.status_code == 422


def test_analyze_rejects_oversized_estimate(client: TestClient) -> None:
    response = client.post(
        "/meals/analyze",
        json={
            "user_id": str(uuid4()),
            "food_name": "oatmeal",
            "estimated_portion_grams": 1e308,
        },
        headers=_HEADERS,
    )

    assert response.status_code == 422
