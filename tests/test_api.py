"""
HTTP surface, exercised in-process through FastAPI's TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from core.ledger import aggregate
from main import app

client = TestClient(app)

DAY = {
    "meals": [
        {"type": "breakfast", "time": "08:00", "items": [{"name": "Eggs", "calories": 220, "protein": 14}]},
        {"type": "dinner", "items": [{"name": "Pasta", "calories": 650}, {"name": "Typo", "calories": -40}]},
    ],
    "calories_burned": 300,
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_calculate():
    r = client.post("/api/v1/calories/calculate", json=DAY)
    assert r.status_code == 200
    data = r.json()
    assert data["total_calories"] == 870
    assert data["calories_burned"] == 300
    assert data["balance"] == 570
    assert [m["type"] for m in data["meals"]] == ["breakfast", "dinner"]
    assert data["meals"][0]["totals"]["protein"] == 14
    assert data["meals"][0]["time"] == "08:00"


def test_calculate_matches_in_process_aggregate():
    body = {"meals": [{"type": "lunch", "items": [{"name": "Soup", "calories": 250}]}], "calories_burned": 100}
    r = client.post("/api/v1/calories/calculate", json=body)
    assert r.status_code == 200
    assert r.json() == aggregate(body["meals"], body["calories_burned"])
    # no keys invented for absent fields, integer totals stay integers
    assert "time" not in r.json()["meals"][0]
    assert isinstance(r.json()["total_calories"], int)


def test_calculate_is_replayable():
    first = client.post("/api/v1/calories/calculate", json=DAY).json()
    second = client.post("/api/v1/calories/calculate", json=DAY).json()
    assert first == second


def test_calculate_defaults():
    r = client.post("/api/v1/calories/calculate", json={})
    assert r.status_code == 200
    assert r.json()["total_calories"] == 0
    assert r.json()["balance"] == 0


def test_calculate_malformed_items():
    r = client.post("/api/v1/calories/calculate", json={"meals": [{"type": "lunch", "items": None}]})
    assert r.status_code == 400
    assert "items" in r.json()["error"]


def test_calculate_non_object_body():
    r = client.post("/api/v1/calories/calculate", json=[1, 2, 3])
    assert r.status_code == 422
    assert isinstance(r.json()["error"], str)


def test_calculate_preflight():
    r = client.options(
        "/api/v1/calories/calculate",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert "access-control-allow-origin" in r.headers


def test_history():
    rows = [
        {"date": "2024-05-01", "total_calories": 2000, "calories_burned": 250},
        {"date": "2024-05-02", "total_calories": 1800, "calories_burned": 400},
    ]
    r = client.post("/api/v1/calories/history", json={"rows": rows})
    assert r.status_code == 200
    data = r.json()
    assert data["days"][0]["date"] == "2024-05-02"
    assert data["average_balance"] == pytest.approx(1575.0)


def test_history_rows_not_a_list():
    r = client.post("/api/v1/calories/history", json={"rows": "yesterday"})
    assert r.status_code == 400


def test_estimate():
    body = {
        "gender": "female",
        "age": 28,
        "height_cm": 170,
        "weight_kg": 65,
        "activity_level": "low",
        "goal": "lose_weight",
    }
    r = client.post("/api/v1/energy/estimate", json=body)
    assert r.status_code == 200
    data = r.json()
    expected_bmr = 447.6 + 9.2 * 65 + 3.1 * 170 - 4.3 * 28
    assert data["bmr"] == pytest.approx(expected_bmr)
    assert data["tdee"] == round(expected_bmr * 1.2)
    assert data["target_calories"] == data["tdee"] - 500


def test_estimate_unknown_activity():
    body = {"gender": "male", "age": 30, "height_cm": 180, "weight_kg": 80, "activity_level": "couch"}
    r = client.post("/api/v1/energy/estimate", json=body)
    assert r.status_code == 400
    assert "activity" in r.json()["error"]


def test_steps_and_water():
    r = client.post("/api/v1/activity/steps", json={"steps": 5000})
    assert r.status_code == 200
    assert r.json() == {"steps": 5000, "distance_km": 4.0, "calories_burned": 220.0}

    r = client.post("/api/v1/activity/water", json={"total_ml": 1000})
    assert r.json()["progress_pct"] == 50.0


def test_negative_steps_rejected():
    r = client.post("/api/v1/activity/steps", json={"steps": -5})
    assert r.status_code == 400
