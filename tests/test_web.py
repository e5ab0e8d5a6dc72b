"""Tests for the JSON API."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from coach.web import create_app

PROFILE = {
    "name": "Test Runner",
    "weight_kg": 70,
    "height_cm": 175,
    "age": 30,
    "sex": "male",
}


@pytest.fixture
def client(data_dir):
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def athlete(client):
    response = client.put("/profile", json=PROFILE)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def race_goal(client, athlete):
    race_date = date.today() + timedelta(days=91)
    response = client.put(
        "/profile/goal",
        json={
            "goal": {
                "type": "endurance",
                "distance": "21K",
                "level": "intermediate",
                "target_date": race_date.isoformat(),
                "target_time": "1:45:00",
            }
        },
    )
    assert response.status_code == 200
    return response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProfileRoutes:
    """Tests for /profile."""

    def test_no_profile(self, client):
        assert client.get("/profile").status_code == 404

    def test_create_profile(self, athlete):
        assert athlete["id"] is not None
        assert athlete["effective_max_heart_rate"] == 190
        assert athlete["goals"]["primary"]["type"] == "body_composition"

    def test_update_keeps_goals(self, client, race_goal):
        response = client.put("/profile", json={**PROFILE, "weight_kg": 68})
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == race_goal["id"]
        assert data["weight_kg"] == 68
        assert data["goals"]["primary"]["type"] == "endurance"

    def test_invalid_profile(self, client):
        response = client.put("/profile", json={**PROFILE, "weight_kg": 0})
        assert response.status_code == 422

    def test_invalid_weight(self, client, athlete):
        response = client.post("/profile/weight", json={"weight_kg": 0})
        assert response.status_code == 422

    def test_unknown_goal_type(self, client, athlete):
        response = client.put("/profile/goal", json={"goal": {"type": "yoga"}})
        assert response.status_code == 422
        assert "Unknown goal type" in response.json()["detail"]

    @pytest.mark.parametrize(
        "fields",
        [
            {"distance": "21K", "target_date": 20250101},
            {"distance": None, "custom_distance": "abc"},
            {"distance": "21K", "target_time": "fast"},
        ],
    )
    def test_malformed_goal_rejected(self, client, athlete, fields):
        response = client.put("/profile/goal", json={"goal": {"type": "endurance", **fields}})
        assert response.status_code == 422
        assert client.get("/profile").json()["goals"]["primary"]["type"] == "body_composition"

    def test_secondary_goal(self, client, race_goal):
        response = client.put(
            "/profile/goal",
            json={"goal": {"type": "strength", "focus": "strength"}, "secondary": True},
        )
        assert response.status_code == 200
        goals = response.json()["goals"]
        assert goals["primary"]["type"] == "endurance"
        assert goals["secondary"]["focus"] == "strength"

    def test_heart_rate_zones(self, client, athlete):
        data = client.get("/profile/heart-rate-zones").json()
        assert data["estimated"] is True
        assert data["zones"]["z1"] == {"label": "Recovery", "min_bpm": 95, "max_bpm": 114}

    def test_body_composition(self, client, athlete):
        response = client.post(
            "/profile/body-composition",
            json={"weight_kg": 80, "body_fat_percentage": 20},
        )
        assert response.status_code == 201
        assert response.json()["lean_mass_kg"] == pytest.approx(64)

        history = client.get("/profile/body-composition").json()
        assert len(history) == 1
        assert client.get("/profile").json()["weight_kg"] == 80


class TestNutritionRoutes:
    """Tests for /nutrition."""

    def test_targets_for_day_type(self, client, athlete):
        data = client.get("/nutrition/targets", params={"day_type": "easy"}).json()
        assert data["calories"] == 2844
        assert data["protein"] == 126
        assert data["carbs"] == 280
        assert data["fat"] == 136

    def test_unknown_day_type_rejected(self, client, athlete):
        response = client.get("/nutrition/targets", params={"day_type": "party"})
        assert response.status_code == 422

    def test_food_log(self, client, athlete):
        response = client.post(
            "/nutrition/entries",
            json={"name": "Oats", "quantity": 80, "calories": 300, "protein": 10, "carbs": 54, "fat": 5},
        )
        assert response.status_code == 201
        entry_id = response.json()["id"]

        day = client.get("/nutrition/day").json()
        assert [e["name"] for e in day["entries"]] == ["Oats"]
        assert day["totals"]["calories"] == 300
        assert day["remaining"]["calories"] == day["targets"]["calories"] - 300

        assert client.delete(f"/nutrition/entries/{entry_id}").status_code == 204
        assert client.delete(f"/nutrition/entries/{entry_id}").status_code == 404

    def test_history(self, client, athlete):
        data = client.get("/nutrition/history", params={"days": 3}).json()
        assert len(data) == 3
        assert data[0]["date"] == date.today().isoformat()

    def test_meals(self, client):
        data = client.get("/nutrition/meals").json()
        assert any(m["key"] == "protein_snack" for m in data)


class TestTrainingRoutes:
    """Tests for /training."""

    def test_plan(self, client, race_goal):
        data = client.get("/training/plan", params={"current_km": 0}).json()
        assert data["total_weeks"] == 13
        assert data["weeks"][0]["planned_distance_km"] == 25.3

    def test_current_week(self, client, race_goal):
        data = client.get("/training/current", params={"current_km": 0}).json()
        assert data["days_to_race"] == 91
        assert data["week"]["week_number"] == 1

    def test_plan_needs_endurance_goal(self, client, athlete):
        response = client.get("/training/plan")
        assert response.status_code == 422

    def test_pace_zones_from_goal(self, client, race_goal):
        data = client.get("/training/pace-zones").json()
        assert data["target_pace"] == "4:59/km"
        assert len(data["zones"]) == 6

    def test_predict(self, client):
        data = client.get(
            "/training/predict",
            params={"known_km": 10, "known_time": "50:00", "target_km": 10},
        ).json()
        assert data["seconds"] == 3000
        assert data["time"] == "50:00"
        assert data["pace"] == "5:00/km"


class TestStrengthRoutes:
    def test_phase(self, client):
        data = client.get("/strength/phase/base").json()
        assert data["sessions"] == 2
        assert len(data["routines"]) == 2

    def test_unknown_phase(self, client):
        assert client.get("/strength/phase/offseason").status_code == 404

    def test_recommendation(self, client, race_goal):
        data = client.get("/strength/recommendation").json()
        assert data["focus"] == "functional"


class TestDashboard:
    def test_dashboard(self, client, race_goal):
        data = client.get("/dashboard").json()
        assert data["goal"]["days_to_race"] == 91
        assert data["goal"]["current_week"]["week_number"] == 1
        assert data["nutrition"]["targets"]["calories"] == 2844
        assert data["body_composition"] is None
        assert data["training"]["weekly_distance_km"] == 0
