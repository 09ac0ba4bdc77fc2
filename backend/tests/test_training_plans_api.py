"""Tests for the training plan endpoints, including activation."""

import pytest
from fastapi.testclient import TestClient

from volleycoach.main import create_app
from volleycoach.store import MemoryStore, StoreError

from conftest import register

URL = "/api/v1/training-plans"


class ReadOnlyStore(MemoryStore):
    """MemoryStore that rejects updates."""

    async def update(self, table, row_id, values):
        raise StoreError(f"Failed to update {table}")


@pytest.fixture
def read_only_client(test_settings):
    with TestClient(create_app(test_settings, store=ReadOnlyStore())) as test_client:
        yield test_client


def create_plan(client, headers, **overrides):
    payload = {"name": "Preseason Block", "phase_type": "Pre-Season"}
    payload.update(overrides)
    response = client.post(URL, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestPlanCrud:
    """Create, read, update and delete plans."""

    def test_create(self, client, auth):
        user_id, headers = auth

        plan = create_plan(client, headers, start_date="2024-01-07", end_date="2024-01-13")

        assert plan["athlete_id"] == user_id
        assert plan["is_active"] is False
        assert plan["start_date"] == "2024-01-07"

    def test_create_with_template(self, client, auth):
        _, headers = auth

        plan = create_plan(client, headers, template_id="setter-specialist")

        assert plan["template_id"] == "setter-specialist"

    def test_create_unknown_template(self, client, auth):
        _, headers = auth

        response = client.post(
            URL,
            json={"name": "x", "phase_type": "Pre-Season", "template_id": "missing"},
            headers=headers,
        )
        assert response.status_code == 400

    def test_create_inverted_dates(self, client, auth):
        _, headers = auth

        response = client.post(
            URL,
            json={"name": "x", "phase_type": "Pre-Season", "start_date": "2024-02-01", "end_date": "2024-01-01"},
            headers=headers,
        )
        assert response.status_code == 400

    def test_create_invalid_phase_type(self, client, auth):
        _, headers = auth

        response = client.post(URL, json={"name": "x", "phase_type": "Summer"}, headers=headers)
        assert response.status_code == 422

    def test_get_and_scope(self, client, auth, register_user):
        _, headers = auth
        plan = create_plan(client, headers)
        other = register_user("libero@example.com")

        assert client.get(f"{URL}/{plan['id']}", headers=headers).status_code == 200
        response = client.get(f"{URL}/{plan['id']}", headers={"Authorization": f"Bearer {other['token']}"})
        assert response.status_code == 404

    def test_update(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers)

        response = client.put(f"{URL}/{plan['id']}", json={"name": "Competition Block"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Competition Block"
        assert response.json()["phase_type"] == "Pre-Season"

    def test_update_missing(self, client, auth):
        _, headers = auth
        assert client.put(f"{URL}/missing", json={"name": "x"}, headers=headers).status_code == 404

    def test_update_ignores_null_required_fields(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers)

        response = client.put(
            f"{URL}/{plan['id']}",
            json={"name": None, "phase_type": None, "description": "Two-a-days"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Preseason Block"
        assert response.json()["phase_type"] == "Pre-Season"
        assert response.json()["description"] == "Two-a-days"
        assert client.get(f"{URL}/{plan['id']}", headers=headers).status_code == 200

    def test_update_store_failure(self, read_only_client):
        body = register(read_only_client)
        headers = {"Authorization": f"Bearer {body['token']}"}
        plan = create_plan(read_only_client, headers)

        response = read_only_client.put(f"{URL}/{plan['id']}", json={"name": "x"}, headers=headers)

        assert response.status_code == 500

    def test_delete(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers, start_date="2024-01-07", end_date="2024-01-13")
        client.post(f"{URL}/{plan['id']}/activate", headers=headers)

        response = client.delete(f"{URL}/{plan['id']}", headers=headers)

        assert response.status_code == 204
        assert client.get(f"{URL}/{plan['id']}", headers=headers).status_code == 404
        assert client.get("/api/v1/workout-sessions", headers=headers).json() == []

    def test_list_filter_active(self, client, auth):
        _, headers = auth
        active = create_plan(client, headers, name="Active", start_date="2024-01-07", end_date="2024-01-13")
        create_plan(client, headers, name="Idle")
        client.post(f"{URL}/{active['id']}/activate", headers=headers)

        all_plans = client.get(URL, headers=headers).json()
        active_plans = client.get(URL, params={"is_active": "true"}, headers=headers).json()

        assert [p["name"] for p in all_plans] == ["Idle", "Active"]
        assert [p["id"] for p in active_plans] == [active["id"]]

    def test_list_foreign_athlete_forbidden(self, client, auth):
        _, headers = auth
        assert client.get(URL, params={"athlete_id": "someone-else"}, headers=headers).status_code == 403


class TestActivation:
    """POST /training-plans/{id}/activate."""

    def test_activate_default_schedule(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers, start_date="2024-01-07", end_date="2024-01-13")

        response = client.post(f"{URL}/{plan['id']}/activate", headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert body["is_active"] is True
        assert body["sessions_created"] == 4
        assert body["sessions_removed"] == 0

        sessions = client.get(
            "/api/v1/workout-sessions",
            params={"training_plan_id": plan["id"]},
            headers=headers,
        ).json()
        assert [s["scheduled_date"] for s in sessions] == [
            "2024-01-08", "2024-01-09", "2024-01-10", "2024-01-12",
        ]
        assert sessions[0]["workout_summary"] == "Strength Training - Lower Body Focus"

    def test_activate_with_inline_phases(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers, start_date="2024-01-08", end_date="2024-01-21")
        phases = [{
            "name": "Skills",
            "weeks": "Weeks 1 & 2",
            "workoutDays": [{
                "day": 3,
                "title": "Hitting Form",
                "exercises": [{"name": "Approach Footwork", "sets": 3, "reps": "10", "focus": "Timing"}],
            }],
        }]

        response = client.post(f"{URL}/{plan['id']}/activate", json={"phases": phases}, headers=headers)

        assert response.status_code == 200
        assert response.json()["sessions_created"] == 2
        sessions = client.get("/api/v1/workout-sessions", headers=headers).json()
        assert [(s["scheduled_date"], s["workout_title"]) for s in sessions] == [
            ("2024-01-10", "Hitting Form"),
            ("2024-01-17", "Hitting Form"),
        ]
        assert sessions[0]["exercises"][0]["name"] == "Approach Footwork"

    def test_activate_copies_exercises_as_authored(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers, start_date="2024-01-08", end_date="2024-01-08")
        exercises = [{"name": "Wall Sit", "reps": "45s", "videoUrl": "https://example.com/wall-sit"}]
        phases = [{"name": "Legs", "workoutDays": [{"day": 1, "title": "Legs", "exercises": exercises}]}]

        response = client.post(f"{URL}/{plan['id']}/activate", json={"phases": phases}, headers=headers)

        assert response.status_code == 200
        sessions = client.get("/api/v1/workout-sessions", headers=headers).json()
        assert [s["exercises"] for s in sessions] == [exercises]
        assert response.json()["phases"][0]["workoutDays"][0]["exercises"] == exercises

    def test_activate_catalog_template_fills_dates(self, client, auth):
        _, headers = auth
        plan = create_plan(
            client, headers, start_date="2024-01-01", template_id="4-week-volleyball-performance"
        )

        body = client.post(f"{URL}/{plan['id']}/activate", headers=headers).json()

        assert body["end_date"] == "2024-01-28"
        assert body["sessions_created"] == 24

    def test_activation_switches_active_plan(self, client, auth):
        _, headers = auth
        first = create_plan(client, headers, name="First", start_date="2024-01-07", end_date="2024-01-13")
        second = create_plan(client, headers, name="Second", start_date="2024-01-14", end_date="2024-01-20")

        client.post(f"{URL}/{first['id']}/activate", headers=headers)
        client.post(f"{URL}/{second['id']}/activate", headers=headers)

        assert client.get(f"{URL}/{first['id']}", headers=headers).json()["is_active"] is False
        assert client.get(f"{URL}/{second['id']}", headers=headers).json()["is_active"] is True

    def test_reactivation_replaces_scheduled_sessions(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers, start_date="2024-01-07", end_date="2024-01-13")
        client.post(f"{URL}/{plan['id']}/activate", headers=headers)
        sessions = client.get("/api/v1/workout-sessions", headers=headers).json()
        client.put(
            f"/api/v1/workout-sessions/{sessions[0]['id']}",
            json={"status": "completed"},
            headers=headers,
        )

        body = client.post(f"{URL}/{plan['id']}/activate", headers=headers).json()

        assert body["sessions_created"] == 4
        assert body["sessions_removed"] == 3
        assert len(client.get("/api/v1/workout-sessions", headers=headers).json()) == 5

    def test_activate_missing_plan(self, client, auth):
        _, headers = auth
        assert client.post(f"{URL}/missing/activate", headers=headers).status_code == 404

    def test_activate_requires_auth(self, client):
        assert client.post(f"{URL}/anything/activate").status_code == 401

    def test_deactivate(self, client, auth):
        _, headers = auth
        plan = create_plan(client, headers, start_date="2024-01-07", end_date="2024-01-13")
        client.post(f"{URL}/{plan['id']}/activate", headers=headers)

        response = client.post(f"{URL}/{plan['id']}/deactivate", headers=headers)

        assert response.status_code == 200
        assert response.json()["is_active"] is False
        assert len(client.get("/api/v1/workout-sessions", headers=headers).json()) == 4
