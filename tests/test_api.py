from __future__ import annotations

import pytest

from src.mentor_system.mentor_system.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def test_app_writes_default_teams(client):
    resp = client.get("/api/teams")

    assert resp.status_code == 200
    assert "Lecture Team" in resp.get_json()["teams"]


def test_submit_tasks_and_read_payments(client):
    for body in [
        {"mentorId": 1, "taskType": "Lecture", "chapterName": "Ch1", "minutes": 150, "rating": 4},
        {"mentorId": 1, "taskType": "Lecture", "chapterName": "Ch1", "minutes": 100, "rating": 4.5},
        {"mentorId": 1, "taskType": "Content", "chaptersCompleted": 3},
    ]:
        assert client.post("/api/tasks", json=body).status_code == 201

    resp = client.get("/api/mentors/1/payments")
    summary = resp.get_json()["summary"]

    assert resp.status_code == 200
    assert summary["overall"]["P_final"] == 3900
    assert summary["recent"]["P_final"] == 3900
    assert summary["overall"]["averageRating"] == "4.25"
    assert len(summary["weekly"]) >= 1


def test_invalid_task_is_a_400(client):
    resp = client.post("/api/tasks", json={"mentorId": 1, "taskType": "Lecture", "minutes": 30})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_numeric_minutes_is_a_400(client):
    resp = client.post("/api/tasks", json={"mentorId": 1, "taskType": "Lecture", "chapterName": "A", "minutes": "lots"})

    assert resp.status_code == 400


@pytest.mark.parametrize("minutes", ["inf", "1e999", "NaN", "-inf"])
def test_non_finite_minutes_is_a_400(client, minutes):
    resp = client.post("/api/tasks", json={"mentorId": 1, "taskType": "Lecture", "chapterName": "Ch1", "minutes": minutes})

    assert resp.status_code == 400
    assert client.get("/api/dashboard").get_json()["dashboard"]["totalMinutes"] == 0


def test_non_finite_base_rate_is_a_400(client):
    resp = client.post("/api/mentors", json={"name": "Meera", "baseRate": "inf"})

    assert resp.status_code == 400


def test_missing_mentor_on_task_is_a_400(client):
    resp = client.post("/api/tasks", json={"taskType": "Content", "chaptersCompleted": 1})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Mentor is required"


def test_unknown_mentor_is_a_404(client):
    assert client.get("/api/mentors/99/payments").status_code == 404
    assert client.get("/api/mentors/99").status_code == 404


def test_mentor_crud(client):
    resp = client.post("/api/mentors", json={"name": "Meera", "baseRate": 12, "teams": ["Lecture Team"]})
    mentor_id = resp.get_json()["id"]
    assert resp.status_code == 201

    resp = client.put(f"/api/mentors/{mentor_id}", json={"name": "Meera K", "baseRate": 14, "photoURL": "x.png"})
    assert resp.status_code == 200

    mentor = client.get(f"/api/mentors/{mentor_id}").get_json()["mentor"]
    assert mentor["name"] == "Meera K"
    assert mentor["baseRate"] == 14
    assert mentor["photoURL"] == "x.png"

    client.post("/api/tasks", json={"mentorId": mentor_id, "taskType": "Content", "chaptersCompleted": 1})
    resp = client.delete(f"/api/mentors/{mentor_id}")
    assert resp.get_json()["deletedTasks"] == 1

    names = [m["name"] for m in client.get("/api/mentors").get_json()["mentors"]]
    assert "Meera K" not in names


def test_dashboard(client):
    client.post("/api/tasks", json={"mentorId": 2, "taskType": "Content", "chaptersCompleted": 2})

    dashboard = client.get("/api/dashboard").get_json()["dashboard"]

    assert dashboard["totalMentors"] == 2
    assert dashboard["totalUnits"] == 2
    assert dashboard["totalPayments"] == 1000


def test_delete_team_updates_roster(client):
    assert client.delete("/api/teams/Lecture%20Team").status_code == 200

    roster = client.get("/api/teams/roster").get_json()["roster"]

    assert "Lecture Team" not in roster
    assert [m["name"] for m in roster["Mentorship Team"]] == ["Rohan"]


def test_payment_slip_csv(client):
    client.post("/api/tasks", json={"mentorId": 1, "taskType": "Content", "chaptersCompleted": 2})

    resp = client.get("/api/mentors/1/payment-slip.csv")
    text = resp.data.decode("utf-8-sig")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "payment_slip_1.csv" in resp.headers["Content-Disposition"]
    assert text.splitlines()[0].startswith("mentor,period,")
    assert "All time" in text
