from tests.conftest import auth


def test_swot_lifecycle(client, supervisor_headers):
    first = client.post("/api/strategy/swot", json={"text": "Equipe engajada", "type": "strength"}, headers=supervisor_headers)
    assert first.status_code == 201
    client.post("/api/strategy/swot", json={"text": "Turnover alto", "type": "threat"}, headers=supervisor_headers)

    items = client.get("/api/strategy/swot", headers=supervisor_headers).json()
    assert {i["type"] for i in items} == {"strength", "threat"}

    assert client.delete(f"/api/strategy/swot/{first.json()['swot_id']}", headers=supervisor_headers).status_code == 204
    assert len(client.get("/api/strategy/swot", headers=supervisor_headers).json()) == 1


def test_swot_validation(client, supervisor_headers):
    assert client.post("/api/strategy/swot", json={"text": " ", "type": "strength"}, headers=supervisor_headers).status_code == 422
    assert client.post("/api/strategy/swot", json={"text": "x", "type": "risk"}, headers=supervisor_headers).status_code == 422


def test_goals_sorted_by_deadline(client, supervisor_headers):
    client.post("/api/strategy/goals", json={"text": "Reduzir absenteísmo", "deadline": "2025-12-01"}, headers=supervisor_headers)
    created = client.post(
        "/api/strategy/goals",
        json={"text": "Programa de mentoria", "deadline": "2025-06-01", "kpi_target": "80% adesão"},
        headers=supervisor_headers,
    ).json()
    assert created["status"] == "planned"

    goals = client.get("/api/strategy/goals", headers=supervisor_headers).json()
    assert [g["deadline"] for g in goals] == ["2025-06-01", "2025-12-01"]
    assert [g["kpi_target"] for g in goals] == ["80% adesão", "N/A"]

    missing_deadline = client.post("/api/strategy/goals", json={"text": "x"}, headers=supervisor_headers)
    assert missing_deadline.status_code == 422


def test_strategic_resource_toggle(client, supervisor_headers):
    created = client.post("/api/strategy/resources", json={"item": "Ginástica laboral", "cost": 1500}, headers=supervisor_headers).json()
    assert created["allocated"] is False

    rid = created["strategic_resource_id"]
    assert client.patch(f"/api/strategy/resources/{rid}", headers=supervisor_headers).json()["allocated"] is True
    assert client.patch(f"/api/strategy/resources/{rid}", headers=supervisor_headers).json()["allocated"] is False

    assert client.delete(f"/api/strategy/resources/{rid}", headers=supervisor_headers).status_code == 204
    assert client.get("/api/strategy/resources", headers=supervisor_headers).json() == []


def test_rows_are_owner_scoped(client, supervisor_headers, db):
    from src.db.models import Profile, UserRole

    other = Profile(email="other-supervisor@example.com", role=UserRole.supervisor)
    db.add(other)
    db.commit()
    db.refresh(other)

    item = client.post("/api/strategy/swot", json={"text": "Orçamento", "type": "weakness"}, headers=supervisor_headers).json()
    assert client.get("/api/strategy/swot", headers=auth(other)).json() == []
    assert client.delete(f"/api/strategy/swot/{item['swot_id']}", headers=auth(other)).status_code == 404
