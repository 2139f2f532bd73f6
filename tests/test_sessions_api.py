from tests.test_settings_api import patch


def schedule(client, headers, **overrides):
    body = {"type": "individual", "date": "2025-03-10", "participant_or_group": "Carlos"} | overrides
    return client.post("/api/sessions", json=body, headers=headers)


def test_schedule_and_list(client, supervisor_headers):
    assert schedule(client, supervisor_headers).status_code == 201
    schedule(client, supervisor_headers, date="2025-04-01", participant_or_group="Bruna")
    schedule(client, supervisor_headers, type="focus_group", date="2025-05-01", participant_or_group="Equipe TI")

    all_sessions = client.get("/api/sessions", headers=supervisor_headers).json()
    assert [s["date"] for s in all_sessions] == ["2025-05-01", "2025-04-01", "2025-03-10"]
    assert all(s["status"] == "scheduled" for s in all_sessions)

    individual = client.get("/api/sessions", params={"type": "individual"}, headers=supervisor_headers).json()
    assert [s["participant_or_group"] for s in individual] == ["Bruna", "Carlos"]


def test_schedule_requires_name(client, supervisor_headers):
    assert schedule(client, supervisor_headers, participant_or_group=" ").status_code == 422
    assert client.post("/api/sessions", json={"participant_or_group": "Ana"}, headers=supervisor_headers).status_code == 422


def test_save_completes_session(client, supervisor_headers):
    session_id = schedule(client, supervisor_headers).json()["session_id"]
    payload = {
        "private_notes": "Relata cansaço.",
        "guide_answers": {"discuss_1": "Sobrecarga"},
        "action_plan": [
            {"id": "1", "goal": "Pausas diárias", "deadline": "2025-04-01", "status": "pending"},
            {"id": "2", "goal": "Conversar com gestor", "status": "done"},
        ],
    }
    r = client.put(f"/api/sessions/{session_id}", json=payload, headers=supervisor_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "completed"
    assert [item["goal"] for item in body["action_plan"]] == ["Pausas diárias", "Conversar com gestor"]
    assert body["guide_answers"] == {"discuss_1": "Sobrecarga"}


def test_delete_session(client, supervisor_headers):
    session_id = schedule(client, supervisor_headers).json()["session_id"]
    assert client.delete(f"/api/sessions/{session_id}", headers=supervisor_headers).status_code == 204
    assert client.put(f"/api/sessions/{session_id}", json={}, headers=supervisor_headers).status_code == 404


def test_guide_includes_custom_questions(client, supervisor_headers):
    patch(client, supervisor_headers, field="custom_guide_questions", action="add", value="Como está o sono?")
    guide = client.get("/api/sessions/guide", headers=supervisor_headers).json()
    assert [q["id"] for q in guide[:2]] == ["discuss_1", "discuss_2"]
    assert guide[-1] == {"id": "custom_0", "section": "Questões Personalizadas", "text": "Como está o sono?"}
    assert len(guide) == 9


def test_sessions_are_supervisor_only(client, operator_headers):
    assert client.get("/api/sessions", headers=operator_headers).status_code == 403
