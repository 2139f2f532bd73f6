from src.app.services.settings import DEFAULT_REPORT_CATEGORIES


def patch(client, headers, **body):
    return client.patch("/api/settings", json=body, headers=headers)


def test_defaults_created_on_first_read(client, supervisor_headers):
    body = client.get("/api/settings", headers=supervisor_headers).json()
    assert body["departments"] == ["Financeiro", "Marketing", "Operacoes", "RH", "TI", "Vendas"]
    assert body["report_categories"] == DEFAULT_REPORT_CATEGORIES
    assert body["custom_guide_questions"] == []


def test_add_and_remove_department(client, supervisor_headers):
    added = patch(client, supervisor_headers, field="departments", action="add", value="  Jurídico ")
    assert added.status_code == 200
    assert added.json()["departments"][:3] == ["Financeiro", "Jurídico", "Marketing"]

    again = patch(client, supervisor_headers, field="departments", action="add", value="Jurídico")
    assert again.json()["departments"].count("Jurídico") == 1

    removed = patch(client, supervisor_headers, field="departments", action="remove", value="TI")
    assert "TI" not in removed.json()["departments"]

    assert "TI" not in client.get("/api/settings", headers=supervisor_headers).json()["departments"]


def test_rejects_blank_and_unknown_fields(client, supervisor_headers):
    assert patch(client, supervisor_headers, field="departments", action="add", value="   ").status_code == 422
    assert patch(client, supervisor_headers, field="colors", action="add", value="x").status_code == 422
    assert patch(client, supervisor_headers, field="departments", action="rename", value="x").status_code == 422


def test_only_supervisor_updates(client, operator_headers):
    r = patch(client, operator_headers, field="departments", action="add", value="Jurídico")
    assert r.status_code == 403
