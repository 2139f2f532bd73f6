import json

from src.app.core.config import settings
from src.app.routers import api
from src.llm_insights.predict import DEMO_REPORT
from tests.conftest import auth, stub_openai_client
from tests.test_responses_api import submit


def test_dashboard_sections(client, operator_headers, supervisor_headers):
    submit(client, operator_headers, survey_id="G-checkin", answers={"g1": 4, "g2": 4})

    body = client.get("/api/dashboard", headers=supervisor_headers).json()
    assert body["responses_count"] == 1
    for name in ("metrics", "charts", "departments", "categories", "mood"):
        assert body[name]["error"] is None
    assert body["mood"]["data"] == [{"name": "Energizado/Feliz", "value": 1, "color": "#10b981"}]
    assert body["departments"]["data"][0]["stress"] == 80


def test_dashboard_section_failure_is_isolated(client, supervisor_headers, monkeypatch):
    def broken(responses):
        raise RuntimeError("boom")

    monkeypatch.setattr(api.metrics, "mood_distribution", broken)
    body = client.get("/api/dashboard", headers=supervisor_headers).json()
    assert body["mood"]["error"] == api.SECTION_ERROR
    assert body["mood"]["data"] == []
    assert body["metrics"]["error"] is None


def test_operator_dashboard_is_owner_scoped(client, operator_headers, other_operator):
    submit(client, auth(other_operator), survey_id="H-financial", answers={"h1": 5})
    submit(client, operator_headers, answers={"a1": 3})

    cards = client.get("/api/dashboard/metrics", headers=operator_headers).json()
    assert [(c["id"], c["value"]) for c in cards] == [("1", 60), ("6", 1)]

    categories = client.get("/api/dashboard/categories", headers=operator_headers).json()
    assert [c["name"] for c in categories] == ["Mental"]


def test_analysis_without_data_returns_null(client, supervisor_headers):
    r = client.post("/api/dashboard/analysis", headers=supervisor_headers)
    assert r.status_code == 200
    assert r.json() == {"report": None}


def test_analysis_demo_mode(client, operator_headers, monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    submit(client, operator_headers)
    report = client.post("/api/dashboard/analysis", headers=operator_headers).json()["report"]
    assert report["summary"] == DEMO_REPORT.summary
    assert report["riskLevel"] == "low"


def test_analysis_with_model_reply(client, operator_headers, monkeypatch):
    reply = {"summary": "Boa saúde mental.", "recommendations": ["Continuar"], "riskLevel": "low"}
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(settings, "OPENAI_BASE_URL", "https://api.openai.com/v1")
    monkeypatch.setattr(api, "OPENAI_CLIENT", stub_openai_client(content=json.dumps(reply)))
    submit(client, operator_headers)

    report = client.post("/api/dashboard/analysis", headers=operator_headers).json()["report"]
    assert report["summary"] == "Boa saúde mental."


def test_reports_endpoint(client, operator_headers, supervisor_headers):
    submit(client, operator_headers)
    r = client.post("/api/reports", json={"mode": "department", "department": "all"}, headers=supervisor_headers)
    assert r.status_code == 200
    assert r.json() == {
        "mode": "department",
        "rows": [{"item": "Vendas", "metric": "Bem-Estar Geral", "value": 90, "count": 1}],
    }


def test_reports_specific_survey_validation(client, supervisor_headers):
    missing = client.post("/api/reports", json={"mode": "specific_survey"}, headers=supervisor_headers)
    assert missing.status_code == 422
    unknown = client.post(
        "/api/reports", json={"mode": "specific_survey", "survey_id": "Z-missing"}, headers=supervisor_headers,
    )
    assert unknown.status_code == 422


def test_reports_csv(client, operator_headers):
    submit(client, operator_headers)
    r = client.post("/api/reports/csv", json={"mode": "kpi"}, headers=operator_headers)
    assert r.status_code == 200
    assert "relatorio_kpi_" in r.headers["content-disposition"]
    assert r.text == "Item / Grupo;Métrica;Valor;Participantes\nSaúde Mental;Índice de Saúde;90;1\n"
