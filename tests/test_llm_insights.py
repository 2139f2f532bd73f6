import asyncio
import json

import httpx
import openai

from src.app.schemas.dashboard import ChartDataPoint, KPIMetric
from src.llm_insights.predict import (
    CONNECTION_MESSAGE,
    DEMO_REPORT,
    GENERIC_MESSAGE,
    INVALID_KEY_MESSAGE,
    analyze_wellbeing,
)
from src.llm_insights.utils import get_provider, strip_code_fences
from tests.conftest import stub_openai_client

KPIS = [KPIMetric(id="1", label="Saúde Mental", value=72, unit="/100", trend="up", color="text-purple-600")]
TRENDS = [ChartDataPoint(name="Mar.", mental=72, fisico=60, social=0, material=0, participacao=3)]
REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _run(coro):
    return asyncio.run(coro)


def _analyze(client, api_key="sk-test"):
    return _run(analyze_wellbeing(
        client=client, model_name="gpt-test", kpis=KPIS, trends=TRENDS, api_key=api_key,
    ))


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('texto ```\n{"a": 1}\n``` fim') == '{"a": 1}'
    assert strip_code_fences(' {"a": 1} ') == '{"a": 1}'


def test_get_provider():
    assert get_provider("https://api.openai.com/v1") == "openai"
    assert get_provider("https://openrouter.ai/api/v1") == "openrouter"
    assert get_provider("http://localhost:8000/v1") == "local"


def test_without_key_returns_demo_report():
    client = stub_openai_client(content="{}")
    assert _analyze(client, api_key="") == DEMO_REPORT
    assert client.chat.completions.calls == []


def test_parses_fenced_reply():
    reply = {"summary": "Clima estável.", "recommendations": ["Manter check-ins"], "riskLevel": "medium"}
    client = stub_openai_client(content=f"```json\n{json.dumps(reply)}\n```")
    report = _analyze(client)
    assert report.summary == "Clima estável."
    assert report.recommendations == ["Manter check-ins"]
    assert report.risk_level == "medium"

    call = client.chat.completions.calls[0]
    assert call["model"] == "gpt-test"
    assert "Saúde Mental" in call["messages"][-1]["content"]


def test_connection_error_fallback():
    client = stub_openai_client(error=openai.APIConnectionError(request=REQUEST))
    report = _analyze(client)
    assert report.summary.endswith(CONNECTION_MESSAGE)
    assert report.risk_level == "low"
    assert len(report.recommendations) == 3


def test_invalid_key_fallback():
    error = openai.AuthenticationError(
        "invalid api key", response=httpx.Response(401, request=REQUEST), body=None,
    )
    report = _analyze(stub_openai_client(error=error))
    assert report.summary.endswith(INVALID_KEY_MESSAGE)


def test_unparseable_reply_fallback():
    report = _analyze(stub_openai_client(content="isto não é JSON"))
    assert report.summary.endswith(GENERIC_MESSAGE)


def test_report_serializes_risk_level_alias():
    assert "riskLevel" in DEMO_REPORT.model_dump(by_alias=True)


def test_reply_without_choices_falls_back():
    from types import SimpleNamespace

    for completion in (SimpleNamespace(choices=[]), SimpleNamespace(choices=None), SimpleNamespace()):
        report = _analyze(stub_openai_client(completion=completion))
        assert report.summary.endswith(GENERIC_MESSAGE)
        assert report.risk_level == "low"


def test_reply_with_wrong_shape_falls_back():
    report = _analyze(stub_openai_client(content='["not", "an", "object"]'))
    assert report.summary.endswith(GENERIC_MESSAGE)


def test_unknown_provider_falls_back():
    client = stub_openai_client(content="{}")
    report = _run(analyze_wellbeing(
        client=client, model_name="gpt-test", kpis=KPIS, trends=TRENDS,
        api_key="sk-test", base_url="https://llm.internal.example/v1",
    ))
    assert report.summary.endswith(GENERIC_MESSAGE)
    assert client.chat.completions.calls == []


def test_structured_request_uses_aliased_schema():
    client = stub_openai_client(content='{"summary": "ok", "recommendations": [], "riskLevel": "low"}')
    _analyze(client)
    response_format = client.chat.completions.calls[0]["response_format"]
    assert response_format["type"] == "json_schema"
    assert response_format["json_schema"]["name"] == "AnalysisReport"
    assert "riskLevel" in response_format["json_schema"]["schema"]["properties"]
