from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from src.app.schemas.report import ReportFilters
from src.app.services.reports import generate_report, truncate_question

NOW = datetime(2025, 3, 20, 12, 0, tzinfo=timezone.utc)


def rows_of(report):
    return [(r.item, r.metric, r.value, r.count) for r in report]


def test_department_report_over_all_departments(make_response):
    responses = [
        make_response("A-mental-wellbeing", 80, department="Vendas", timestamp=NOW - timedelta(days=1)),
        make_response("B-physical-wellbeing", 61, department="Vendas", timestamp=NOW - timedelta(days=2)),
        make_response("A-mental-wellbeing", 50, department="TI", timestamp=NOW - timedelta(days=3)),
    ]
    report = generate_report(responses, ReportFilters(mode="department", department="all", days=30), now=NOW)
    assert rows_of(report) == [
        ("Vendas", "Bem-Estar Geral", 71, 2),
        ("TI", "Bem-Estar Geral", 50, 1),
    ]


def test_department_filter_and_missing_department(make_response):
    responses = [
        make_response("A-mental-wellbeing", 80, department="Vendas", timestamp=NOW),
        make_response("A-mental-wellbeing", 40, department="", timestamp=NOW),
    ]
    assert rows_of(generate_report(responses, ReportFilters(mode="department"), now=NOW)) == [
        ("Vendas", "Bem-Estar Geral", 80, 1),
        ("N/A", "Bem-Estar Geral", 40, 1),
    ]
    only_sales = generate_report(responses, ReportFilters(mode="department", department="Vendas"), now=NOW)
    assert [r.item for r in only_sales] == ["Vendas"]


def test_time_window_excludes_older_responses(make_response):
    responses = [
        make_response("A-mental-wellbeing", 80, timestamp=NOW - timedelta(days=5)),
        make_response("A-mental-wellbeing", 20, timestamp=NOW - timedelta(days=45)),
    ]
    assert rows_of(generate_report(responses, ReportFilters(mode="general", days=30), now=NOW)) == [
        ("A) Saúde e Bem-estar Mental", "Média de Score", 80, 1),
    ]
    assert generate_report(responses, ReportFilters(mode="general", days=60), now=NOW)[0].count == 2


def test_category_report_is_upper_cased(make_response):
    responses = [
        make_response("A-mental-wellbeing", 80, timestamp=NOW),
        make_response("unknown-survey", 40, timestamp=NOW),
    ]
    assert rows_of(generate_report(responses, ReportFilters(mode="category"), now=NOW)) == [
        ("MENTAL", "Score Médio", 80, 1),
        ("GERAL", "Score Médio", 40, 1),
    ]


def test_kpi_report_mapping(make_response):
    responses = [
        make_response("A-mental-wellbeing", 80, timestamp=NOW),
        make_response("I-dei", 60, timestamp=NOW),
        make_response("C-social-wellbeing", 70, timestamp=NOW),
        make_response("G-burnout", 30, timestamp=NOW),
        make_response("G-checkin", 90, timestamp=NOW),
    ]
    assert rows_of(generate_report(responses, ReportFilters(mode="kpi"), now=NOW)) == [
        ("Saúde Mental", "Índice de Saúde", 80, 1),
        ("Diversidade & Inclusão", "Índice de Saúde", 60, 1),
        ("Bem-Estar Social", "Índice de Saúde", 70, 1),
        ("Risco de Burnout", "Índice de Risco", 30, 1),
    ]


def test_specific_survey_report_per_question(make_response):
    responses = [
        make_response("A-mental-wellbeing", 0, timestamp=NOW, answers={"a1": 4, "a2": 5, "a11": "texto"}),
        make_response("A-mental-wellbeing", 0, timestamp=NOW, answers={"a1": 3}),
        make_response("B-physical-wellbeing", 0, timestamp=NOW, answers={"b1": 5}),
    ]
    report = generate_report(
        responses, ReportFilters(mode="specific_survey", survey_id="A-mental-wellbeing"), now=NOW,
    )
    assert [(r.value, r.count, r.metric) for r in report] == [
        (70, 2, "Média da Resposta"),
        (100, 1, "Média da Resposta"),
    ]
    assert report[0].item == "1. Com que frequência sente ansiedade ou nervosism..."


def test_truncate_question():
    assert truncate_question("x" * 50) == "x" * 50
    assert truncate_question("x" * 51) == "x" * 50 + "..."


def test_specific_survey_requires_survey_id():
    with pytest.raises(ValidationError):
        ReportFilters(mode="specific_survey")


def test_report_is_idempotent(make_response):
    responses = [make_response("A-mental-wellbeing", 80, timestamp=NOW)]
    filters = ReportFilters(mode="general")
    assert generate_report(responses, filters, now=NOW) == generate_report(responses, filters, now=NOW)


def test_specific_survey_report_counts_every_number(make_response):
    responses = [
        make_response("A-mental-wellbeing", 0, timestamp=NOW, answers={"a1": 7, "a2": True}),
        make_response("A-mental-wellbeing", 0, timestamp=NOW, answers={"a1": 2.5}),
    ]
    report = generate_report(
        responses, ReportFilters(mode="specific_survey", survey_id="A-mental-wellbeing"), now=NOW,
    )
    # mean(7, 2.5) * 20 = 95; booleans are not numbers here
    assert [(r.value, r.count) for r in report] == [(95, 2)]
