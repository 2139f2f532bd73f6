"""CSV rendering for reports and stored responses.

Files use `;` as delimiter and `\\n` as line terminator. Line breaks inside
values are flattened to spaces so every record occupies exactly one line.
"""
# app/services/export.py
import csv
import io
import re
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from src.app.schemas.report import ReportRow
from src.app.schemas.response import SurveyResponseOut
from src.app.services.catalog import question_text

DELIMITER = ";"
MISSING = "N/A"

REPORT_HEADER = ["Item / Grupo", "Métrica", "Valor", "Participantes"]
FULL_EXPORT_HEADER = [
    "ID Resposta", "Data", "Nome", "Departamento", "Gênero", "Idade", "Tempo Casa",
    "Questionário", "Categoria", "Score Calculado", "Questão ID", "Texto da Questão", "Resposta",
]
SINGLE_EXPORT_HEADER = ["Questão", "Resposta"]

_LINE_BREAKS = re.compile(r"\r\n|\r|\n")


def cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value)
    return _LINE_BREAKS.sub(" ", str(value))


def to_csv(rows: Iterable[Sequence[Any]]) -> str:
    """Render rows (the first one being the header) as CSV text."""
    output = io.StringIO()
    writer = csv.writer(output, delimiter=DELIMITER, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    for row in rows:
        writer.writerow([cell(v) for v in row])
    return output.getvalue()


def format_date(value: datetime) -> str:
    return value.strftime("%d/%m/%Y")


def format_datetime(value: datetime) -> str:
    return value.strftime("%d/%m/%Y %H:%M:%S")


def report_csv(rows: Sequence[ReportRow]) -> str:
    return to_csv([REPORT_HEADER, *([r.item, r.metric, r.value, r.count] for r in rows)])


def responses_csv(responses: Sequence[SurveyResponseOut]) -> str:
    """One line per answered question across all responses."""
    lines: list[list[Any]] = [FULL_EXPORT_HEADER]
    for r in responses:
        p = r.participant
        for qid, answer in r.answers.items():
            lines.append([
                r.response_id,
                format_date(r.timestamp),
                p.display_name,
                p.department or MISSING,
                p.gender or MISSING,
                p.age or MISSING,
                p.tenure or MISSING,
                r.survey_title,
                r.survey_category,
                r.score,
                qid,
                question_text(r.survey_id, qid),
                answer,
            ])
    return to_csv(lines)


def single_response_csv(response: SurveyResponseOut) -> str:
    p = response.participant
    lines: list[list[Any]] = [
        SINGLE_EXPORT_HEADER,
        ["Participante", p.display_name],
        ["Departamento", p.department or MISSING],
        ["Gênero", p.gender or MISSING],
        ["Data", format_datetime(response.timestamp)],
        ["Questionário", response.survey_title],
        ["Score", response.score],
        ["---", "---"],
    ]
    lines.extend(
        [question_text(response.survey_id, qid), answer]
        for qid, answer in response.answers.items()
    )
    return to_csv(lines)


def _slug(value: str) -> str:
    return re.sub(r"\s+", "_", value.strip()) or "anonimo"


def report_filename(mode: str, today: date) -> str:
    return f"relatorio_{mode}_{today.isoformat()}.csv"


def full_export_filename(today: date) -> str:
    return f"workacare_completo_{today.isoformat()}.csv"


def single_export_filename(response: SurveyResponseOut) -> str:
    p = response.participant
    name = "anonimo" if p.is_anonymous else _slug(p.name)
    return f"resposta_{name}_{response.survey_id}.csv"
