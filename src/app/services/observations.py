"""Rendering of field-visit checklists into observation text.
"""
# app/services/observations.py
from typing import Mapping

from src.app.services.catalog import CHECKLIST_SCALE, OBSERVATION_CHECKLIST

NO_SUMMARY = "Sem resumo adicional."


def unknown_checklist_entries(checklist: Mapping[str, str]) -> list[str]:
    """Item ids that do not exist or carry a rating outside the scale."""
    known = {item.id for section in OBSERVATION_CHECKLIST for item in section.items}
    return [
        item_id for item_id, rating in checklist.items()
        if item_id not in known or rating not in CHECKLIST_SCALE
    ]


def render_content(checklist: Mapping[str, str], summary: str) -> str:
    lines = [f"CHECKLIST REALIZADO. Resumo: {summary.strip() or NO_SUMMARY}"]
    for section in OBSERVATION_CHECKLIST:
        rated = [item for item in section.items if item.id in checklist]
        if not rated:
            continue
        lines.append(section.title)
        lines.extend(f"- {item.question} {checklist[item.id]}" for item in rated)
    return "\n".join(lines)
