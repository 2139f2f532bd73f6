from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from src.app.main import STORAGE_UNAVAILABLE
from src.app.schemas.response import Participant
from src.app.services.responses import ResponseRepository
from src.db.models import SurveyResponse, SurveySubmission
from tests.test_responses_api import submit


def _storage_down(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


def test_get_all_degrades_to_empty_list(db, operator, monkeypatch):
    repo = ResponseRepository(db)
    repo.save("A-mental-wellbeing", Participant(name="Ana", department="TI"), {"a1": 4}, operator.user_id)

    monkeypatch.setattr(db, "execute", _storage_down)
    assert repo.get_all() == []
    assert repo.get_all(operator.user_id) == []


def test_save_stores_response_and_tracker_together(db, operator):
    repo = ResponseRepository(db)
    saved = repo.save("G-checkin", Participant(is_anonymous=True), {"g1": 5}, operator.user_id)

    assert db.get(SurveyResponse, saved.response_id) is not None
    assert db.get(SurveySubmission, (operator.user_id, "G-checkin")) is not None


def test_failed_write_answers_503_and_stores_nothing(client, db, operator, operator_headers, monkeypatch):
    monkeypatch.setattr(Session, "commit", _storage_down)
    r = submit(client, operator_headers)
    assert r.status_code == 503
    assert r.json() == {"detail": STORAGE_UNAVAILABLE}

    monkeypatch.undo()
    assert client.get("/api/responses", headers=operator_headers).json() == []
    assert db.query(SurveySubmission).count() == 0
    assert client.get("/api/surveys/completed", headers=operator_headers).json() == {"survey_ids": []}
