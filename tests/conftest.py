from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.app.main import app
from src.app.schemas.response import Participant, SurveyResponseOut
from src.app.services.catalog import survey_category, survey_title
from src.app.services.tokens import issue_access_token
from src.db import Base
from src.db.models import Profile, UserRole
from src.db.session import get_db


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _profile(db, email: str, role: UserRole) -> Profile:
    profile = Profile(email=email, role=role, full_name=email.split("@")[0])
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


@pytest.fixture
def supervisor(db):
    return _profile(db, "supervisor@example.com", UserRole.supervisor)


@pytest.fixture
def operator(db):
    return _profile(db, "operator@example.com", UserRole.operator)


@pytest.fixture
def other_operator(db):
    return _profile(db, "other@example.com", UserRole.operator)


def auth(profile: Profile) -> dict:
    return {"Authorization": f"Bearer {issue_access_token(profile.user_id, profile.role.value)}"}


@pytest.fixture
def supervisor_headers(supervisor):
    return auth(supervisor)


@pytest.fixture
def operator_headers(operator):
    return auth(operator)


@pytest.fixture
def make_response():
    """Build an in-memory response the way the repository returns it."""
    counter = {"n": 0}

    def _make(
        survey_id: str,
        score: int,
        department: str = "TI",
        timestamp: datetime | None = None,
        answers: dict | None = None,
        **participant,
    ) -> SurveyResponseOut:
        counter["n"] += 1
        return SurveyResponseOut(
            response_id=f"resp-{counter['n']}",
            survey_id=survey_id,
            survey_title=survey_title(survey_id),
            survey_category=survey_category(survey_id),
            participant=Participant(name=participant.pop("name", "Ana"), department=department, **participant),
            answers=answers or {},
            score=score,
            timestamp=timestamp or datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc),
            user_id=None,
        )

    return _make


class StubCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None, completion=None):
        self.content = content
        self.error = error
        self.completion = completion
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.completion is not None:
            return self.completion
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def stub_openai_client(content: str | None = None, error: Exception | None = None, completion=None):
    completions = StubCompletions(content, error, completion)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))
