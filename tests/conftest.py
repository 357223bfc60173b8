import json
import os
import tempfile

# Antes de importar match_tracker: base de datos temporal y evento por defecto
_tmpdir = tempfile.mkdtemp(prefix="match_tracker_tests_")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")
os.environ.pop("EVENT_FILE", None)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest

from match_tracker.config import settings
from match_tracker.db import Base, SessionLocal, engine
from match_tracker.event import load_event
from match_tracker.models import BackScore, FrontScore
from match_tracker.schemas import EventConfig


@pytest.fixture
def event():
    return load_event(settings.EVENT_FILE)


@pytest.fixture
def event_data():
    """El evento por defecto como dict, para construir variantes."""
    with open(settings.EVENT_FILE, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def back_rank_one_event(event_data):
    # Mismo roster, pero el hoyo 14 pasa a ser el HCP 1 (y el 4 el HCP 2)
    for h in event_data["front_holes"]:
        if h["number"] == 4:
            h["handicap"] = 2
    for h in event_data["back_holes"]:
        if h["number"] == 14:
            h["handicap"] = 1
    return EventConfig.model_validate(event_data)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    session.query(FrontScore).delete()
    session.query(BackScore).delete()
    session.commit()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient

    from match_tracker.main import app

    with TestClient(app) as c:
        yield c
