import os

os.environ["SECRET_KEY"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SMTP_SERVER"] = ""

import pytest
from fastapi import BackgroundTasks
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from steamvision import models  # noqa: F401
from steamvision import crud, schemas
from steamvision.database import Base, get_db
from steamvision.main import app
from steamvision.services import auth

PASSWORD = "Str0ng!Pass"


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
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
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


@pytest.fixture
def sent_codes(monkeypatch):
    sent = {}
    monkeypatch.setattr(auth, "send_verification_code_email", lambda to, code: sent.__setitem__(to, code))
    return sent


def signup_payload(**overrides):
    payload = {
        "fullName": "Ada Lovelace",
        "userName": "ada",
        "email": "ada@example.com",
        "password": PASSWORD,
        "passwordConfirmation": PASSWORD,
        "birthday": "1990-12-10",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def user(db):
    auth.signup(db, schemas.UserCreate.model_validate(signup_payload()))
    return crud.get_user_by_email(db, "ada@example.com")


@pytest.fixture
def background_tasks():
    return BackgroundTasks()
