import os
import tempfile
from pathlib import Path

# Settings are read at import time, so the environment has to be in place
# before anything from backend/ is imported.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="farm4u-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{(_TMP_DIR / 'test.db').as_posix()}"
os.environ["JWT_SECRET"] = "test-only-signing-secret-" + "0123456789abcdef" * 4
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["LOG_DIR"] = (_TMP_DIR / "log").as_posix()

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from auth import service  # noqa: E402
from core.security import issue_token, validate_token  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402
from main import app  # noqa: E402

PASSWORD = "Sup3rSecret!"


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_account(db):
    """Create an account through the service layer and return the row."""

    def _make(email: str, password: str = PASSWORD, role: str = "Farmer"):
        return service.signup(
            db,
            first_name="Test",
            last_name="User",
            email=email,
            password=password,
            role=role,
        )

    return _make


@pytest.fixture
def claims_for():
    """Validated claim set for an account, as the bearer dependency would yield."""

    def _claims(account):
        return validate_token(issue_token(account))

    return _claims


@pytest.fixture
def auth_headers(client):
    """Sign up + log in over HTTP; returns the Authorization header dict."""

    def _headers(email: str, password: str = PASSWORD):
        resp = client.post(
            "/api/auth/signup",
            json={"firstName": "Test", "lastName": "User", "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _headers
