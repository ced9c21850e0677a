import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from billbook.core.config import Settings
from billbook.core.security import hash_password
from billbook.db.session import transaction
from billbook.main import create_app
from billbook.models.user import User, UserRole


@pytest.fixture()
def settings():
    return Settings(
        ENV="test",
        SECRET_KEY="test-secret",
        DATABASE_URL="sqlite://",
        ADMIN_USERNAME="root",
        ADMIN_PHONE="999-0",
        ADMIN_PASSWORD="rootpw",
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def engine(app):
    return app.state.engine


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


def signup(client, username="alice", phone="555-1", password="pw"):
    response = client.post(
        "/auth/signup",
        json={"username": username, "phone": phone, "password": password},
    )
    assert response.status_code == 201
    return response


def login(client, phone="555-1", password="pw"):
    response = client.post("/auth/login", json={"phone": phone, "password": password})
    assert response.status_code == 200
    return response.json()["token"]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user_token(client):
    signup(client)
    return login(client)


@pytest.fixture()
def admin_token(client, engine):
    with Session(engine) as session:
        with transaction(session):
            session.add(
                User(
                    username="boss",
                    phone="000-1",
                    password_hash=hash_password("adminpw"),
                    role=UserRole.ADMIN,
                )
            )
    return login(client, phone="000-1", password="adminpw")
