import os

# Settings are read at import time, so configure them before importing the app
os.environ.setdefault('SECRET_KEY', 'test-secret-key-with-enough-length-for-hs256')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.main import create_app  # noqa: E402
from tests.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    DEFAULT_PASSWORD,
    JOURNEY_DATE,
    TEST_USER_EMAIL,
    TEST_USER_NAME,
)


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'indiarail_test.db'}"


@pytest.fixture
def app(database_url):
    return create_app(database_url=database_url, seed=True)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan: schema creation and seeding
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    def _register(name: str = TEST_USER_NAME, email: str = TEST_USER_EMAIL, password: str = DEFAULT_PASSWORD):
        return client.post('/api/register', json={'name': name, 'email': email, 'password': password})

    return _register


@pytest.fixture
def login(client):
    def _login(email: str, password: str):
        return client.post('/api/login', json={'email': email, 'password': password})

    return _login


@pytest.fixture
def user_headers(register_user):
    response = register_user()
    assert response.status_code == 201
    return {'Authorization': f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(login):
    response = login(ADMIN_EMAIL, ADMIN_PASSWORD)
    assert response.status_code == 200
    return {'Authorization': f"Bearer {response.json()['token']}"}


@pytest.fixture
def book_ticket(client):
    def _book(headers: dict, **overrides):
        payload = {
            'trainId': '1',
            'journeyDate': JOURNEY_DATE,
            'className': '3A',
            'passengers': [
                {'name': 'Jane Doe', 'age': 31, 'gender': 'female'},
                {'name': 'John Doe', 'age': 33, 'gender': 'male'},
            ],
        }
        payload.update(overrides)
        return client.post('/api/tickets', json=payload, headers=headers)

    return _book
