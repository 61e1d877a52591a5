"""Application lifecycle and seeding tests."""

import pytest
from fastapi.testclient import TestClient

from src.database import Database
from src.main import create_app, init_database
from src.models import Passenger, Ticket, Train, User
from src.seed import seed_database


def test_health(client):
    assert client.get('/health').json() == {'status': 'healthy'}


def test_root(client):
    assert client.get('/').json()['docs'] == '/docs'


def test_openapi_schema_lists_endpoints(client):
    paths = client.get('/openapi.json').json()['paths']

    assert '/api/register' in paths
    assert '/api/tickets/{ticket_id}/cancel' in paths
    assert '/api/admin/dashboard' in paths


def test_seeding_is_idempotent(database_url):
    database = Database(database_url)
    try:
        init_database(database)
        db = database.session()
        try:
            seed_database(db)
            assert db.query(User).count() == 2
            assert db.query(Train).count() == 5
        finally:
            db.close()
    finally:
        database.dispose()


def test_app_without_seed_has_empty_catalogue(database_url):
    app = create_app(database_url=database_url, seed=False)

    with TestClient(app) as client:
        assert client.get('/api/trains').json() == []


def test_startup_fails_when_storage_is_unusable(tmp_path):
    app = create_app(database_url=f"sqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}")

    with pytest.raises(Exception):
        with TestClient(app):
            pass


def test_unknown_route_uses_message_body(client):
    response = client.get('/api/nowhere')

    assert response.status_code == 404
    assert response.json() == {'message': 'Not Found'}


def test_passengers_are_deleted_with_their_ticket(app, client, user_headers, book_ticket):
    ticket_id = book_ticket(user_headers).json()['ticketId']
    db = app.state.database.session()
    try:
        assert db.query(Passenger).filter_by(ticket_id=ticket_id).count() == 2

        db.delete(db.query(Ticket).filter(Ticket.id == ticket_id).one())
        db.commit()

        assert db.query(Ticket).filter(Ticket.id == ticket_id).count() == 0
        assert db.query(Passenger).filter_by(ticket_id=ticket_id).count() == 0
    finally:
        db.close()
