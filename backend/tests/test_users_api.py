"""End-to-end tests for the /users HTTP API."""

from datetime import datetime, timedelta

import pytest

from config.settings import Settings
from constants import ErrorMessages, UserConstraints
from dependencies import get_settings
from models import User

JOHN = {"name": "John Doe", "email": "john@example.com", "age": 30}
JANE = {"name": "Jane Doe", "email": "jane@example.com", "age": 25}


def _assert_envelope(response, status_code):
    assert response.status_code == status_code, response.text
    body = response.json()
    assert set(body) == {"message", "timestamp"}
    timestamp = datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    assert timestamp.utcoffset() == timedelta(0)
    return body["message"]


def _create(client, payload):
    response = client.post("/users", json=payload)
    assert response.status_code == 200, response.text
    return response


def _id_of(db_session, email):
    return db_session.query(User).filter(User.email == email).one().id


class TestCreate:
    def test_create_returns_empty_body(self, client):
        response = _create(client, JOHN)

        assert response.content == b""

    def test_create_then_get(self, client, db_session):
        _create(client, JOHN)
        user_id = _id_of(db_session, JOHN["email"])

        response = client.get(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"id": user_id, **JOHN}

    def test_invalid_payload_aggregates_messages(self, client, db_session):
        response = client.post("/users", json={"name": "John123", "email": "invalid-email", "age": -1})

        message = _assert_envelope(response, 400)
        assert f"name - {ErrorMessages.NAME_HAS_DIGITS};" in message
        assert f"email - {ErrorMessages.EMAIL_INVALID};" in message
        assert "age must be greater than 0" in message
        assert db_session.query(User).count() == 0

    def test_missing_field(self, client):
        response = client.post("/users", json={"name": "John Doe", "email": "john@example.com"})

        assert _assert_envelope(response, 400).startswith("age - ")

    def test_malformed_json(self, client):
        response = client.post("/users", content=b"{not json", headers={"content-type": "application/json"})

        _assert_envelope(response, 400)

    def test_duplicate_email(self, client, db_session):
        _create(client, JOHN)

        response = client.post("/users", json={**JOHN, "name": "Johnny"})

        assert _assert_envelope(response, 400) == ErrorMessages.EMAIL_TAKEN
        assert db_session.query(User).count() == 1

    def test_create_publishes_notification(self, client, received):
        _create(client, JOHN)

        assert received == [{"email": JOHN["email"], "eventType": "USER_CREATED"}]


class TestRead:
    def test_list_users(self, client):
        _create(client, JOHN)
        _create(client, JANE)

        response = client.get("/users")

        assert response.status_code == 200
        assert [(u["name"], u["email"], u["age"]) for u in response.json()] == [
            ("John Doe", "john@example.com", 30),
            ("Jane Doe", "jane@example.com", 25),
        ]

    def test_list_empty_is_not_found(self, client):
        assert _assert_envelope(client.get("/users"), 404) == ErrorMessages.USERS_EMPTY

    def test_list_empty_returns_list_when_configured(self, app, client):
        app.dependency_overrides[get_settings] = lambda: Settings(empty_list_is_error=False)

        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_missing_user(self, client):
        assert _assert_envelope(client.get("/users/1"), 404) == ErrorMessages.USER_NOT_FOUND

    def test_non_integer_id(self, client):
        message = _assert_envelope(client.get("/users/abc"), 400)

        assert message.startswith("user_id - ")


class TestUpdate:
    def test_update_returns_dto(self, client, db_session):
        _create(client, JOHN)
        user_id = _id_of(db_session, JOHN["email"])

        response = client.put(f"/users/{user_id}", json=JANE)

        assert response.status_code == 200
        assert response.json() == {"id": user_id, **JANE}

    def test_update_keeps_created_at(self, client, db_session):
        _create(client, JOHN)
        before = db_session.query(User).one()
        user_id, created_at, updated_at = before.id, before.created_at, before.updated_at

        client.put(f"/users/{user_id}", json=JANE)
        db_session.expire_all()
        after = db_session.get(User, user_id)

        assert after.created_at == created_at
        assert after.updated_at >= updated_at

    def test_update_missing_user(self, client):
        _assert_envelope(client.put("/users/5", json=JANE), 404)

    def test_update_to_taken_email(self, client, db_session):
        _create(client, JOHN)
        _create(client, JANE)
        jane_id = _id_of(db_session, JANE["email"])

        response = client.put(f"/users/{jane_id}", json={**JANE, "email": JOHN["email"]})

        assert _assert_envelope(response, 400) == ErrorMessages.EMAIL_TAKEN

    def test_update_validates_body(self, client, db_session):
        _create(client, JOHN)
        user_id = _id_of(db_session, JOHN["email"])

        response = client.put(f"/users/{user_id}", json={**JOHN, "age": 200})

        assert ErrorMessages.AGE_TOO_LARGE in _assert_envelope(response, 400)


class TestDelete:
    def test_delete_then_get(self, client, db_session):
        _create(client, JOHN)
        user_id = _id_of(db_session, JOHN["email"])

        response = client.delete(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.content == b""
        _assert_envelope(client.get(f"/users/{user_id}"), 404)

    def test_delete_missing_user(self, client):
        assert _assert_envelope(client.delete("/users/1"), 404) == ErrorMessages.USER_NOT_FOUND

    def test_delete_publishes_notification(self, client, db_session, received):
        _create(client, JOHN)
        received.clear()

        client.delete(f"/users/{_id_of(db_session, JOHN['email'])}")

        assert received == [{"email": JOHN["email"], "eventType": "USER_DELETED"}]


@pytest.mark.parametrize("path", ["/health"])
def test_health(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_header_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


class TestInputEdges:
    @pytest.mark.parametrize("user_id", [UserConstraints.ID_MAX + 1, 0, -1])
    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_id_outside_key_range(self, client, method, user_id):
        response = getattr(client, method)(f"/users/{user_id}")

        assert _assert_envelope(response, 400).startswith("user_id - ")

    def test_update_id_outside_key_range(self, client):
        response = client.put(f"/users/{UserConstraints.ID_MAX + 1}", json=JOHN)

        assert _assert_envelope(response, 400).startswith("user_id - ")

    def test_largest_id_is_not_found(self, client):
        _assert_envelope(client.get(f"/users/{UserConstraints.ID_MAX}"), 404)

    def test_trailing_newline_email_rejected(self, client, db_session):
        response = client.post("/users", json={**JOHN, "email": JOHN["email"] + "\n"})

        assert ErrorMessages.EMAIL_INVALID in _assert_envelope(response, 400)
        assert db_session.query(User).count() == 0

    @pytest.mark.parametrize("age", [True, "30", 30.5])
    def test_non_integer_age_rejected(self, client, db_session, age):
        response = client.post("/users", json={**JOHN, "age": age})

        assert _assert_envelope(response, 400).startswith("age - ")
        assert db_session.query(User).count() == 0
