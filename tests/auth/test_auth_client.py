from __future__ import annotations

import pytest

from tutor_tracker.auth.client import AuthClient
from tutor_tracker.auth.messages import GENERIC_ERROR, friendly_message
from tutor_tracker.core.enums import AuthEvent
from tutor_tracker.core.exceptions import AuthenticationError, ValidationError


@pytest.fixture
def storage():
    return {}


@pytest.fixture
def client(tutors_repo, storage):
    return AuthClient(tutors_repo, storage)


def test_sign_up_hashes_password_and_does_not_sign_in(client, tutors_repo, storage):
    tutor = client.sign_up(" Tutor@Example.com ", "secret123")

    assert tutor.email == "tutor@example.com"
    assert tutors_repo.get_by_email("tutor@example.com").password_hash != "secret123"
    assert client.get_session() is None
    assert storage == {}


def test_sign_up_twice_is_rejected(client):
    client.sign_up("tutor@example.com", "secret123")

    with pytest.raises(AuthenticationError) as exc:
        client.sign_up("tutor@example.com", "other-pass")

    assert friendly_message(exc.value) == "This email is already registered"


@pytest.mark.parametrize(
    "email,password",
    [("", "secret123"), ("tutor@example.com", ""), ("tutor@example.com", "12345")],
)
def test_credentials_are_validated(client, email, password):
    with pytest.raises(ValidationError):
        client.sign_up(email, password)


def test_sign_in_stores_session_and_notifies(client, storage):
    client.sign_up("tutor@example.com", "secret123")
    events = []
    client.on_auth_state_change(lambda event, session: events.append((event, session)))

    session = client.sign_in("tutor@example.com", "secret123")

    assert storage["tutor_id"] == session.tutor_id
    assert client.get_session() == session
    assert events == [(AuthEvent.SIGNED_IN, session)]


@pytest.mark.parametrize("email,password", [("tutor@example.com", "wrong-pass"), ("nobody@example.com", "secret123")])
def test_sign_in_with_bad_credentials(client, storage, email, password):
    client.sign_up("tutor@example.com", "secret123")

    with pytest.raises(AuthenticationError) as exc:
        client.sign_in(email, password)

    assert friendly_message(exc.value) == "Incorrect email or password"
    assert storage == {}


def test_sign_out_clears_session_and_notifies(client, storage):
    client.sign_up("tutor@example.com", "secret123")
    client.sign_in("tutor@example.com", "secret123")
    events = []
    client.on_auth_state_change(lambda event, session: events.append((event, session)))

    client.sign_out()

    assert storage == {}
    assert client.get_session() is None
    assert events == [(AuthEvent.SIGNED_OUT, None)]


def test_unsubscribed_listener_is_not_called(client):
    client.sign_up("tutor@example.com", "secret123")
    events = []
    subscription = client.on_auth_state_change(lambda event, session: events.append(event))

    subscription.unsubscribe()
    subscription.unsubscribe()
    client.sign_in("tutor@example.com", "secret123")

    assert events == []


def test_session_of_removed_tutor_is_dropped(client, tutors_repo, storage):
    client.sign_up("tutor@example.com", "secret123")
    session = client.sign_in("tutor@example.com", "secret123")
    del tutors_repo.rows[session.tutor_id]

    assert client.get_session() is None
    assert storage == {}


def test_friendly_message_passes_other_text_through():
    assert friendly_message(RuntimeError("Network down")) == "Network down"
    assert friendly_message("") == GENERIC_ERROR
