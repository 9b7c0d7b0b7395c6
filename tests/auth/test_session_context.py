from __future__ import annotations

from tutor_tracker.auth.client import AuthClient
from tutor_tracker.auth.context import SessionContext


def test_context_follows_sign_in_and_sign_out(tutors_repo):
    client = AuthClient(tutors_repo, {})
    client.sign_up("tutor@example.com", "secret123")

    with SessionContext(client) as ctx:
        assert not ctx.is_authenticated

        client.sign_in("tutor@example.com", "secret123")
        assert ctx.is_authenticated
        assert ctx.current.email == "tutor@example.com"

        client.sign_out()
        assert ctx.current is None


def test_context_picks_up_existing_session(tutors_repo):
    storage = {}
    client = AuthClient(tutors_repo, storage)
    client.sign_up("tutor@example.com", "secret123")
    client.sign_in("tutor@example.com", "secret123")

    ctx = SessionContext(AuthClient(tutors_repo, storage)).start()

    assert ctx.is_authenticated
    ctx.close()


def test_closed_context_stops_listening(tutors_repo):
    client = AuthClient(tutors_repo, {})
    client.sign_up("tutor@example.com", "secret123")
    ctx = SessionContext(client).start()
    ctx.close()

    client.sign_in("tutor@example.com", "secret123")

    assert ctx.current is None
