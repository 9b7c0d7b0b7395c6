from __future__ import annotations

import logging
from typing import Any, Callable, MutableMapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import AuthEvent
from ..core.exceptions import AuthenticationError, ValidationError
from .model import AuthSession, Tutor
from .repository import TutorRepository

logger = logging.getLogger(__name__)

AuthListener = Callable[[AuthEvent, Optional[AuthSession]], None]

SESSION_KEYS = ("tutor_id", "email")


class Subscription:
    def __init__(self, listeners: list, listener: AuthListener):
        self._listeners = listeners
        self._listener = listener

    def unsubscribe(self) -> None:
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)


class AuthClient:
    """Authentication for one browser session.

    ``storage`` is the mapping that survives between requests for that
    browser (the Flask session). Listeners registered with
    on_auth_state_change are told about every sign-in and sign-out made
    through this client.
    """

    def __init__(self, tutors: TutorRepository, storage: MutableMapping[str, Any]):
        self._tutors = tutors
        self._storage = storage
        self._listeners: list[AuthListener] = []

    def _credentials(self, email: str, password: str) -> tuple[str, str]:
        email = (email or "").strip().lower()
        if not email or not password:
            raise ValidationError("Email and password are required")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        return email, password

    def _emit(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        for listener in list(self._listeners):
            listener(event, session)

    def _clear(self) -> None:
        for key in SESSION_KEYS:
            self._storage.pop(key, None)

    def get_session(self) -> Optional[AuthSession]:
        tutor_id = self._storage.get("tutor_id")
        if not tutor_id:
            return None

        tutor = self._tutors.get_by_id(int(tutor_id))
        if not tutor:
            self._clear()
            return None
        return AuthSession(tutor_id=tutor.tutor_id, email=tutor.email)

    def sign_up(self, email: str, password: str) -> Tutor:
        email, password = self._credentials(email, password)
        if self._tutors.get_by_email(email):
            raise AuthenticationError("User already registered")

        tutor = self._tutors.create(email=email, password_hash=generate_password_hash(password))
        logger.info("Registered tutor %s", tutor.email)
        return tutor

    def sign_in(self, email: str, password: str) -> AuthSession:
        email, password = self._credentials(email, password)
        tutor = self._tutors.get_by_email(email)
        if not tutor:
            raise AuthenticationError("Invalid login credentials")

        try:
            ok = check_password_hash(tutor.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid login credentials")

        session = AuthSession(tutor_id=tutor.tutor_id, email=tutor.email)
        self._storage["tutor_id"] = session.tutor_id
        self._storage["email"] = session.email
        self._emit(AuthEvent.SIGNED_IN, session)
        return session

    def sign_out(self) -> None:
        self._clear()
        self._emit(AuthEvent.SIGNED_OUT, None)

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self._listeners, listener)
