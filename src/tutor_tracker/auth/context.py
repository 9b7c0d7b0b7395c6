from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import AuthEvent
from .client import AuthClient, Subscription
from .model import AuthSession

logger = logging.getLogger(__name__)


class SessionContext:
    """Who is signed in, passed explicitly to handlers.

    start() reads the current session and subscribes to changes; close()
    unsubscribes. In the web app one context lives for one request.
    """

    def __init__(self, client: AuthClient):
        self.client = client
        self.current: Optional[AuthSession] = None
        self._subscription: Optional[Subscription] = None

    def start(self) -> "SessionContext":
        self.current = self.client.get_session()
        self._subscription = self.client.on_auth_state_change(self._on_change)
        return self

    def _on_change(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        logger.info("Auth state changed: %s", event.value)
        self.current = session

    @property
    def is_authenticated(self) -> bool:
        return self.current is not None

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self) -> "SessionContext":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.close()
