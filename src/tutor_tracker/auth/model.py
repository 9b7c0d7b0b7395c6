from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Tutor:
    """Domain entity: the account that signs in.

    Note: Plain data object (no DB access code).
    """

    tutor_id: int
    email: str
    password_hash: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AuthSession:
    """What we keep in the Flask session after sign-in."""

    tutor_id: int
    email: str

    def to_dict(self) -> dict:
        return {"tutor_id": self.tutor_id, "email": self.email}
