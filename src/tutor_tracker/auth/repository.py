from __future__ import annotations

from typing import Optional, Protocol

from .model import Tutor


class TutorRepository(Protocol):
    def get_by_id(self, tutor_id: int) -> Optional[Tutor]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Tutor]:
        raise NotImplementedError

    def create(self, *, email: str, password_hash: str) -> Tutor:
        raise NotImplementedError
