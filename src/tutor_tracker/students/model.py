from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a tutored student.

    Note: Plain data object (no DB access code).
    """

    student_id: int
    name: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
