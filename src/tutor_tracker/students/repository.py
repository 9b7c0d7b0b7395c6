from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, name: str) -> Student:
        """Insert a student and return it with generated fields."""

        raise NotImplementedError

    def delete(self, *, student_id: int) -> bool:
        raise NotImplementedError

    def list_all(self, *, order_by: str = "created_at", descending: bool = True) -> Sequence[Student]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
