"""
Data access layer shared by the three variants.

Every variant answers the same three questions about students. The router
only ever talks to a ``StudentRepository``, so swapping raw SQL for the query
builder or the ORM changes nothing the templates can see.
"""

from abc import ABC, abstractmethod

from sqlalchemy.orm import Session

from studentdb.schemas.assignment import AssignmentRecord
from studentdb.schemas.student import StudentRecord


class StudentRepository(ABC):
    variant: str

    def __init__(self, db: Session):
        self.db = db

    @abstractmethod
    def list_students(self) -> list[StudentRecord]:
        """All students, ordered by id."""

    @abstractmethod
    def get_student(self, student_id: int) -> StudentRecord | None:
        """The student with this id, or None when there is no such row."""

    @abstractmethod
    def list_assignments_for_student(self, student_id: int) -> list[AssignmentRecord]:
        """Assignments whose student_id matches, ordered by id. Empty when none."""
