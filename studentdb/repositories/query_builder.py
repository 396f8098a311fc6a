from sqlalchemy import column, select, table

from studentdb.repositories.base import StudentRepository
from studentdb.schemas.assignment import AssignmentRecord
from studentdb.schemas.student import StudentRecord

# Lightweight table/column handles: names only, no mapped classes involved.
students = table("students", column("id"), column("fname"), column("lname"))
assignments = table(
    "assignments",
    column("id"),
    column("student_id"),
    column("title"),
    column("grade"),
)


class QueryBuilderRepository(StudentRepository):
    variant = "builder"

    def list_students(self) -> list[StudentRecord]:
        stmt = (
            select(students.c.id, students.c.fname, students.c.lname)
            .select_from(students)
            .order_by(students.c.id)
        )
        return [
            StudentRecord.model_validate(dict(row))
            for row in self.db.execute(stmt).mappings()
        ]

    def get_student(self, student_id: int) -> StudentRecord | None:
        stmt = (
            select(students.c.id, students.c.fname, students.c.lname)
            .select_from(students)
            .where(students.c.id == student_id)
            .limit(1)
        )
        row = self.db.execute(stmt).mappings().first()
        if row is None:
            return None
        return StudentRecord.model_validate(dict(row))

    def list_assignments_for_student(self, student_id: int) -> list[AssignmentRecord]:
        stmt = (
            select(assignments.c.title, assignments.c.grade)
            .select_from(assignments)
            .where(assignments.c.student_id == student_id)
            .order_by(assignments.c.id)
        )
        return [
            AssignmentRecord.model_validate(dict(row))
            for row in self.db.execute(stmt).mappings()
        ]
