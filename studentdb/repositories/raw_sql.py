from sqlalchemy import text

from studentdb.repositories.base import StudentRepository
from studentdb.schemas.assignment import AssignmentRecord
from studentdb.schemas.student import StudentRecord

# The id is always a bind parameter, never part of the statement text.
LIST_STUDENTS = text("SELECT id, fname, lname FROM students ORDER BY id")
GET_STUDENT = text("SELECT id, fname, lname FROM students WHERE id = :id")
LIST_ASSIGNMENTS = text(
    "SELECT title, grade FROM assignments WHERE student_id = :student_id ORDER BY id"
)


class RawSqlRepository(StudentRepository):
    variant = "sql"

    def list_students(self) -> list[StudentRecord]:
        rows = self.db.execute(LIST_STUDENTS)
        return [StudentRecord.model_validate(dict(row._mapping)) for row in rows]

    def get_student(self, student_id: int) -> StudentRecord | None:
        row = self.db.execute(GET_STUDENT, {"id": student_id}).first()
        if row is None:
            return None
        return StudentRecord.model_validate(dict(row._mapping))

    def list_assignments_for_student(self, student_id: int) -> list[AssignmentRecord]:
        rows = self.db.execute(LIST_ASSIGNMENTS, {"student_id": student_id})
        return [AssignmentRecord.model_validate(dict(row._mapping)) for row in rows]
