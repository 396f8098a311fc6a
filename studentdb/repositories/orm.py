import logging

from studentdb.models.assignment import Assignment  # noqa: F401  (registers the mapper)
from studentdb.models.student import Student
from studentdb.repositories.base import StudentRepository
from studentdb.schemas.assignment import AssignmentRecord
from studentdb.schemas.student import StudentRecord

logger = logging.getLogger(__name__)


class OrmRepository(StudentRepository):
    variant = "orm"

    def list_students(self) -> list[StudentRecord]:
        students = self.db.query(Student).order_by(Student.id).all()
        return [StudentRecord.model_validate(s) for s in students]

    def get_student(self, student_id: int) -> StudentRecord | None:
        student = self.db.get(Student, student_id)
        if student is None:
            return None
        logger.info("Full name is %s", student.full_name)
        return StudentRecord.model_validate(student)

    def list_assignments_for_student(self, student_id: int) -> list[AssignmentRecord]:
        # walk the Student.assignments relationship instead of filtering by hand
        student = self.db.get(Student, student_id)
        if student is None:
            return []
        return [AssignmentRecord.model_validate(a) for a in student.assignments]
