import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studentdb.db.init_db import init_db
from studentdb.db.session import make_engine
from studentdb.models.assignment import Assignment
from studentdb.models.student import Student


def test_full_name_is_computed(db):
    student = db.get(Student, 1)
    assert student.full_name == "Sylvia Plath"

    student.fname = "Victoria"
    assert student.full_name == "Victoria Plath"
    db.rollback()


def test_student_assignments_relationship(db):
    student = db.get(Student, 2)
    assert [(a.title, a.grade) for a in student.assignments] == [
        ("Short Story", 80),
        ("Long Poem", 87),
    ]
    assert all(a.student is student for a in student.assignments)


def test_every_assignment_has_a_student(db):
    for assignment in db.query(Assignment).all():
        assert assignment.student is not None
        assert assignment.student_id == assignment.student.id


def test_grade_out_of_range_is_rejected_by_the_store(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path}/grades.db")
    init_db(engine)
    with Session(engine) as session:
        student = Student(fname="Ted", lname="Hughes")
        session.add(student)
        session.flush()
        session.add(Assignment(student_id=student.id, title="Extra credit", grade=150))
        with pytest.raises(IntegrityError):
            session.flush()
    engine.dispose()
