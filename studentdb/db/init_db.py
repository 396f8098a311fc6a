import logging

from sqlalchemy import Engine, func, select
from sqlalchemy.orm import Session

from studentdb.db.base_class import Base

# import models so SQLAlchemy registers them
from studentdb.models.assignment import Assignment
from studentdb.models.student import Student

logger = logging.getLogger(__name__)

SEED_STUDENTS = [
    ("Sylvia", "Plath"),
    ("Anne", "Sexton"),
]

# (index into SEED_STUDENTS, title, grade)
SEED_ASSIGNMENTS = [
    (0, "Essay #1", 85),
    (0, "Poem #1", 90),
    (1, "Short Story", 80),
    (1, "Long Poem", 87),
]


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def seed_db(db: Session) -> bool:
    """Insert the fixed seed rows. Returns False if students already exist."""
    if db.scalar(select(func.count(Student.id))):
        logger.info("Students table already populated, skipping seed")
        return False

    students = [Student(fname=fname, lname=lname) for fname, lname in SEED_STUDENTS]
    db.add_all(students)
    db.flush()

    db.add_all(
        [
            Assignment(student_id=students[i].id, title=title, grade=grade)
            for i, title, grade in SEED_ASSIGNMENTS
        ]
    )
    db.commit()
    logger.info(
        "Seeded %d students and %d assignments",
        len(SEED_STUDENTS),
        len(SEED_ASSIGNMENTS),
    )
    return True
