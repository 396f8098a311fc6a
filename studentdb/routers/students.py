import re

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from studentdb.core.config import TEMPLATES_DIR
from studentdb.core.deps import get_repository
from studentdb.repositories.base import StudentRepository

router = APIRouter()

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# ids are stored as 64-bit integers
MAX_ID = 2**63 - 1

ID_LITERAL = re.compile(r"-?[0-9]+")


def _parse_student_id(raw: str) -> int | None:
    """Ids are ASCII integer literals; anything else cannot match a row."""
    if not ID_LITERAL.fullmatch(raw):
        return None
    sid = int(raw)
    if not -MAX_ID <= sid <= MAX_ID:
        return None
    return sid


@router.get("/", response_class=HTMLResponse)
def list_students(
    request: Request,
    repo: StudentRepository = Depends(get_repository),
):
    students = repo.list_students()
    return templates.TemplateResponse(
        request, "index.html", {"students": students}
    )


@router.get("/student/{student_id}", response_class=HTMLResponse)
def show_student(
    student_id: str,
    request: Request,
    repo: StudentRepository = Depends(get_repository),
):
    sid = _parse_student_id(student_id)

    student = None
    assignments = []
    if sid is not None:
        student = repo.get_student(sid)
        assignments = repo.list_assignments_for_student(sid)

    return templates.TemplateResponse(
        request,
        "student.html",
        {"student": student, "assignments": assignments},
    )
