from fastapi import Depends, Request
from sqlalchemy.orm import Session

from studentdb.repositories.registry import get_repository_class
from studentdb.repositories.base import StudentRepository


# every request gets a fresh session from the app's pool, and it will always close.
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_repository(
    request: Request,
    db: Session = Depends(get_db),
) -> StudentRepository:
    repository_class = get_repository_class(request.app.state.variant)
    return repository_class(db)
