from pydantic import BaseModel


class AssignmentRecord(BaseModel):
    title: str
    grade: int

    class Config:
        from_attributes = True
        frozen = True
