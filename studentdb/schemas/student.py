from pydantic import BaseModel


class StudentRecord(BaseModel):
    id: int
    fname: str
    lname: str

    class Config:
        from_attributes = True
        frozen = True

    @property
    def full_name(self) -> str:
        return self.fname + " " + self.lname
