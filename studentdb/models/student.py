from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studentdb.db.base_class import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(primary_key=True)
    fname: Mapped[str] = mapped_column(Text, nullable=False)
    lname: Mapped[str] = mapped_column(Text, nullable=False)

    assignments = relationship(
        "Assignment", back_populates="student", order_by="Assignment.id"
    )

    @property
    def full_name(self) -> str:
        return self.fname + " " + self.lname
