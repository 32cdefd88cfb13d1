"""Student model for the database."""

from sqlalchemy import Column, ForeignKey, Integer, Text, UniqueConstraint

from components.core.database import Base


class Student(Base):
    """Student record owned by a single user."""
    __tablename__ = "students"
    __table_args__ = (UniqueConstraint("student_id", "user_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, nullable=False)  # Caller supplied, unique per owner
    name = Column(Text, nullable=False)
    surname = Column(Text, nullable=False)
    faculty = Column(Text, nullable=True)
    department = Column(Text, nullable=True)
    student_group = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
