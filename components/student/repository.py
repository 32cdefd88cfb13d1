"""Repository for student operations."""

import logging
from typing import List, Optional

from sqlalchemy import String, cast, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError

from components.core.database import DatabaseManager
from components.core.errors import ErrorCode, is_unique_violation
from components.core.schemas import Result
from components.student.models import Student
from components.student import schemas

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def _none_if_blank(value: Optional[str]) -> Optional[str]:
    """Blank optional fields are stored as NULL."""
    if value is None or not value.strip():
        return None
    return value


def _contains_pattern(text: str) -> str:
    """Build a lower-cased LIKE pattern that matches `text` literally."""
    escaped = (
        text.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class StudentRepository:
    """
    Repository for student operations.

    Every method requires the owner's user id and uses it in the statement
    itself, so no call can read or change another user's records.
    """

    def __init__(self, db_manager: DatabaseManager):
        """Initialize repository with database manager."""
        self.db = db_manager

    def add(self, student: schemas.StudentCreate, owner_id: int) -> Result[schemas.Student]:
        """
        Create a student record for the owner.

        Uniqueness of (student_id, owner) is left to the table constraint. A
        missing owner fails the foreign key and surfaces as StorageError.
        """
        db_student = Student(
            student_id=student.student_id,
            name=student.name,
            surname=student.surname,
            faculty=_none_if_blank(student.faculty),
            department=_none_if_blank(student.department),
            student_group=_none_if_blank(student.group),
            user_id=owner_id,
        )
        with self.db.get_db() as session:
            session.add(db_student)
            try:
                session.commit()
            except IntegrityError as exc:
                if not is_unique_violation(exc):
                    raise
                session.rollback()
                logger.info(
                    "Student %s already exists for user %s", student.student_id, owner_id
                )
                return Result(
                    error=ErrorCode.DUPLICATE_STUDENT_ID,
                    student_id=student.student_id,
                )
            return Result(value=schemas.Student.model_validate(db_student))

    def list_all(self, owner_id: int) -> List[schemas.Student]:
        """Get all students of the owner ordered by student ID."""
        with self.db.get_db() as session:
            result = session.execute(
                select(Student)
                .where(Student.user_id == owner_id)
                .order_by(Student.student_id)
            )
            return [schemas.Student.model_validate(row) for row in result.scalars().all()]

    def search(self, text: str, owner_id: int) -> List[schemas.Student]:
        """
        Find the owner's students where any field contains `text`.

        Matching is case-insensitive over the ID as text, name, surname,
        faculty, department and group; NULL fields match as empty strings.
        An empty `text` matches every record of the owner.
        """
        pattern = _contains_pattern(text)
        fold = func.py_lower if self.db.engine.dialect.name == "sqlite" else func.lower
        searchable = [
            cast(Student.student_id, String),
            Student.name,
            Student.surname,
            func.coalesce(Student.faculty, ""),
            func.coalesce(Student.department, ""),
            func.coalesce(Student.student_group, ""),
        ]
        with self.db.get_db() as session:
            result = session.execute(
                select(Student)
                .where(
                    Student.user_id == owner_id,
                    or_(*(fold(column, type_=String).like(pattern, escape=LIKE_ESCAPE)
                          for column in searchable)),
                )
                .order_by(Student.student_id)
            )
            return [schemas.Student.model_validate(row) for row in result.scalars().all()]

    def update(self, student: schemas.StudentUpdate, owner_id: int) -> int:
        """
        Update the descriptive fields of one of the owner's students.

        The student ID and owner only select the row; they are never
        written. Returns the number of rows changed, 0 when nothing matched.
        """
        with self.db.get_db() as session:
            result = session.execute(
                update(Student)
                .where(
                    Student.student_id == student.student_id,
                    Student.user_id == owner_id,
                )
                .values(
                    name=student.name,
                    surname=student.surname,
                    faculty=_none_if_blank(student.faculty),
                    department=_none_if_blank(student.department),
                    student_group=_none_if_blank(student.group),
                )
            )
            session.commit()
            return result.rowcount

    def delete(self, student_id: int, owner_id: int) -> int:
        """Delete one of the owner's students. Returns rows deleted."""
        with self.db.get_db() as session:
            result = session.execute(
                delete(Student).where(
                    Student.student_id == student_id,
                    Student.user_id == owner_id,
                )
            )
            session.commit()
            deleted = result.rowcount
        if deleted:
            logger.info("Deleted student %s of user %s", student_id, owner_id)
        return deleted
