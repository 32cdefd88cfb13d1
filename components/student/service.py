"""Student operations bound to an authenticated session."""

from typing import List

from components.core.schemas import Result
from components.student import schemas
from components.student.repository import StudentRepository
from components.user.service import UserSession


class StudentService:
    """Student operations bound to one authenticated session."""

    def __init__(self, students: StudentRepository, session: UserSession):
        self.students = students
        self.session = session

    @property
    def owner_id(self) -> int:
        return self.session.user_id

    def add(self, student: schemas.StudentCreate) -> Result[schemas.Student]:
        return self.students.add(student, self.owner_id)

    def list_all(self) -> List[schemas.Student]:
        return self.students.list_all(self.owner_id)

    def search(self, query: schemas.SearchQuery) -> List[schemas.Student]:
        """Search the owner's students; text below the minimum length lists everything."""
        if not query.is_filter:
            return self.list_all()
        return self.students.search(query.text, self.owner_id)

    def update(self, student: schemas.StudentUpdate) -> int:
        return self.students.update(student, self.owner_id)

    def delete(self, student_id: int) -> int:
        return self.students.delete(student_id, self.owner_id)
