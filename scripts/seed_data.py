"""Script to seed demo data into the database."""

import logging

from components.student.schemas import StudentCreate
from components.student.service import StudentService
from components.user.schemas import UserCreate, UserLogin
from main import bootstrap, configure_logging

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo1234"

STUDENTS = [
    {"student_id": 1001, "name": "Jon", "surname": "Doe",
     "faculty": "Engineering", "department": "Computer Science", "group": "CS-11"},
    {"student_id": 1002, "name": "Jane", "surname": "Smith",
     "faculty": "Engineering", "department": "Electrical", "group": "EE-21"},
    {"student_id": 1003, "name": "Alex", "surname": "Johnson",
     "faculty": "Science", "department": "", "group": ""},
]


def seed_data() -> None:
    """Create the demo user and its students, skipping what already exists."""
    app = bootstrap()
    try:
        registered = app.auth.register(
            UserCreate(username=DEMO_USERNAME, password=DEMO_PASSWORD,
                       confirm_password=DEMO_PASSWORD)
        )
        if not registered.ok:
            logger.info("Demo user already exists")

        session = app.auth.login(UserLogin(username=DEMO_USERNAME, password=DEMO_PASSWORD))
        if session is None:
            logger.error("Demo user exists with a different password, nothing seeded")
            return

        service = StudentService(app.students, session)
        for data in STUDENTS:
            result = service.add(StudentCreate(**data))
            if result.ok:
                logger.info("Added student %s", data["student_id"])
            else:
                logger.info("Student %s already present", result.student_id)
    finally:
        app.db_manager.dispose()


if __name__ == "__main__":
    configure_logging()
    seed_data()
