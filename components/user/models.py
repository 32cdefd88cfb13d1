"""User model for the database."""

from sqlalchemy import Column, Integer, Text

from components.core.database import Base


class User(Base):
    """User model representing an account that owns student records."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)  # Hashed password
