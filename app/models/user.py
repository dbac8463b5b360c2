"""
User model for authentication.

Only admins may create, update or delete jobs.
"""

from sqlalchemy import Column, String, Boolean
from app.core.database import Base


class User(Base):
    """User account, identified by username."""
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)

    # Authentication credentials
    hashed_password = Column(String, nullable=False)

    # User profile
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    # Admin role for protected endpoints
    is_admin = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
