"""
CRUD operations for User model.

Covers the two things the auth endpoints need: checking credentials and
registering a new (non-admin) user.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.core.errors import BadRequestError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.models.user import User
from app.schemas.user import UserRegisterRequest


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.get(User, username)


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Return the user if the password is correct.

    Raises:
        UnauthorizedError: If the username is unknown or the password is wrong
    """
    user = get_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        raise UnauthorizedError("Invalid username/password")

    return user


def register(db: Session, user_data: UserRegisterRequest, is_admin: bool = False) -> User:
    """
    Create a new user with a hashed password.

    Raises:
        BadRequestError: If the username is already taken
    """
    if get_by_username(db, user_data.username):
        raise BadRequestError(f"Duplicate username: {user_data.username}")

    user = User(
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    return user
