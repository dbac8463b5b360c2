"""
FastAPI dependencies for authentication and authorization.

These dependencies run before the endpoint body, so a rejected caller never
reaches validation or the database layer.
"""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session
from typing import Optional

from app.core.database import get_db
from app.core.errors import ForbiddenError, UnauthorizedError
from app.core.security import decode_token
from app.models.user import User

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error=False so a missing header goes through our UnauthorizedError
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from JWT token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT
    3. Fetches the user from the database

    Raises:
        UnauthorizedError: If the token is missing or invalid, or the user no longer exists
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    username = payload.get("sub")
    if username is None:
        raise UnauthorizedError("Could not validate credentials")

    user = db.get(User, username)
    if user is None:
        raise UnauthorizedError("Could not validate credentials")

    return user


async def get_admin_user(user: User = Depends(get_current_user)) -> User:
    """
    Require the current user to be an admin.

    Raises:
        UnauthorizedError: If not authenticated
        ForbiddenError: If authenticated but not an admin
    """
    if not user.is_admin:
        raise ForbiddenError("Admin privileges required")

    return user
