"""
Authentication endpoints.

- POST /auth/token: exchange username/password for a JWT
- POST /auth/register: create a (non-admin) user and return a JWT
"""

import logging
from typing import Any
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_access_token
from app.core.validation import validate_payload
from app.crud import user as user_crud
from app.models.user import User
from app.schemas.user import TokenResponse, UserLoginRequest, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def token_for(user: User) -> str:
    return create_access_token(data={"sub": user.username, "is_admin": user.is_admin})


@router.post("/token", response_model=TokenResponse)
def login(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Authenticate with { username, password } and receive a token."""
    credentials = validate_payload(UserLoginRequest, payload)

    user = user_crud.authenticate(db, credentials.username, credentials.password)

    return TokenResponse(token=token_for(user))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Register a new user account.

    Body: { username, password, firstName, lastName, email }
    Returns a token for immediate use. Registered users are never admins.
    """
    user_data = validate_payload(UserRegisterRequest, payload)

    new_user = user_crud.register(db, user_data)

    logger.info(f"New user registered: {new_user.username}")
    return TokenResponse(token=token_for(new_user))
