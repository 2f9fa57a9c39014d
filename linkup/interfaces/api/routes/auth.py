"""Endpoints related to authentication."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from linkup.application.use_cases.users import AuthenticationStatus, authenticate_user
from linkup.infrastructure.database import get_db
from linkup.infrastructure.security import create_access_token
from linkup.interfaces.api.schemas import Token, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


# The form keeps the field names OAuth2PasswordRequestForm expects; ``username``
# accepts either the username or the email address.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate by username or email and return a JWT bearer token."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.UNKNOWN_USER:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")

    if auth_status is AuthenticationStatus.INVALID_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": str(user.id), "username": user.username})
    logger.info("User %s logged in", user.id)
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": UserRead.model_validate(user),
    }
