"""Endpoints for account creation and token issuance."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from pulse.application.use_cases.users import authenticate_user, register_user
from pulse.infrastructure.database import get_db
from pulse.infrastructure.security import create_user_access_token
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    RegisterRequest,
    RegisterResponse,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Crée un compte utilisateur standard."""

    with translate_errors():
        user = register_user(
            db,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    logger.info("User %s registered", user.id)
    return RegisterResponse(
        message="Utilisateur créé avec succès",
        user=UserRead.model_validate(user),
    )


# OAuth2PasswordRequestForm names the e-mail field ``username``.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authentifie l'utilisateur par e-mail et renvoie un jeton JWT."""

    user = authenticate_user(db, form_data.username, form_data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email ou mot de passe incorrect",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {
        "access_token": create_user_access_token(user),
        "token_type": "bearer",
        "role": user.role,
    }
