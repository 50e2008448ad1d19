"""Sign-up, sign-in and sign-out. Tokens are returned in the body and set as an HTTP-only cookie."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status

from app.api.deps import get_user_store
from app.core.config import settings
from app.core.security import create_access_token
from app.schemas.auth import AuthResponse, MessageResponse
from app.schemas.user import UserPublic
from app.services.credentials import signin, signup
from app.services.user_store import UserStore

router = APIRouter()


def _issue_token(response: Response, user: UserPublic) -> str:
    token = create_access_token(sub=user.id, role=user.role, email=user.email)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.APP_ENV == "prod",
        samesite="strict",
    )
    return token


@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    response: Response,
    store: Annotated[UserStore, Depends(get_user_store)],
    payload: Annotated[Any, Body()] = None,
) -> AuthResponse:
    """Register with name, email, password and optional role; signs the new user in."""
    user = signup(store, payload)
    token = _issue_token(response, user)
    return AuthResponse(message="User registered", user=user, access_token=token)


@router.post("/sign-in", response_model=AuthResponse)
def sign_in(
    response: Response,
    store: Annotated[UserStore, Depends(get_user_store)],
    payload: Annotated[Any, Body()] = None,
) -> AuthResponse:
    """
    Authenticate with email and password.
    Use the returned token as: Authorization: Bearer <access_token>, or rely on the cookie.
    """
    user = signin(store, payload)
    token = _issue_token(response, user)
    return AuthResponse(message="User signed in successfully", user=user, access_token=token)


@router.post("/sign-out", response_model=MessageResponse)
def sign_out(response: Response) -> MessageResponse:
    """Clear the auth cookie. Issued tokens are not revoked and stay valid until they expire."""
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.APP_ENV == "prod",
        samesite="strict",
    )
    return MessageResponse(message="User signed out successfully")
