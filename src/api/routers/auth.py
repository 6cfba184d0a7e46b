"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from schemas.auth import AccessTokenResponse, AuthCredentials
from services import auth_service
from services.exceptions import EmailAlreadyExistsError, InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=AccessTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Register a new account and return an access token for it."""
    try:
        _, token = await auth_service.signup(db, data, settings)
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )
    return AccessTokenResponse(access_token=token)


@router.post("/signin", response_model=AccessTokenResponse)
async def signin(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Exchange email and password for an access token."""
    try:
        token = await auth_service.signin(db, data, settings)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return AccessTokenResponse(access_token=token)
