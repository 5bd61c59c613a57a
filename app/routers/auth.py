import asyncio
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.security import hash_password, verify_password
from app.auth.session import SessionStore, get_current_user, get_session_store, require_user_id
from app.crud import user as crud_user
from app.database import get_db
from app.exceptions import InvalidCredentialsError
from app.models import User
from app.schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    VerifyResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
async def register_user(
    request: RegisterRequest,
    session: SessionStore = Depends(get_session_store),
    db: AsyncSession = Depends(get_db),
):
    """Create an account and log it in."""
    user = await crud_user.create_user(
        db,
        name=request.name,
        email=request.email,
        password_hash=await asyncio.to_thread(hash_password, request.password),
    )
    session.login(user.id)
    logger.info("Registered user %s", user.id)

    return AuthResponse(
        message="Account created successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login_user(
    request: LoginRequest,
    session: SessionStore = Depends(get_session_store),
    db: AsyncSession = Depends(get_db),
):
    user = await crud_user.get_user_by_email(db, request.email)
    if user is None or not await asyncio.to_thread(verify_password, request.password, user.password_hash):
        raise InvalidCredentialsError()

    session.login(user.id)
    logger.info("User %s logged in", user.id)

    return AuthResponse(message="Login successful", user=UserResponse.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
async def logout_user(
    user_id: str = Depends(require_user_id),
    session: SessionStore = Depends(get_session_store),
):
    session.logout()
    logger.info("User %s logged out", user_id)
    return MessageResponse(message="Logout successful")


@router.get("/verify", response_model=VerifyResponse)
async def verify_user(user: User = Depends(get_current_user)):
    """Return the user behind the current session."""
    return VerifyResponse(user=UserResponse.model_validate(user))
