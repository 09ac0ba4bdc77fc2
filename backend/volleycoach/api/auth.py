"""
Authentication API endpoints.
"""
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from volleycoach.api.deps import get_store
from volleycoach.core.auth import get_current_user_id
from volleycoach.core.logging import get_logger
from volleycoach.core.security import create_access_token, get_password_hash, verify_password
from volleycoach.store import Query, Store, StoreError

logger = get_logger(__name__)
router = APIRouter()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


# ========================================
# Request/Response Schemas
# ========================================

class RegisterRequest(BaseModel):
    """Request to create an account."""
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(BaseModel):
    """Request to log in."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public user fields."""
    id: str
    email: str
    name: str


class AuthResponse(BaseModel):
    """Issued token and the user it belongs to."""
    token: str
    user: UserResponse


def _user_response(user: dict) -> UserResponse:
    return UserResponse(id=user["id"], email=user["email"], name=user["name"])


async def _find_by_email(store: Store, email: str) -> Optional[dict]:
    users = await store.select(Query("users").eq("email", email))
    return users[0] if users else None


# ========================================
# API Endpoints
# ========================================

@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    store: Store = Depends(get_store),
):
    """
    Create an account and return an access token.
    """
    if not request.email or not request.password or not request.name:
        raise HTTPException(status_code=400, detail="Email, password, and name are required")

    email = request.email.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise HTTPException(status_code=400, detail="Invalid email format")

    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
        )

    if await _find_by_email(store, email):
        raise HTTPException(status_code=409, detail="User already exists")

    try:
        user = await store.insert("users", {
            "email": email,
            "password_hash": get_password_hash(request.password),
            "name": request.name.strip(),
        })
    except StoreError as e:
        logger.error("User creation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create user")

    logger.info("User registered", user_id=user["id"])

    return AuthResponse(token=create_access_token(user["id"]), user=_user_response(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    store: Store = Depends(get_store),
):
    """
    Exchange email and password for an access token.
    """
    if not request.email or not request.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    user = await _find_by_email(store, request.email.strip().lower())
    if not user or not verify_password(request.password, user["password_hash"]):
        logger.info("Login rejected")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info("User logged in", user_id=user["id"])

    return AuthResponse(token=create_access_token(user["id"]), user=_user_response(user))


@router.get("/me")
async def get_me(
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    """
    Get the authenticated user.
    """
    user = await store.get("users", user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return {"user": _user_response(user)}


@router.post("/logout")
async def logout(
    user_id: str = Depends(get_current_user_id),
):
    """
    Log out. Tokens are stateless; the client discards its copy.
    """
    logger.info("User logged out", user_id=user_id)
    return {"message": "Logged out successfully"}
