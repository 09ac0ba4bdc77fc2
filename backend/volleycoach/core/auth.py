"""
Authentication dependencies.

Provides FastAPI dependencies for:
- Getting the current authenticated user id
- Scoping requests to the caller's athlete id
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from volleycoach.core.security import decode_access_token

# auto_error=False so missing credentials return 401 (not 403)
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Get the current authenticated user id from the bearer token.

    Raises HTTPException if the token is missing or invalid.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    return user_id


def resolve_athlete_id(requested: Optional[str], user_id: str) -> str:
    """
    Return the athlete id a request operates on.

    Athletes are identified by their user id; a client-supplied
    athlete_id must match the authenticated caller.
    """
    if requested and requested != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="athlete_id does not match the authenticated user",
        )
    return user_id
