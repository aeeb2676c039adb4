"""
Authentication endpoints for Admin API.
Login and token verification.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import Optional

from mailtext.core.config import settings
from mailtext.core.database import get_db
from mailtext.core.security import (
    authenticate_user,
    create_access_token,
    require_user
)
from mailtext.models.user import User
from slowapi import Limiter
from slowapi.util import get_remote_address

logger = logging.getLogger(__name__)
router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


# Pydantic models
class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class VerifyResponse(BaseModel):
    valid: bool
    user: Optional[str] = None
    admin: bool = False


# ==================== AUTHENTICATION ENDPOINTS ====================

@router.post("/auth/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)  # Prevent brute force attacks
async def login(request: Request, credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Login endpoint.
    Returns JWT token for authentication.
    
    Args:
        credentials: Username and password
    
    Returns:
        JWT access token
    
    Raises:
        HTTPException: If credentials are invalid
    """
    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.warning(f"Failed login attempt for username: {credentials.username}")
        raise HTTPException(
            status_code=401,
            detail="Incorrect username or password",
        )
    
    access_token = create_access_token(data={"sub": str(user.id)})
    
    logger.info(f"User '{user.username}' logged in successfully")
    
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60  # Convert to seconds
    )


@router.get("/auth/verify", response_model=VerifyResponse)
async def verify_token(user: User = Depends(require_user)):
    """
    Verify JWT token.
    Protected endpoint that requires a valid token.
    
    Returns:
        Verification status
    """
    return VerifyResponse(
        valid=True,
        user=user.username,
        admin=user.admin
    )
