"""
Security utilities: JWT, password hashing, admin access gate
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
import logging

from mailtext.core.config import settings
from mailtext.core.database import get_db
from mailtext.core.exceptions import InvalidAccess
from mailtext.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)
# auto_error=False: anonymous callers reach the access gate instead of getting a 403
security_scheme = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    """
    Verify username and password against the users table.

    Args:
        db: Database session
        username: Username
        password: Password (plain text)

    Returns:
        The active user if credentials match, None otherwise
    """
    user = db.query(User).filter(User.username == username).first()
    if not user or not user.active:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


class Guardian:
    """
    Authorizer for one request. Wraps the signed-in user (or None).
    Rejections raise InvalidAccess, which the API renders as not found
    so that non-admins cannot tell whether an admin endpoint exists.
    """

    def __init__(self, user: Optional[User] = None):
        self.user = user

    @property
    def authenticated(self) -> bool:
        return self.user is not None and self.user.active

    @property
    def is_admin(self) -> bool:
        return self.authenticated and bool(self.user.admin)

    def ensure_admin(self) -> None:
        if not self.is_admin:
            who = self.user.username if self.user else "anonymous"
            logger.warning(f"Admin access denied for {who}")
            raise InvalidAccess()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    FastAPI dependency resolving the bearer token to a user.

    Returns:
        User, or None for missing/invalid/expired tokens and unknown users
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        logger.warning("Invalid or expired token")
        return None

    try:
        user_id = UUID(payload["sub"])
    except ValueError:
        return None

    return db.query(User).filter(User.id == user_id).first()


def get_guardian(user: Optional[User] = Depends(get_current_user)) -> Guardian:
    """FastAPI dependency providing the request's authorizer"""
    return Guardian(user)


def require_admin(guardian: Guardian = Depends(get_guardian)) -> Guardian:
    """
    Router-level dependency for admin-only endpoints.
    Solved before the request body is validated.

    Raises:
        InvalidAccess: caller is not an active admin
    """
    guardian.ensure_admin()
    return guardian


async def guardian_for_request(request: Request) -> Guardian:
    """
    Resolve the caller outside of dependency injection, for exception
    handlers that run before route dependencies are solved.
    """
    credentials = await security_scheme(request)
    if credentials is None:
        return Guardian(None)

    db_factory = request.app.dependency_overrides.get(get_db, get_db)
    db_gen = db_factory()
    db = next(db_gen)
    try:
        return Guardian(get_current_user(credentials, db))
    finally:
        db_gen.close()


def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    """
    FastAPI dependency for endpoints open to any signed-in user.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if user is None or not user.active:
        raise HTTPException(
            status_code=401,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
