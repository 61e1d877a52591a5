from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from src.auth.schemas import TokenClaims
from src.config import settings
from src.exceptions import InvalidOrExpiredToken


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with a fresh bcrypt salt"""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time comparison of a password against its bcrypt hash"""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    """Sign a claims dict with an issued-at and expiry"""
    to_encode = data.copy()
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"iat": issued_at, "exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def issue_token(user, issued_at: Optional[datetime] = None) -> str:
    """Create a 24h bearer token embedding the user's identity and role"""
    return create_access_token(
        data={
            "sub": str(user.id),
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role,
        },
        issued_at=issued_at,
    )


def verify_token(token: str) -> TokenClaims:
    """Decode a bearer token, raising InvalidOrExpiredToken on any failure"""
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.PyJWTError:
        raise InvalidOrExpiredToken()

    try:
        return TokenClaims(**payload)
    except ValueError:
        raise InvalidOrExpiredToken()


def is_admin(claims: TokenClaims) -> bool:
    return claims.role == "admin"
