from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.auth.schemas import TokenClaims
from src.auth.utils import verify_token, is_admin
from src.exceptions import AuthenticationRequired, AccessDenied

bearer_scheme = HTTPBearer(auto_error=False)

def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """Resolve the bearer token into claims; no token means 401, a bad one 403"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequired()

    return verify_token(credentials.credentials)

def require_admin(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
    """Require admin role for access"""
    if not is_admin(claims):
        raise AccessDenied()
    return claims
