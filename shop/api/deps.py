"""
Shared API dependencies
"""
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shop.exceptions import AuthenticationError
from shop.schemas.auth import TokenClaims
from shop.services.auth_service import get_token_verifier
from shop.services.security import TokenVerifier

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier)
) -> TokenClaims:
    """
    Dependency guarding protected routes
    
    Missing and invalid tokens get the same 401; valid claims are stored
    on request.state.user and returned to the handler.
    """
    token = credentials.credentials if credentials else None
    try:
        claims = verifier.verify(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"}
        )
    request.state.user = claims
    return claims
