"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shop.database import get_db
from shop.exceptions import AuthenticationError
from shop.services.auth_service import AuthService
from shop.schemas.auth import LoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency to get AuthService instance"""
    return AuthService(db)


@router.post("/login", response_model=TokenResponse, summary="Log in")
def login(
    credentials: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Exchange email and password for a bearer token
    
    - **email**: Account email
    - **password**: Account password
    """
    try:
        return service.login(credentials.email, credentials.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )
