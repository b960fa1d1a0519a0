"""
Auth Service - credential verification and token issuing
"""
import logging
from datetime import timedelta
from functools import lru_cache
from typing import Optional
from sqlalchemy.orm import Session

from shop.config import settings
from shop.exceptions import AuthenticationError
from shop.repositories.user_repository import UserRepository
from shop.schemas.auth import AuthenticatedUser, TokenResponse
from shop.services.security import TokenIssuer, TokenVerifier, hash_password, verify_password

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    # Compared against when the email is unknown so both failures cost one bcrypt check
    return hash_password("not-a-real-password", rounds=settings.BCRYPT_ROUNDS)


def prepare_credential_checks() -> None:
    """Build the unknown-email comparison hash ahead of the first login"""
    _dummy_password_hash()


def get_token_issuer() -> TokenIssuer:
    """Token issuer built from the process-wide signing settings"""
    return TokenIssuer(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(minutes=settings.JWT_EXPIRY_MINUTES)
    )


def get_token_verifier() -> TokenVerifier:
    """Token verifier built from the process-wide signing settings"""
    return TokenVerifier(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM
    )


class AuthService:
    """Service layer for login"""
    
    def __init__(self, db: Session, token_issuer: Optional[TokenIssuer] = None):
        self.user_repository = UserRepository(db)
        self.token_issuer = token_issuer or get_token_issuer()
    
    def validate_user(self, email: str, password: str) -> AuthenticatedUser:
        """
        Check an email/password pair
        
        Args:
            email: Login email
            password: Plaintext password
        
        Returns:
            Public identity (id, email) of the user
        
        Raises:
            AuthenticationError: If the user is unknown or the password is wrong
        """
        user = self.user_repository.get_by_email(email)
        if user is None:
            verify_password(password, _dummy_password_hash())
            logger.info("Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
        
        if not verify_password(password, user.password_hash):
            logger.info("Login failed for user %s: wrong password", user.id)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
        
        return AuthenticatedUser(id=user.id, email=user.email)
    
    def login(self, email: str, password: str) -> TokenResponse:
        """Validate credentials and issue a bearer token"""
        identity = self.validate_user(email, password)
        logger.info("User %s logged in", identity.id)
        return TokenResponse(access_token=self.token_issuer.issue(identity))
