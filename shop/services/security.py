"""
Password hashing and bearer token life cycle
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import bcrypt
import jwt

from shop.exceptions import AuthenticationError
from shop.schemas.auth import AuthenticatedUser, TokenClaims

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Could not validate credentials"


def hash_password(plain: str, rounds: int = 12) -> str:
    """One-way bcrypt hash of a plaintext password"""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Timing-safe comparison of a plaintext password with a stored hash"""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """Issues signed, time-bounded bearer tokens carrying {email, id}"""
    
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = _utcnow
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.clock = clock
    
    def issue(self, identity: AuthenticatedUser) -> str:
        """
        Sign a token for an authenticated identity
        
        Args:
            identity: Verified user; its email and id become the claims
        
        Returns:
            Encoded JWT
        """
        issued_at = self.clock()
        payload = {
            "email": identity.email,
            "id": identity.id,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)


class TokenVerifier:
    """
    Checks bearer tokens on protected requests
    
    A missing token and an invalid one (bad signature, malformed, expired)
    are both rejected with the same AuthenticationError; the reason is only
    logged. A valid token yields its claims.
    """
    
    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm
    
    def verify(self, token: Optional[str]) -> TokenClaims:
        if not token:
            logger.debug("Request carried no bearer token")
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "email", "id"]}
            )
            return TokenClaims(email=payload["email"], id=payload["id"])
        except jwt.PyJWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e
        except ValueError as e:
            # Claims present but of the wrong shape
            logger.debug("Rejected bearer token claims: %s", e)
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e
