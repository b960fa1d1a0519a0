"""
Service-level exceptions

Services raise these; the API layer maps them to HTTP status codes.
"""


class ShopError(Exception):
    """Base exception for Shop Service errors"""
    pass


class NotFoundError(ShopError):
    """Referenced user, product or order does not exist"""
    pass


class AuthenticationError(ShopError):
    """Bad credentials or missing, invalid or expired token"""
    pass


class ConflictError(ShopError):
    """Write rejected by a uniqueness or reference constraint"""
    pass


class PersistenceError(ShopError):
    """Underlying store failed during a write; nothing was committed"""
    pass
