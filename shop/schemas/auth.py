"""
Pydantic schemas for login and token claims
"""
from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Schema for login credentials"""
    email: EmailStr = Field(..., description="Account email, normalized like at registration")
    password: str = Field(..., min_length=1, description="Plaintext password")


class TokenResponse(BaseModel):
    """Schema for issued bearer token"""
    access_token: str


class TokenClaims(BaseModel):
    """Identity claims carried by a verified bearer token"""
    email: str
    id: int


class AuthenticatedUser(BaseModel):
    """Public fields of a user whose credentials were verified"""
    id: int
    email: str
