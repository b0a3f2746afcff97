"""
Authentication schemas
"""
from typing import Optional
from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SignUpRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SignUpResponse(BaseModel):
    message: str = "Signup successful!"
    uid: str
    email: str


class DemoLoginResponse(BaseModel):
    """Payload of the hardcoded demo logins. No token is issued."""
    message: str
    role: str
    email: str
