"""
Login and signup, delegated to Firebase Auth.

The login path first checks two hardcoded demo accounts (student and
lecturer). They are insecure and only exist for the demo front-end; turn them
off with DEMO_LOGINS_ENABLED=false.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from app.core.config import settings
from app.core.exceptions import (
    AuthFailure,
    InternalError,
    SignInFailure,
    SignUpFailure,
    ValidationError,
)
from app.core.identity import IdentityGateway, get_identity_gateway
from app.schemas.auth import DemoLoginResponse, LoginRequest, SignUpRequest, SignUpResponse

router = APIRouter()

# email -> (password, role)
DEMO_ACCOUNTS = {
    "student@gmail.com": ("student", "student"),
    "lecturer@gmail.com": ("lecturer", "lecturer"),
}

# Provider error codes that all mean "wrong email or password"
_INVALID_CREDENTIAL_CODES = ("INVALID_LOGIN_CREDENTIALS", "INVALID_PASSWORD", "EMAIL_NOT_FOUND")


def _demo_login(request: LoginRequest) -> DemoLoginResponse | None:
    account = DEMO_ACCOUNTS.get(request.email) if request.email else None
    if account is None:
        return None
    password, role = account
    if request.password != password:
        logging.warning("Failed hardcoded login attempt for %s (wrong password): %s", role.upper(), request.email)
        raise AuthFailure("Invalid credentials")
    logging.info("Successful hardcoded login for %s: %s", role.upper(), request.email)
    return DemoLoginResponse(
        message=f"{role.capitalize()} login successful (Hardcoded)",
        role=role,
        email=request.email,
    )


@router.post("/login")
async def login(
    request: LoginRequest,
    identity: IdentityGateway = Depends(get_identity_gateway),
) -> Any:
    """Returns the provider token bundle, or a role payload for the demo accounts."""
    if settings.DEMO_LOGINS_ENABLED:
        demo = _demo_login(request)
        if demo is not None:
            return demo

    logging.info("Attempting Firebase sign-in for non-hardcoded user: %s", request.email)
    try:
        return await identity.sign_in_with_password(request.email or "", request.password or "")
    except SignInFailure as e:
        message = e.message or "Invalid credentials or user not found."
        if any(code in message for code in _INVALID_CREDENTIAL_CODES):
            message = "Invalid email or password."
        raise SignInFailure(message) from e
    except Exception as e:
        logging.exception("Unexpected internal server error during login for %s", request.email)
        raise InternalError("An internal server error occurred during login.") from e


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignUpResponse)
def signup(
    request: SignUpRequest,
    identity: IdentityGateway = Depends(get_identity_gateway),
) -> Any:
    """Creates a Firebase Auth account."""
    if not request.email or not request.password:
        raise ValidationError("Email and password are required.")

    logging.info("Attempting Firebase sign-up for %s", request.email)
    try:
        account = identity.sign_up(request.email, request.password)
    except SignUpFailure as e:
        logging.error("Firebase signup failed for %s: %s", request.email, e.message)
        raise
    except Exception as e:
        logging.exception("Unexpected internal server error during signup for %s", request.email)
        raise InternalError("An internal error occurred during signup.") from e

    logging.info("Successfully created Firebase user: UID=%s, Email=%s", account["uid"], account["email"])
    return SignUpResponse(uid=account["uid"], email=account["email"])
