"""
Identity gateway: account creation through the Firebase Admin SDK and
password verification through the Identity Toolkit REST API.
"""
import logging
from typing import Any, Dict

import httpx
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from app.core.config import settings
from app.core.exceptions import (
    DuplicateEmail,
    InvalidEmail,
    SignInFailure,
    SignUpFailure,
)


class IdentityGateway:

    def __init__(self, api_key: str, base_url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Only set in tests (httpx.MockTransport)
        self._transport = transport

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """Creates a Firebase Auth account and returns its uid and email."""
        logging.info("Attempting Firebase Admin SDK sign-up for email: %s", email)
        try:
            user_record = auth.create_user(
                email=email,
                password=password,
                email_verified=False,
                disabled=False,
            )
        except auth.EmailAlreadyExistsError as e:
            raise DuplicateEmail("Signup failed: Email already in use.") from e
        except ValueError as e:
            # The SDK validates the email format before calling the API
            if "email" in str(e).lower():
                raise InvalidEmail("Signup failed: Invalid email format.") from e
            raise SignUpFailure(f"Signup failed: {e}") from e
        except FirebaseError as e:
            if "INVALID_EMAIL" in str(e):
                raise InvalidEmail("Signup failed: Invalid email format.") from e
            raise SignUpFailure(f"Signup failed: {e}") from e

        logging.info("Firebase sign-up successful for UID: %s, Email: %s", user_record.uid, user_record.email)
        return {"uid": user_record.uid, "email": user_record.email}

    async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        """Verifies a password and returns the provider token bundle (idToken, refreshToken, ...).

        Raises SignInFailure carrying the raw provider response text on rejection.
        """
        logging.info("Attempting Firebase REST API sign-in for email: %s", email)
        url = f"{self.base_url}/accounts:signInWithPassword"
        payload = {"email": email, "password": password, "returnSecureToken": True}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    url,
                    params={"key": self.api_key},
                    json=payload,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            logging.exception("Unexpected error during REST API sign-in for email %s", email)
            raise SignInFailure("An unexpected error occurred during sign in.") from e

        if response.status_code != 200:
            logging.error(
                "Firebase REST API sign-in failed for email %s. Status: %s. Response: %s",
                email, response.status_code, response.text,
            )
            raise SignInFailure(f"Sign in failed: {response.text}")

        try:
            body = response.json()
        except ValueError as e:
            raise SignInFailure(f"Sign in failed: Status Code {response.status_code} Body: {response.text}") from e

        logging.info("Firebase REST API sign-in successful for email: %s", email)
        return body


def get_identity_gateway() -> IdentityGateway:
    return IdentityGateway(
        api_key=settings.FIREBASE_WEB_API_KEY,
        base_url=settings.FIREBASE_AUTH_BASE_URL,
        timeout=settings.AUTH_HTTP_TIMEOUT,
    )
