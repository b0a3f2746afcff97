"""
Pytest configuration for the API tests.

Firestore and Firebase Auth are replaced through FastAPI dependency overrides:
`FakeFirestore` keeps documents in memory and mimics the small part of the
client API the CRUD helpers use; `FakeIdentityGateway` records calls.
"""
import itertools
from typing import Any, Dict, List, Optional

import httpx
import pytest
from google.api_core import exceptions as gexc
from httpx import ASGITransport

from app.core.exceptions import DuplicateEmail, InvalidEmail, SignInFailure
from app.core.firebase_connector import get_firestore_client
from app.core.identity import get_identity_gateway
from app.main import app


class FakeSnapshot:
    def __init__(self, doc_id: str, data: Optional[Dict[str, Any]]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[Dict[str, Any]]:
        return dict(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, store: Dict[str, Dict[str, Any]], doc_id: str):
        self._store = store
        self.id = doc_id

    def set(self, data: Dict[str, Any]) -> None:
        self._store[self.id] = dict(data)

    def get(self) -> FakeSnapshot:
        return FakeSnapshot(self.id, self._store.get(self.id))

    def update(self, data: Dict[str, Any]) -> None:
        if self.id not in self._store:
            raise gexc.NotFound(f"No document to update: {self.id}")
        self._store[self.id].update(data)

    def delete(self) -> None:
        self._store.pop(self.id, None)


class FakeQuery:
    def __init__(self, store: Dict[str, Dict[str, Any]], limit: Optional[int] = None):
        self._store = store
        self._limit = limit

    def stream(self):
        items = list(self._store.items())
        if self._limit is not None:
            items = items[: self._limit]
        for doc_id, data in items:
            yield FakeSnapshot(doc_id, data)


class FakeCollection(FakeQuery):
    _ids = itertools.count(1)

    def document(self, doc_id: Optional[str] = None) -> FakeDocumentRef:
        if doc_id is None:
            doc_id = f"auto{next(self._ids):06d}"
        return FakeDocumentRef(self._store, doc_id)

    def limit(self, count: int) -> FakeQuery:
        return FakeQuery(self._store, count)


class FakeFirestore:
    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self.collections.setdefault(name, {}))


class _Unavailable:
    """Every Firestore call fails like an unreachable backend."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise gexc.ServiceUnavailable("firestore unreachable")
        return _fail


class FailingFirestore:
    def collection(self, name: str):
        return _Unavailable()


class FakeIdentityGateway:
    def __init__(self):
        self.sign_in_calls: List[tuple] = []
        self.sign_up_calls: List[tuple] = []
        self.existing_emails = {"taken@example.com"}
        self.sign_in_error: Optional[str] = None

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        self.sign_up_calls.append((email, password))
        if "@" not in email:
            raise InvalidEmail("Signup failed: Invalid email format.")
        if email in self.existing_emails:
            raise DuplicateEmail("Signup failed: Email already in use.")
        self.existing_emails.add(email)
        return {"uid": f"uid-{len(self.sign_up_calls)}", "email": email}

    async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        self.sign_in_calls.append((email, password))
        if self.sign_in_error is not None:
            raise SignInFailure(self.sign_in_error)
        return {
            "kind": "identitytoolkit#VerifyPasswordResponse",
            "localId": "uid-123",
            "email": email,
            "idToken": "id-token",
            "refreshToken": "refresh-token",
            "expiresIn": "3600",
            "registered": True,
        }


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def fake_identity() -> FakeIdentityGateway:
    return FakeIdentityGateway()


@pytest.fixture
async def client(anyio_backend, fake_db, fake_identity):
    app.dependency_overrides[get_firestore_client] = lambda: fake_db
    app.dependency_overrides[get_identity_gateway] = lambda: fake_identity
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def failing_client(anyio_backend):
    app.dependency_overrides[get_firestore_client] = lambda: FailingFirestore()
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
