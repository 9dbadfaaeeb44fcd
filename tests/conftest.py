"""
tests/conftest.py
"""
from __future__ import annotations

import datetime as _dt
import itertools
import logging
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from app import create_app
from extensions import SERVICES_KEY
from models import Identity
from utils.auth_provider import AuthProvider, InvalidTokenError
from utils.authorization import AdminAuthorization
from utils.data import get_seed_posts
from utils.documents import DESCENDING, SERVER_TIMESTAMP, DocumentStore, DocumentStoreError
from utils.post_store import PostStoreClient

ADMIN = Identity("admin-uid", "admin@example.com")
VISITOR = Identity("visitor-uid", "visitor@example.com")


# ────────────────────────── fakes ──────────────────────────
class FakeAuthProvider(AuthProvider):
    """Accepts a fixed set of tokens."""

    TOKENS = {
        "admin-token": ADMIN,
        "visitor-token": VISITOR,
    }

    def verify_token(self, id_token: str) -> Identity:
        try:
            return self.TOKENS[id_token]
        except KeyError:
            raise InvalidTokenError(f"unknown token {id_token!r}") from None


class RecordingNotifier:
    """Keeps notices in memory instead of flashing them."""

    def __init__(self) -> None:
        self.notices: list[tuple[str, str]] = []

    def __call__(self, message: str, category: str = "info") -> None:
        self.notices.append((category, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.notices]


class MemoryDocumentStore(DocumentStore):
    """
    Dict-backed document store that records every call.

    Server timestamps tick one second per write, so ordering by
    createdAt follows insertion order.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict]] = {}
        self.calls: list[tuple[str, str]] = []
        self.failing: set[str] = set()
        self._ids = itertools.count(1)
        self._ticks = itertools.count()

    # helpers
    def count(self, operation: str, collection: str | None = None) -> int:
        return sum(
            1 for op, coll in self.calls
            if op == operation and (collection is None or coll == collection)
        )

    def _record(self, operation: str, collection: str) -> None:
        self.calls.append((operation, collection))
        if operation in self.failing:
            raise DocumentStoreError(operation, collection, "backend unavailable")

    def _now(self) -> _dt.datetime:
        return _dt.datetime(2099, 1, 1, tzinfo=_dt.timezone.utc) + _dt.timedelta(seconds=next(self._ticks))

    def _stamp(self, data: dict) -> dict:
        now = self._now()
        return {k: (now if v is SERVER_TIMESTAMP else v) for k, v in data.items()}

    # DocumentStore
    def get(self, collection, doc_id):
        self._record("get", collection)
        doc = self.collections.get(collection, {}).get(doc_id)
        return dict(doc) if doc is not None else None

    def query(self, collection, order_by, direction=DESCENDING, limit=None):
        self._record("query", collection)
        docs = [
            (doc_id, dict(data))
            for doc_id, data in self.collections.get(collection, {}).items()
            if data.get(order_by) is not None
        ]
        docs.sort(key=lambda item: item[1][order_by], reverse=(direction == DESCENDING))
        return docs[:limit] if limit is not None else docs

    def add(self, collection, data):
        self._record("add", collection)
        doc_id = f"post-{next(self._ids)}"
        self.collections.setdefault(collection, {})[doc_id] = self._stamp(data)
        return doc_id

    def set(self, collection, doc_id, data):
        self._record("set", collection)
        self.collections.setdefault(collection, {})[doc_id] = self._stamp(data)

    def update(self, collection, doc_id, fields):
        self._record("update", collection)
        docs = self.collections.get(collection, {})
        if doc_id not in docs:
            raise DocumentStoreError("update", collection, f"no document {doc_id!r}")
        docs[doc_id].update(self._stamp(fields))

    def delete(self, collection, doc_id):
        self._record("delete", collection)
        self.collections.get(collection, {}).pop(doc_id, None)


# ────────────────────────── fixtures ──────────────────────────
@pytest.fixture
def memory_store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def post_client(memory_store: MemoryDocumentStore, notifier: RecordingNotifier) -> PostStoreClient:
    """A PostStoreClient wired to the memory store, outside of any Flask app."""
    logger = logging.getLogger("tests.post_store")
    return PostStoreClient(
        memory_store,
        AdminAuthorization(memory_store, logger=logger),
        seed_factory=get_seed_posts,
        notifier=notifier,
        logger=logger,
        today=lambda: _dt.date(2025, 6, 1),
    )


@pytest.fixture
def app(memory_store: MemoryDocumentStore) -> Generator[Flask, None, None]:
    """Testing app backed by the memory store and the fake auth provider."""
    app = create_app("testing", store=memory_store, auth_provider=FakeAuthProvider())
    yield app
    app.extensions[SERVICES_KEY]["tracker"].close()


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.test_client() as client:
        yield client


# ────────────────────────── helpers ──────────────────────────
def grant_admin(store: DocumentStore, identity: Identity = ADMIN) -> None:
    store.set("admins", identity.id, {})


def add_post(store: DocumentStore, title: str, content: str = "Body text", tags=("Python",)) -> str:
    return store.add("posts", {
        "title": title,
        "tags": list(tags),
        "excerpt": content[:140] + "…",
        "content": content,
        "date": "2025-06-01",
        "createdAt": SERVER_TIMESTAMP,
    })


def sign_in(client: FlaskClient, token: str):
    return client.post("/auth/login", data={"id_token": token}, follow_redirects=True)
