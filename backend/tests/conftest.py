"""Pytest configuration and fixtures for Posts API tests."""

import os
import sys

# Set required env vars BEFORE any imports that might trigger Settings
os.environ.setdefault(
    "FIREBASE_CREDENTIALS", '{"type":"service_account","project_id":"test"}'
)
os.environ.setdefault("CHECK_STORE_ON_STARTUP", "false")

from typing import Any
from unittest.mock import AsyncMock

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from utils import new_post_id  # noqa: E402


class InMemoryPostStore:
    """Stand-in for FirestoreService keeping posts in a dict.

    Each new post gets an id one second later than the previous one,
    so creation order and id order always agree.
    """

    def __init__(self) -> None:
        self.posts: dict[str, dict[str, Any]] = {}
        self._clock = 1_700_000_000

    async def create_post(self, document: dict[str, Any]) -> dict[str, Any]:
        self._clock += 1
        post_id = new_post_id(self._clock)
        self.posts[post_id] = dict(document)
        return {**document, "id": post_id}

    async def list_posts(self, offset: int = 0, limit: int = 10) -> list[dict]:
        ordered = sorted(self.posts, reverse=True)[offset : offset + limit]
        return [{**self.posts[post_id], "id": post_id} for post_id in ordered]

    async def count_posts(self) -> int:
        return len(self.posts)

    async def get_post(self, post_id: str) -> dict[str, Any] | None:
        if post_id not in self.posts:
            return None
        return {**self.posts[post_id], "id": post_id}

    async def delete_post(self, post_id: str) -> None:
        self.posts.pop(post_id, None)

    async def update_post(
        self, post_id: str, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        if post_id not in self.posts:
            return None
        self.posts[post_id].update(fields)
        return await self.get_post(post_id)

    async def health_check(self) -> dict[str, Any]:
        return {"status": "healthy", "latency_ms": 1.0}


@pytest.fixture
def post_store():
    """Empty in-memory post store."""
    return InMemoryPostStore()


@pytest.fixture
def failing_store():
    """Store whose every call fails like a lost Firestore connection."""
    store = AsyncMock()
    error = RuntimeError("firestore unavailable")
    store.create_post.side_effect = error
    store.list_posts.side_effect = error
    store.count_posts.side_effect = error
    store.get_post.side_effect = error
    store.delete_post.side_effect = error
    store.update_post.side_effect = error
    store.health_check.return_value = {"status": "unhealthy", "error": str(error)}
    return store


def _client_for(store):
    from fastapi.testclient import TestClient

    from dependencies import get_firestore_service
    from main import app

    app.dependency_overrides[get_firestore_service] = lambda: store
    return TestClient(app)


@pytest.fixture
def client(post_store):
    """Test client backed by the in-memory store."""
    from main import app

    yield _client_for(post_store)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_store):
    """Test client whose store raises on every call."""
    from main import app

    yield _client_for(failing_store)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_post():
    """Valid create request body."""
    return {
        "title": "Hello Firestore",
        "body": "First post stored in a document database.",
        "tags": ["intro", "firestore"],
    }
