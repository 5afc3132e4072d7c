"""FastAPI dependency injection for services.

Services are cached with @lru_cache() to avoid recreation per request.
Tests replace them through `app.dependency_overrides`.
"""

import uuid
from functools import lru_cache

from fastapi import Request

from db import FirestoreService


@lru_cache
def get_firestore_service() -> FirestoreService:
    """Get cached Firestore service (expensive - has Firestore client)."""
    return FirestoreService()


def get_request_id(request: Request) -> str:
    """Get the request ID assigned by the request ID middleware."""
    request_id = getattr(request.state, "request_id", None)
    return request_id or str(uuid.uuid4())[:8]
