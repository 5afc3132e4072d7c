"""Firestore service for post persistence.

Posts live in a single collection (``posts`` by default):
- `posts/{post_id}` - one document per post, keyed by a time-ordered hex id
- fields: title, body, tags, publishedDate
"""

import base64
import json
import logging
import os
import time
from datetime import UTC, datetime
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core.exceptions import NotFound
from google.cloud.firestore_v1 import AsyncClient
from google.cloud.firestore_v1.field_path import FieldPath
from google.oauth2 import service_account

from config import get_settings
from utils import new_post_id

logger = logging.getLogger(__name__)

# Firestore encodes query offsets as int32
MAX_QUERY_OFFSET = 2**31 - 1


def _load_firebase_credentials(creds_value: str) -> dict:
    """Load Firebase credentials from JSON string, file path, or base64."""
    if os.path.isfile(creds_value):
        with open(creds_value) as f:
            return json.load(f)

    try:
        return json.loads(creds_value)
    except json.JSONDecodeError:
        pass

    try:
        decoded = base64.b64decode(creds_value, validate=True).decode("utf-8")
        return json.loads(decoded)
    except (ValueError, UnicodeDecodeError):
        pass

    raise ValueError("FIREBASE_CREDENTIALS is not valid JSON, file path, or base64")


def _to_post(doc_id: str, data: dict[str, Any] | None) -> dict[str, Any]:
    post = dict(data or {})
    post["id"] = doc_id
    return post


class FirestoreService:
    """Service for managing posts in Firestore."""

    _initialized: bool = False
    _db: AsyncClient | None = None

    def __init__(self) -> None:
        """Initialize Firestore client (singleton pattern)."""
        settings = get_settings()
        self.collection_name = settings.posts_collection

        if FirestoreService._initialized:
            self.db = FirestoreService._db
            return

        try:
            creds_dict = _load_firebase_credentials(settings.firebase_credentials)

            if not firebase_admin._apps:
                cred = credentials.Certificate(creds_dict)
                firebase_admin.initialize_app(cred)

            gcp_credentials = service_account.Credentials.from_service_account_info(
                creds_dict
            )

            FirestoreService._db = AsyncClient(
                project=creds_dict.get("project_id"),
                credentials=gcp_credentials,
            )
            self.db = FirestoreService._db

            FirestoreService._initialized = True
            logger.info("Firestore client initialized successfully")
        except Exception as e:
            logger.error("Failed to initialize Firestore: %s", e)
            raise

    def _posts(self):
        return self.db.collection(self.collection_name)

    # --- Post Methods ---

    async def create_post(self, document: dict[str, Any]) -> dict[str, Any]:
        """Store a new post and return it with its assigned id."""
        try:
            post_id = new_post_id()
            await self._posts().document(post_id).set(document)
            logger.debug("Created post %s", post_id)
            return _to_post(post_id, document)

        except Exception as e:
            logger.error("Failed to create post: %s", e)
            raise

    async def list_posts(
        self, offset: int = 0, limit: int = 10
    ) -> list[dict[str, Any]]:
        """Get posts newest first (by id), skipping `offset` posts.

        Offsets beyond what Firestore accepts are past any stored post and
        return an empty list without a query.
        """
        if offset > MAX_QUERY_OFFSET:
            return []

        try:
            query = (
                self._posts()
                .order_by(
                    FieldPath.document_id(), direction=firestore.Query.DESCENDING
                )
                .offset(offset)
                .limit(limit)
            )

            docs = await query.get()
            return [_to_post(doc.id, doc.to_dict()) for doc in docs]

        except Exception as e:
            logger.error("Failed to list posts: %s", e)
            raise

    async def count_posts(self) -> int:
        """Get total number of stored posts."""
        try:
            result = await self._posts().count().get()
            return result[0][0].value if result else 0

        except Exception as e:
            logger.error("Failed to count posts: %s", e)
            raise

    async def get_post(self, post_id: str) -> dict[str, Any] | None:
        """Get a single post, or None if it does not exist."""
        try:
            doc = await self._posts().document(post_id).get()
            if not doc.exists:
                return None
            return _to_post(doc.id, doc.to_dict())

        except Exception as e:
            logger.error("Failed to get post %s: %s", post_id, e)
            raise

    async def delete_post(self, post_id: str) -> None:
        """Delete a post. Deleting a missing post is not an error."""
        try:
            await self._posts().document(post_id).delete()
            logger.info("Deleted post %s", post_id)

        except Exception as e:
            logger.error("Failed to delete post %s: %s", post_id, e)
            raise

    async def update_post(
        self, post_id: str, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Overwrite the given top-level fields and return the updated post.

        Returns None if the post does not exist. With no fields the stored
        post is returned unchanged.
        """
        if fields:
            try:
                await self._posts().document(post_id).update(fields)
                logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(fields)))
            except NotFound:
                return None
            except Exception as e:
                logger.error("Failed to update post %s: %s", post_id, e)
                raise

        return await self.get_post(post_id)

    async def health_check(self) -> dict[str, Any]:
        """Check Firestore connection health."""
        start = time.time()
        try:
            test_ref = self.db.collection("_health_check").document("test")
            await test_ref.set({"timestamp": datetime.now(UTC)})
            await test_ref.get()

            latency = (time.time() - start) * 1000
            return {"status": "healthy", "latency_ms": round(latency, 2)}
        except Exception as e:
            return {"status": "unhealthy", "error": str(e)}
