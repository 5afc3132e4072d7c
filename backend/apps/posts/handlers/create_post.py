"""POST /posts - Create a post."""

import logging

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from apps.posts.models import Post, PostDocument
from db import FirestoreService
from dependencies import get_firestore_service, get_request_id
from responses import ResponseCode, error_response

logger = logging.getLogger(__name__)


# --- Request Schema ---


class PostCreate(BaseModel):
    """Request body for creating a post. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="Post title")
    body: str = Field(..., min_length=1, description="Post body")
    tags: list[str] = Field(..., description="Post tags (may be empty)")


# --- Handler ---


async def create_post(
    payload: PostCreate,
    request_id: str = Depends(get_request_id),
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> Post | JSONResponse:
    """Create a post and return it with its assigned ID.

    The publish date is set to the creation time of this post.
    """
    logger.info("[%s] Create post: %s", request_id, payload.title[:100])

    document = PostDocument(title=payload.title, body=payload.body, tags=payload.tags)

    try:
        stored = await firestore_service.create_post(document.to_firestore())
    except Exception as e:
        logger.exception("[%s] Failed to create post", request_id)
        return error_response(
            ResponseCode.STORE_ERROR, f"Failed to create post: {e}", request_id
        )

    logger.info("[%s] Created post %s", request_id, stored["id"])
    return Post.model_validate(stored)
