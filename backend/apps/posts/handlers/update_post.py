"""PATCH /posts/{post_id} - Update selected fields of a post."""

import logging
from datetime import datetime
from typing import Any

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from apps.posts.errors import PostNotFoundError
from apps.posts.guards import valid_post_id
from apps.posts.models import Post
from db import FirestoreService
from dependencies import get_firestore_service, get_request_id
from responses import ResponseCode, error_response

logger = logging.getLogger(__name__)


# --- Request Schema ---


class PostUpdate(BaseModel):
    """Partial post. Only these fields may be updated; others are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str | None = Field(None, min_length=1, description="New title")
    body: str | None = Field(None, min_length=1, description="New body")
    tags: list[str] | None = Field(None, description="New tags")
    published_date: datetime | None = Field(
        None, alias="publishedDate", description="New publish timestamp"
    )

    @field_validator("title", "body", "tags", "published_date", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Explicit nulls would erase stored fields."""
        if v is None:
            raise ValueError("must not be null")
        return v

    def to_firestore(self) -> dict[str, Any]:
        """Fields present in the request, with stored field names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# --- Handler ---


async def update_post(
    payload: PostUpdate | None = None,
    post_id: str = Depends(valid_post_id),
    request_id: str = Depends(get_request_id),
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> Post | JSONResponse:
    """Overwrite the supplied fields and return the updated post.

    An empty body changes nothing and returns the stored post.
    """
    fields = payload.to_firestore() if payload else {}
    logger.info(
        "[%s] Update post %s: %s", request_id, post_id, sorted(fields) or "no fields"
    )

    try:
        post = await firestore_service.update_post(post_id, fields)
    except Exception as e:
        logger.exception("[%s] Failed to update post %s", request_id, post_id)
        return error_response(
            ResponseCode.STORE_ERROR, f"Failed to update post: {e}", request_id
        )

    if post is None:
        raise PostNotFoundError(post_id)

    return Post.model_validate(post)
