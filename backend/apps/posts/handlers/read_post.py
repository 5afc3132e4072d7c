"""GET /posts/{post_id} - Get a single post."""

import logging

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.posts.errors import PostNotFoundError
from apps.posts.guards import valid_post_id
from apps.posts.models import Post
from db import FirestoreService
from dependencies import get_firestore_service, get_request_id
from responses import ResponseCode, error_response

logger = logging.getLogger(__name__)


async def read_post(
    post_id: str = Depends(valid_post_id),
    request_id: str = Depends(get_request_id),
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> Post | JSONResponse:
    """Get a post by ID."""
    try:
        post = await firestore_service.get_post(post_id)
    except Exception as e:
        logger.exception("[%s] Failed to read post %s", request_id, post_id)
        return error_response(
            ResponseCode.STORE_ERROR, f"Failed to read post: {e}", request_id
        )

    if post is None:
        raise PostNotFoundError(post_id)

    return Post.model_validate(post)
