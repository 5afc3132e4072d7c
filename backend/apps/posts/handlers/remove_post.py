"""DELETE /posts/{post_id} - Delete a post."""

import logging

from fastapi import Depends, Response

from apps.posts.guards import valid_post_id
from db import FirestoreService
from dependencies import get_firestore_service, get_request_id
from responses import ResponseCode, error_response

logger = logging.getLogger(__name__)


async def remove_post(
    post_id: str = Depends(valid_post_id),
    request_id: str = Depends(get_request_id),
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> Response:
    """Delete a post. Succeeds whether or not the post existed."""
    logger.info("[%s] Delete post request: %s", request_id, post_id)

    try:
        await firestore_service.delete_post(post_id)
    except Exception as e:
        logger.exception("[%s] Failed to delete post %s", request_id, post_id)
        return error_response(
            ResponseCode.STORE_ERROR, f"Failed to delete post: {e}", request_id
        )

    return Response(status_code=204)
