"""GET /posts - List posts, newest first, one page at a time."""

import logging
import math

from fastapi import Depends, Query, Response
from fastapi.responses import JSONResponse

from apps.posts.errors import InvalidPageError
from apps.posts.models import Post
from config import get_settings
from db import FirestoreService
from dependencies import get_firestore_service, get_request_id
from responses import ResponseCode, error_response
from utils import truncate_text

logger = logging.getLogger(__name__)


async def list_posts(
    response: Response,
    page: int = Query(default=1, description="Page number, starting at 1"),
    request_id: str = Depends(get_request_id),
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> list[Post] | JSONResponse:
    """List a page of posts ordered by ID descending.

    Bodies are cut to the preview length in the response only. The
    `Last-Page` header holds the number of the last page, and is left
    out when the post count cannot be fetched.
    """
    if page < 1:
        raise InvalidPageError(page)

    settings = get_settings()
    page_size = settings.page_size

    try:
        posts = await firestore_service.list_posts(
            offset=(page - 1) * page_size, limit=page_size
        )
    except Exception as e:
        logger.exception("[%s] Failed to list posts", request_id)
        return error_response(
            ResponseCode.STORE_ERROR, f"Failed to list posts: {e}", request_id
        )

    # Last-Page is optional
    try:
        total_count = await firestore_service.count_posts()
    except Exception as e:
        logger.warning("[%s] Failed to count posts: %s", request_id, e)
    else:
        last_page = max(1, math.ceil(total_count / page_size))
        response.headers["Last-Page"] = str(last_page)

    logger.debug("[%s] Page %d: %d posts", request_id, page, len(posts))

    return [
        Post.model_validate(
            {
                **post,
                "body": truncate_text(
                    post.get("body", ""), settings.body_preview_length
                ),
            }
        )
        for post in posts
    ]
