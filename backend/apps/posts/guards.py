"""Path parameter guards for single-post routes."""

import logging

from fastapi import Path

from apps.posts.errors import PostNotFoundError
from utils import is_valid_post_id

logger = logging.getLogger(__name__)


async def valid_post_id(
    post_id: str = Path(..., description="24-character hex post ID"),
) -> str:
    """Reject malformed post ids before the handler runs.

    Only the id syntax is checked, not whether the post exists.
    """
    if not is_valid_post_id(post_id):
        logger.debug("Rejected malformed post id: %r", post_id)
        raise PostNotFoundError(post_id)
    return post_id.lower()
