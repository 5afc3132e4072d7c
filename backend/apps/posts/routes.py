"""Post routes - registers all post endpoints."""

from fastapi import APIRouter, Response

from apps.posts.handlers import (
    create_post,
    list_posts,
    read_post,
    remove_post,
    update_post,
)
from apps.posts.models import Post

router = APIRouter(prefix="/posts", tags=["Posts"])

# POST /posts - Create post
router.post("", response_model=Post)(create_post)

# GET /posts?page=N - List posts
router.get("", response_model=list[Post])(list_posts)

# GET /posts/{post_id} - Get post
router.get("/{post_id}", response_model=Post)(read_post)

# DELETE /posts/{post_id} - Delete post
router.delete(
    "/{post_id}", status_code=204, response_class=Response, response_model=None
)(remove_post)

# PATCH /posts/{post_id} - Update post fields
router.patch("/{post_id}", response_model=Post)(update_post)
