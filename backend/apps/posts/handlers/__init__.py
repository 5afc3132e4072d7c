"""Post handlers."""

from apps.posts.handlers.create_post import create_post
from apps.posts.handlers.list_posts import list_posts
from apps.posts.handlers.read_post import read_post
from apps.posts.handlers.remove_post import remove_post
from apps.posts.handlers.update_post import update_post

__all__ = [
    "create_post",
    "list_posts",
    "read_post",
    "remove_post",
    "update_post",
]
