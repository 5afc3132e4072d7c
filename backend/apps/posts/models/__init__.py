"""Post models."""

from apps.posts.models.post import Post, PostDocument, utc_now

__all__ = ["Post", "PostDocument", "utc_now"]
