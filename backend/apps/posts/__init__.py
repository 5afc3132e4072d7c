"""Posts module - blog post CRUD."""

from apps.posts.routes import router

__all__ = ["router"]
