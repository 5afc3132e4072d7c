"""Post request errors.

Both map to responses with an empty body (see main.py).
"""


class PostNotFoundError(Exception):
    """Malformed post id, or no post stored under the id (404)."""

    def __init__(self, post_id: str) -> None:
        self.post_id = post_id
        super().__init__(f"Post not found: {post_id}")


class InvalidPageError(Exception):
    """Requested list page is below 1 (400)."""

    def __init__(self, page: int) -> None:
        self.page = page
        super().__init__(f"Invalid page: {page}")
