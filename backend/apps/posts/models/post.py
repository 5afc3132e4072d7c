"""Post schemas.

`PostDocument` is the structure stored in Firestore; `Post` is the
record returned by the API (stored fields plus the document id).
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Default factory for publish dates, evaluated per post."""
    return datetime.now(UTC)


class PostDocument(BaseModel):
    """Post document stored in Firestore.

    Path: posts/{post_id}
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Post title")
    body: str = Field(..., description="Post body")
    tags: list[str] = Field(default_factory=list, description="Post tags")
    published_date: datetime = Field(
        default_factory=utc_now,
        alias="publishedDate",
        description="Publish timestamp",
    )

    def to_firestore(self) -> dict:
        """Serialize with the stored field names."""
        return self.model_dump(by_alias=True)


class Post(BaseModel):
    """A post in API responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Post ID")
    title: str = Field(..., description="Post title")
    body: str = Field(..., description="Post body")
    tags: list[str] = Field(default_factory=list, description="Post tags")
    published_date: datetime = Field(
        ..., alias="publishedDate", description="Publish timestamp"
    )
