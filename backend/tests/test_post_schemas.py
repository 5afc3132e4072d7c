"""Tests for post request and storage schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from apps.posts.handlers.create_post import PostCreate
from apps.posts.handlers.update_post import PostUpdate
from apps.posts.models import Post, PostDocument


class TestPostCreate:
    """Tests for the create request body."""

    def test_valid(self, sample_post):
        payload = PostCreate(**sample_post)
        assert payload.title == sample_post["title"]
        assert payload.tags == sample_post["tags"]

    def test_empty_tags_allowed(self):
        payload = PostCreate(title="A", body="hello", tags=[])
        assert payload.tags == []

    @pytest.mark.parametrize("missing", ["title", "body", "tags"])
    def test_missing_field(self, sample_post, missing):
        del sample_post[missing]
        with pytest.raises(ValidationError):
            PostCreate(**sample_post)

    def test_wrong_types(self):
        with pytest.raises(ValidationError):
            PostCreate(title=1, body="hello", tags=[])
        with pytest.raises(ValidationError):
            PostCreate(title="A", body="hello", tags="x")
        with pytest.raises(ValidationError):
            PostCreate(title="A", body="hello", tags=[1, 2])

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            PostCreate(title="", body="hello", tags=[])

    def test_unknown_field_rejected(self, sample_post):
        with pytest.raises(ValidationError):
            PostCreate(**sample_post, author="someone")


class TestPostDocument:
    """Tests for the stored post document."""

    def test_published_date_set_per_document(self):
        """Each document gets its own publish time."""
        before = datetime.now(UTC)
        first = PostDocument(title="A", body="a", tags=[])
        second = PostDocument(title="B", body="b", tags=[])
        after = datetime.now(UTC)

        assert before <= first.published_date <= second.published_date <= after
        assert first.published_date is not second.published_date

    def test_to_firestore_uses_stored_names(self):
        data = PostDocument(title="A", body="a", tags=["x"]).to_firestore()
        assert set(data) == {"title", "body", "tags", "publishedDate"}
        assert isinstance(data["publishedDate"], datetime)


class TestPostUpdate:
    """Tests for the partial update body."""

    def test_only_present_fields_dumped(self):
        payload = PostUpdate.model_validate({"title": "New"})
        assert payload.to_firestore() == {"title": "New"}

    def test_empty_update(self):
        assert PostUpdate.model_validate({}).to_firestore() == {}

    def test_published_date_alias(self):
        payload = PostUpdate.model_validate({"publishedDate": "2024-01-02T03:04:05Z"})
        data = payload.to_firestore()
        assert data["publishedDate"] == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_null_rejected(self):
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({"title": None})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({"author": "someone"})

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            PostUpdate.model_validate({"tags": "x"})


class TestPost:
    """Tests for the response model."""

    def test_serializes_published_date_alias(self):
        post = Post.model_validate(
            {
                "id": "507f1f77bcf86cd799439011",
                "title": "A",
                "body": "a",
                "tags": [],
                "publishedDate": datetime(2024, 1, 1, tzinfo=UTC),
            }
        )
        data = post.model_dump(by_alias=True)
        assert "publishedDate" in data
        assert "published_date" not in data
