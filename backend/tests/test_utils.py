"""Tests for id and text helpers."""

from utils import is_valid_post_id, new_post_id, truncate_text


class TestPostIds:
    """Tests for post id generation and validation."""

    def test_new_post_id_format(self):
        """Generated ids are 24 lowercase hex characters."""
        post_id = new_post_id()
        assert len(post_id) == 24
        assert post_id == post_id.lower()
        assert is_valid_post_id(post_id)

    def test_new_post_id_embeds_timestamp(self):
        """The first 4 bytes hold the creation second."""
        post_id = new_post_id(1_700_000_000)
        assert int(post_id[:8], 16) == 1_700_000_000

    def test_later_ids_sort_after_earlier_ids(self):
        """Ids from a later second sort after ids from an earlier one."""
        earlier = new_post_id(1_700_000_000)
        later = new_post_id(1_700_000_001)
        assert later > earlier

    def test_ids_are_unique(self):
        """Ids created in the same second differ."""
        ids = {new_post_id(1_700_000_000) for _ in range(100)}
        assert len(ids) == 100

    def test_valid_ids(self):
        """Any 24-character hex string is accepted."""
        assert is_valid_post_id("507f1f77bcf86cd799439011")
        assert is_valid_post_id("507F1F77BCF86CD799439011")

    def test_invalid_ids(self):
        """Wrong length, non-hex characters and trailing newlines are rejected."""
        assert not is_valid_post_id("")
        assert not is_valid_post_id("123")
        assert not is_valid_post_id("507f1f77bcf86cd79943901")
        assert not is_valid_post_id("507f1f77bcf86cd7994390111")
        assert not is_valid_post_id("507f1f77bcf86cd79943901z")
        assert not is_valid_post_id("507f1f77bcf86cd799439011\n")


class TestTruncateText:
    """Tests for truncate_text."""

    def test_short_text_unchanged(self):
        text = "a" * 199
        assert truncate_text(text, 200) == text

    def test_text_at_limit_gets_ellipsis(self):
        result = truncate_text("a" * 200, 200)
        assert result == "a" * 200 + "..."

    def test_long_text_truncated(self):
        text = "".join(str(i % 10) for i in range(500))
        result = truncate_text(text, 200)
        assert len(result) == 203
        assert result[:200] == text[:200]
        assert result.endswith("...")

    def test_default_length(self):
        assert truncate_text("b" * 300) == "b" * 200 + "..."
