"""Tests for Pydantic models."""

from datetime import datetime, timedelta, timezone

import pytest

from miniblog.models import post as post_module
from miniblog.models.comment import Comment
from miniblog.models.post import Post


def _days_ago(days: float) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the clock used by the post predicates."""
    monkeypatch.setattr(post_module, "_utc_now", lambda: FIXED_NOW)
    return FIXED_NOW


class TestPost:
    def test_defaults(self):
        post = Post()
        assert post.id
        assert post.id.isdigit()
        assert post.is_published is True
        assert post.slug == ""
        assert post.categories == []
        assert post.tags == []
        assert post.comments == []
        assert post.pub_date.tzinfo is not None

    def test_create_slug_alias(self):
        assert Post.create_slug("Hello World Test Post") == "hello-world-test-post"
        assert Post.create_slug("Hello World", 5) == "hello"

    def test_slug_not_derived_from_title(self):
        post = Post(title="New Title", slug="old-slug")
        post.title = "Another Title"
        assert post.slug == "old-slug"

    def test_get_link(self):
        post = Post(slug="test-post")
        assert post.get_link() == "/blog/test-post/"

    def test_get_encoded_link(self):
        post = Post(slug="test-post-with-special-chars&symbols")
        assert post.get_encoded_link() == "/blog/test-post-with-special-chars%26symbols/"

    def test_get_encoded_link_space(self):
        post = Post(slug="a b")
        assert post.get_encoded_link() == "/blog/a+b/"

    def test_render_content(self):
        post = Post(content="[youtube:xyzAbc123]")
        assert "embed/xyzAbc123?" in post.render_content()
        assert post.content == "[youtube:xyzAbc123]"

    def test_naive_dates_are_utc(self):
        post = Post(pub_date=datetime(2023, 1, 1, 12, 0))
        assert post.pub_date == datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestVisibility:
    def test_published_in_past(self):
        post = Post(is_published=True, pub_date=_days_ago(1))
        assert post.is_visible() is True

    def test_published_just_now(self):
        post = Post(is_published=True, pub_date=datetime.now(timezone.utc) - timedelta(microseconds=1))
        assert post.is_visible() is True

    def test_unpublished(self):
        post = Post(is_published=False, pub_date=_days_ago(1))
        assert post.is_visible() is False

    def test_future_publish_date(self):
        post = Post(is_published=True, pub_date=_days_ago(-1))
        assert post.is_visible() is False

    def test_unpublished_future(self):
        post = Post(is_published=False, pub_date=_days_ago(-1))
        assert post.is_visible() is False

    def test_visible_at_exact_publish_time(self, frozen_now):
        post = Post(is_published=True, pub_date=frozen_now)
        assert post.is_visible() is True

    def test_hidden_one_microsecond_before_publish_time(self, frozen_now):
        post = Post(is_published=True, pub_date=frozen_now + timedelta(microseconds=1))
        assert post.is_visible() is False


class TestCommentsOpen:
    def test_within_window(self):
        post = Post(pub_date=_days_ago(5))
        assert post.are_comments_open(10) is True

    def test_beyond_window(self):
        post = Post(pub_date=_days_ago(15))
        assert post.are_comments_open(10) is False

    def test_zero_days_future_post(self):
        post = Post(pub_date=_days_ago(-1))
        assert post.are_comments_open(0) is True

    def test_open_on_exact_cutoff(self, frozen_now):
        post = Post(pub_date=frozen_now - timedelta(days=10))
        assert post.are_comments_open(10) is True

    def test_closed_just_after_cutoff(self, frozen_now):
        post = Post(pub_date=frozen_now - timedelta(days=10, microseconds=1))
        assert post.are_comments_open(10) is False


class TestNaiveDateAssignment:
    def test_assigned_naive_date_is_utc(self):
        post = Post()
        post.pub_date = datetime(2023, 1, 1, 12, 0)
        assert post.pub_date == datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_predicates_after_naive_assignment(self):
        post = Post()
        post.pub_date = datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(days=1)
        assert post.is_visible() is True
        assert post.are_comments_open(10) is True

    def test_invalid_assignment_rejected(self):
        post = Post()
        with pytest.raises(ValueError):
            post.pub_date = "not a date"


class TestComment:
    def test_defaults(self):
        comment = Comment()
        now = datetime.now(timezone.utc)
        assert comment.is_admin is False
        assert comment.id
        assert now - timedelta(seconds=5) <= comment.pub_date <= now

    def test_gravatar_url(self):
        comment = Comment(email="test@example.com")
        result = comment.get_gravatar()
        assert result == (
            "https://www.gravatar.com/avatar/55502f40dc8b7c769880b10874abc9d0?s=60&d=blank"
        )

    def test_gravatar_trims_spaces(self):
        assert (
            Comment(email=" test@example.com ").get_gravatar()
            == Comment(email="test@example.com").get_gravatar()
        )

    def test_gravatar_ignores_case(self):
        assert (
            Comment(email="TEST@EXAMPLE.COM").get_gravatar()
            == Comment(email="test@example.com").get_gravatar()
        )

    def test_render_content_unchanged(self):
        comment = Comment(content="<img src='x.png'> [youtube:abc]")
        assert comment.render_content() == "<img src='x.png'> [youtube:abc]"

    def test_post_holds_comments(self):
        post = Post(comments=[Comment(author="A"), Comment(author="B")])
        assert [c.author for c in post.comments] == ["A", "B"]
