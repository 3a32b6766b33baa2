"""Blog post model."""

from datetime import datetime, timedelta, timezone
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field, field_validator

from miniblog.models.comment import Comment
from miniblog.services.content_renderer import render_content
from miniblog.utils.text_utils import create_slug

BLOG_PATH = "/blog"

# Ticks: 100ns intervals since 0001-01-01
_TICKS_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_post_id() -> str:
    delta = _utc_now() - _TICKS_EPOCH
    return str((delta.days * 86_400 + delta.seconds) * 10_000_000 + delta.microseconds * 10)


class Post(BaseModel):
    """A blog post as stored and rendered."""

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "title": "Hello World",
                "slug": "hello-world",
                "content": "<p>First post</p>\n[youtube:xyzAbc123]",
                "categories": ["general"],
                "tags": ["intro"],
            }
        },
    )

    id: str = Field(default_factory=_new_post_id, description="Post ID")
    title: str = Field(default="", description="Post title")
    slug: str = Field(default="", description="URL slug, set when the post is authored")
    content: str = Field(default="", description="Raw content with shortcodes")
    excerpt: str = Field(default="", description="Short summary")
    pub_date: datetime = Field(default_factory=_utc_now, description="Publication date")
    last_modified: datetime = Field(default_factory=_utc_now)
    is_published: bool = Field(default=True)
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)

    @field_validator("pub_date", "last_modified")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    create_slug = staticmethod(create_slug)

    def get_link(self) -> str:
        """Relative permalink."""
        return f"{BLOG_PATH}/{self.slug}/"

    def get_encoded_link(self) -> str:
        """Relative permalink with the slug form-encoded."""
        return f"{BLOG_PATH}/{quote_plus(self.slug)}/"

    def is_visible(self) -> bool:
        """Published and not scheduled for the future."""
        return self.is_published and self.pub_date <= _utc_now()

    def are_comments_open(self, close_after_days: int) -> bool:
        """Check whether the comment window is still open."""
        return self.pub_date + timedelta(days=close_after_days) >= _utc_now()

    def render_content(self) -> str:
        """Content with images and embeds set up for lazy loading."""
        return render_content(self.content)
