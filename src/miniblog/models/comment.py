"""Comment model."""

import hashlib
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field

GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?s=60&d=blank"


class Comment(BaseModel):
    """A reader comment attached to a post."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Comment ID")
    author: str = Field(default="", description="Display name of the commenter")
    email: str = Field(default="", description="Commenter email, used for the avatar")
    content: str = Field(default="", description="Comment text")
    pub_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_admin: bool = Field(default=False, description="Written by the blog owner")

    def get_gravatar(self) -> str:
        """Gravatar URL for the commenter's email."""
        email = self.email.strip().lower()
        digest = hashlib.md5(email.encode("utf-8")).hexdigest()
        return GRAVATAR_URL.format(digest=digest)

    def render_content(self) -> str:
        """Comments are shown as written."""
        return self.content
