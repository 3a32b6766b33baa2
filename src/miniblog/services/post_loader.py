"""Load posts from Markdown files with YAML front matter."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from miniblog.models.post import Post
from miniblog.utils.logging import get_logger
from miniblog.utils.text_utils import create_slug

logger = get_logger("miniblog.loader")

FRONT_MATTER_FENCE = "---"


class PostLoadError(Exception):
    """Raised when a post file cannot be turned into a Post."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def split_front_matter(text: str) -> tuple[str, str]:
    """
    Split a document into front matter and body.

    Returns an empty front matter string when the document does not open
    with a fence line.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_FENCE:
        return "", text

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_FENCE:
            front = "".join(lines[1:i])
            body = "".join(lines[i + 1:])
            return front, body.lstrip("\n")

    # Unterminated fence, treat the whole file as body
    return "", text


def parse_post(text: str, path: Path, *, max_length: int = 50) -> Post:
    """Build a Post from document text."""
    front, body = split_front_matter(text)

    try:
        meta: Any = yaml.safe_load(front) if front else {}
    except yaml.YAMLError as exc:
        raise PostLoadError(path, f"invalid front matter ({exc})") from exc

    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise PostLoadError(path, "front matter must be a mapping")

    data = dict(meta)
    for key in ("pub_date", "last_modified"):
        value = data.get(key)
        # YAML reads bare dates as date, not datetime
        if isinstance(value, date) and not isinstance(value, datetime):
            data[key] = datetime.combine(value, time(), tzinfo=timezone.utc)
    data["content"] = body
    if not data.get("slug"):
        data["slug"] = create_slug(str(data.get("title") or ""), max_length)

    try:
        post = Post.model_validate(data)
    except ValidationError as exc:
        raise PostLoadError(path, f"invalid post fields ({exc.error_count()} errors)") from exc

    logger.debug(f"Loaded post '{post.title}' as {post.slug} from {path}")
    return post


def load_post(path: Path, *, max_length: int = 50) -> Post:
    """Load a single post file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PostLoadError(path, f"cannot read file ({exc})") from exc
    return parse_post(text, path, max_length=max_length)


def load_posts(directory: Path, *, max_length: int = 50) -> list[Post]:
    """Load every *.md post in a directory, newest first."""
    if not directory.is_dir():
        raise PostLoadError(directory, "not a directory")

    posts = [load_post(p, max_length=max_length) for p in sorted(directory.glob("*.md"))]
    posts.sort(key=lambda p: p.pub_date, reverse=True)
    logger.debug(f"Loaded {len(posts)} posts from {directory}")
    return posts
