"""Blog post slugs and content rendering."""

from miniblog.services.content_renderer import render_content
from miniblog.utils.text_utils import create_slug

__version__ = "0.1.0"

__all__ = ["create_slug", "render_content"]
