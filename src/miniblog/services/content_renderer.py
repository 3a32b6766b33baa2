"""Lazy-load rewriting of post content."""

import re

from miniblog.utils.logging import get_logger

logger = get_logger("miniblog.renderer")

# 1x1 transparent GIF
PLACEHOLDER_SRC = (
    "data:image/gif;base64,"
    "R0lGODlhAQABAIAAAP///wAAACH5BAEAAAAALAAAAAABAAEAAAICRAEAOw=="
)

YOUTUBE_EMBED_TEMPLATE = (
    '<div class="video"><iframe width="560" height="315" title="YouTube embed" '
    'src="about:blank" data-src="https://www.youtube-nocookie.com/embed/{video_id}'
    '?modestbranding=1&amp;hd=1&amp;rel=0&amp;theme=light" allowfullscreen></iframe></div>'
)

_IMAGE_SRC_RE = re.compile(r'(<img.*?)src=(["\'])(.*?)\2(.*?/?>)')

# Empty ids match too: "[youtube:]" expands to an embed with no id
_YOUTUBE_RE = re.compile(r'\[youtube:([^\]\n]*)\]')


def lazy_load_images(html: str) -> str:
    """
    Move each image src into data-src behind a placeholder.

    The value ends at the first quote matching the opening one. Tags
    without a quoted src are left alone.
    """
    def replace(match: re.Match) -> str:
        prefix, _quote, src, rest = match.groups()
        return f'{prefix} src="{PLACEHOLDER_SRC}" data-src="{src}"{rest}'

    return _IMAGE_SRC_RE.sub(replace, html)


def expand_youtube_embeds(html: str) -> str:
    """Expand [youtube:<id>] shortcodes into lazily loaded iframes."""
    return _YOUTUBE_RE.sub(
        lambda m: YOUTUBE_EMBED_TEMPLATE.format(video_id=m.group(1)), html
    )


def render_content(raw: str | None) -> str:
    """
    Render raw post content for display.

    Images are rewritten first, then shortcodes are expanded. Markup that
    matches neither pattern is returned unchanged.

    Args:
        raw: Post content as authored

    Returns:
        Content with media loading deferred
    """
    if not raw:
        return ""

    result = lazy_load_images(raw)
    result = expand_youtube_embeds(result)

    if result != raw:
        logger.debug(f"Rendered content ({len(raw)} -> {len(result)} chars)")
    return result
