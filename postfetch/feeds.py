"""
JSON Feed parsing for RSS Bridge responses.

RSS Bridge renders an account as a JSON Feed document: an ``items`` array
whose entries carry the post link in ``url`` (or ``id`` when ``url`` is
missing).
"""

import json
import logging

from .config import MAX_POSTS

log = logging.getLogger(__name__)


# Marks a candidate as an actual post link rather than a profile/story entry
POST_PATH_MARKER = 'instagram.com/p/'


def as_text(value) -> str:
    """Render a scalar JSON value as text; containers and null become ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    return ''


def parse_feed_response(json_text: str | None, max_posts: int = MAX_POSTS) -> tuple[str, ...]:
    """
    Parse a JSON Feed payload and extract post URLs.

    Args:
        json_text: Response body
        max_posts: Maximum URLs to return

    Returns:
        Tuple of post URLs in item order; empty on any malformed input
    """
    try:
        root = json.loads(json_text)
    except (TypeError, ValueError) as e:
        log.warning('Failed to parse RSS Bridge response: %s', e)
        return ()

    items = root.get('items') if isinstance(root, dict) else None
    if not isinstance(items, list):
        return ()

    urls = []
    for item in items:
        if len(urls) >= max_posts:
            break
        if not isinstance(item, dict):
            continue
        url = as_text(item.get('url'))
        if not url:
            url = as_text(item.get('id'))
        if url and POST_PATH_MARKER in url:
            urls.append(url)

    return tuple(urls)
