"""
Instagram Graph API media response parsing.
"""

import json
import logging

from .config import MAX_POSTS
from .feeds import as_text

log = logging.getLogger(__name__)


def _as_int(value, default: int = 0) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def parse_media_response(json_text: str | None, max_posts: int = MAX_POSTS) -> tuple[str, ...]:
    """
    Extract post permalinks from a ``/{account-id}/media`` response.

    Permalinks are kept verbatim (posts, reels and carousels alike).

    Args:
        json_text: Response body
        max_posts: Maximum URLs to return

    Returns:
        Tuple of permalinks in API order; empty on malformed input
    """
    try:
        root = json.loads(json_text)
    except (TypeError, ValueError) as e:
        log.warning('Failed to parse Graph API response: %s', e)
        return ()

    data = root.get('data') if isinstance(root, dict) else None
    if not isinstance(data, list):
        return ()

    urls = []
    for media in data:
        if len(urls) >= max_posts:
            break
        if not isinstance(media, dict):
            continue
        permalink = as_text(media.get('permalink'))
        if permalink:
            urls.append(permalink)

    return tuple(urls)


def format_media_error(json_text: str) -> str:
    """
    Build a one-line message from a Graph API error payload.

    Returns ``"<message> (type: <type>, code: <code>)"``, or the raw text
    when it is not JSON or carries no ``error`` key.
    """
    try:
        root = json.loads(json_text)
    except (TypeError, ValueError):
        return json_text

    if not isinstance(root, dict) or 'error' not in root:
        return json_text

    error = root['error'] if isinstance(root['error'], dict) else {}
    message = error.get('message')
    message = 'Unknown error' if message is None else as_text(message)
    err_type = as_text(error.get('type'))
    code = _as_int(error.get('code'))
    return f'{message} (type: {err_type}, code: {code})'
