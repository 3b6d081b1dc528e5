"""
Recent post acquisition and parsing.

Primary interface:
    from postfetch import fetch_feed_posts, filter_excluded

    posts = fetch_feed_posts("tc11assb")
    posts = filter_excluded(posts, "DKurQ_ktdgw")

Strategies (sequenced by orchestrate.chain):
    1. fetch_feed_posts      : RSS Bridge JSON Feed
    2. fetch_media_posts     : Instagram Graph API (needs credentials)
    3. fetch_rendered_posts  : headless render + link extraction
    4. load_snapshot         : bundled list
"""

from .config import FetchConfig, MAX_POSTS
from .extractor import extract_post_urls
from .feeds import parse_feed_response
from .media import parse_media_response, format_media_error
from .exclusion import parse_exclusion_spec, filter_excluded, is_excluded
from .fetcher import (
    FetchError,
    RenderError,
    fetch_feed_posts,
    fetch_media_posts,
    fetch_rendered_posts,
    render_page,
)
from .snapshot import load_snapshot


__all__ = [
    'FetchConfig',
    'MAX_POSTS',
    'extract_post_urls',
    'parse_feed_response',
    'parse_media_response',
    'format_media_error',
    'parse_exclusion_spec',
    'filter_excluded',
    'is_excluded',
    'FetchError',
    'RenderError',
    'fetch_feed_posts',
    'fetch_media_posts',
    'fetch_rendered_posts',
    'render_page',
    'load_snapshot',
]
