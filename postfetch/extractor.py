"""
Post link extraction from rendered profile HTML.

Scans raw markup for /p/<shortcode> and /reel/<shortcode> links, keeps
plausible shortcodes, and emits canonical /p/ URLs:

    from postfetch.extractor import extract_post_urls

    urls = extract_post_urls(page_html)
"""

import logging
import re

from .config import MAX_POSTS, MAX_SHORTCODE_LEN, MIN_SHORTCODE_LEN, POST_URL_TEMPLATE

log = logging.getLogger(__name__)


POST_LINK_PATTERN = re.compile(r'/p/([A-Za-z0-9_-]+)')
REEL_LINK_PATTERN = re.compile(r'/reel/([A-Za-z0-9_-]+)')


def is_valid_shortcode(shortcode: str) -> bool:
    """Check shortcode length bounds (charset is enforced by the patterns)."""
    return MIN_SHORTCODE_LEN <= len(shortcode) <= MAX_SHORTCODE_LEN


def build_post_url(shortcode: str) -> str:
    """Build the canonical post URL for a shortcode."""
    return POST_URL_TEMPLATE.format(shortcode=shortcode)


def extract_shortcodes(html: str | None) -> list[str]:
    """
    Find unique shortcodes in HTML, in discovery order.

    All /p/ matches are collected before /reel/ matches.

    Args:
        html: Raw HTML (or any text)

    Returns:
        List of unique shortcodes
    """
    if not html:
        return []

    seen = set()
    shortcodes = []
    for pattern in (POST_LINK_PATTERN, REEL_LINK_PATTERN):
        for match in pattern.finditer(html):
            shortcode = match.group(1)
            if not is_valid_shortcode(shortcode) or shortcode in seen:
                continue
            seen.add(shortcode)
            shortcodes.append(shortcode)
    return shortcodes


def extract_post_urls(html: str | None, max_posts: int = MAX_POSTS) -> tuple[str, ...]:
    """
    Extract canonical post URLs from rendered HTML.

    Reels are emitted under /p/ too, since that form embeds both types.

    Args:
        html: Rendered page HTML
        max_posts: Maximum URLs to return

    Returns:
        Tuple of post URLs, at most max_posts long
    """
    urls = tuple(build_post_url(sc) for sc in extract_shortcodes(html)[:max_posts])
    log.debug('Extracted %d posts from HTML', len(urls))
    return urls
