"""
Exclusion list handling.

The exclusion spec is a comma-separated string mixing bare shortcodes and
full post URLs, e.g. ``"DKurQ_ktdgw, https://www.instagram.com/p/C9xYzAbCdEf/"``.
"""

import logging

from .extractor import POST_LINK_PATTERN

log = logging.getLogger(__name__)


def parse_exclusion_spec(spec: str | None) -> set[str]:
    """
    Normalize an exclusion spec into a set of shortcodes.

    URL tokens contribute the shortcode of their first /p/ segment (or
    nothing); any other token is taken as a shortcode as-is.
    """
    if not spec or not spec.strip():
        return set()

    shortcodes = set()
    for entry in spec.split(','):
        token = entry.strip()
        if not token:
            continue
        if token.startswith(('http://', 'https://')):
            match = POST_LINK_PATTERN.search(token)
            if match:
                shortcodes.add(match.group(1))
        else:
            shortcodes.add(token)
    return shortcodes


def is_excluded(post_url: str, shortcode: str) -> bool:
    """Match a post URL against one shortcode (exact case)."""
    return (
        f'/p/{shortcode}' in post_url
        or f'/reel/{shortcode}' in post_url
        or post_url.endswith(f'/{shortcode}')
        or post_url.endswith(f'/{shortcode}/')
    )


def filter_excluded(posts, spec: str | None):
    """
    Drop posts matching any shortcode in the exclusion spec.

    Args:
        posts: Ordered post URLs
        spec: Raw comma-separated exclusion spec (may be None/blank)

    Returns:
        ``posts`` itself when nothing is excluded by configuration,
        otherwise a new tuple with matches removed, order preserved
    """
    shortcodes = parse_exclusion_spec(spec)
    if not shortcodes:
        return posts

    kept = []
    for post in posts:
        hit = next((sc for sc in shortcodes if is_excluded(post, sc)), None)
        if hit is not None:
            log.debug('Filtering out excluded post: %s (shortcode: %s)', post, hit)
            continue
        kept.append(post)

    if len(kept) < len(posts):
        log.info('Filtered %d excluded posts, %d posts remaining',
                 len(posts) - len(kept), len(kept))
    return tuple(kept)
