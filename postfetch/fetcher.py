"""
Acquisition strategies:
RSS Bridge → Graph API → headless render

Each function performs one strategy and returns a tuple of post URLs.
Failures raise FetchError (or RenderError); sequencing and fallback live
in orchestrate.chain.
"""

import logging
from urllib.parse import quote, quote_plus

import requests
from playwright.sync_api import sync_playwright

from .config import FetchConfig
from .extractor import extract_post_urls
from .feeds import parse_feed_response
from .media import format_media_error, parse_media_response

log = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a strategy's upstream answers with a non-success status."""
    pass


class RenderError(FetchError):
    """Raised when the headless browser fails to launch, navigate or render."""
    pass


def fetch_feed_posts(username: str, config: FetchConfig | None = None) -> tuple[str, ...]:
    """
    Fetch recent posts through RSS Bridge (no authentication).

    Args:
        username: Instagram account name
        config: Fetch configuration

    Returns:
        Tuple of post URLs (possibly empty)

    Raises:
        FetchError: on a non-200 status
        requests.RequestException: on transport failure
    """
    if config is None:
        config = FetchConfig()

    url = config.feed_url.format(username=quote_plus(username))
    resp = requests.get(
        url,
        headers={
            'Accept': 'application/json',
            'User-Agent': config.user_agent,
        },
        timeout=config.http_timeout,
        allow_redirects=True,
    )
    if resp.status_code != 200:
        raise FetchError(f'RSS Bridge returned status {resp.status_code}')

    return parse_feed_response(resp.text, max_posts=config.max_posts)


def build_media_url(account_id: str, config: FetchConfig | None = None) -> str:
    """Build the media edge URL for a business account."""
    if config is None:
        config = FetchConfig()
    return f'{config.graph_api_base}/{quote(account_id, safe="")}/media'


def fetch_media_posts(
    account_id: str,
    access_token: str,
    config: FetchConfig | None = None,
) -> tuple[str, ...]:
    """
    Fetch recent posts through the Instagram Graph API.

    Args:
        account_id: Instagram business account ID
        access_token: Graph API access token
        config: Fetch configuration

    Returns:
        Tuple of permalinks (possibly empty)

    Raises:
        FetchError: on a non-200 status, with the API's error message
        requests.RequestException: on transport failure
    """
    if config is None:
        config = FetchConfig()

    resp = requests.get(
        build_media_url(account_id, config),
        params={
            'fields': config.media_fields,
            'limit': config.max_posts,
            'access_token': access_token,
        },
        headers={'Accept': 'application/json'},
        timeout=config.http_timeout,
        allow_redirects=True,
    )
    if resp.status_code != 200:
        message = format_media_error(resp.text)
        raise FetchError(f'Graph API returned status {resp.status_code}: {message}')

    return parse_media_response(resp.text, max_posts=config.max_posts)


def render_page(url: str, config: FetchConfig | None = None) -> str:
    """
    Render a URL in headless Chromium and return the final HTML.

    Waits for network idle, then a fixed settle delay so deferred
    client-side rendering can finish.

    Raises:
        RenderError: on launch, navigation or timeout failure
    """
    if config is None:
        config = FetchConfig()

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(
                headless=config.headless,
                timeout=config.render_timeout_ms,
            )
            try:
                context = browser.new_context(user_agent=config.browser_user_agent)
                page = context.new_page()
                if config.stealth:
                    from playwright_stealth import Stealth
                    Stealth().apply_stealth_sync(page)

                log.debug('Navigating to %s', url)
                page.goto(
                    url,
                    wait_until=config.wait_until,
                    timeout=config.render_timeout_ms,
                )
                page.wait_for_timeout(config.settle_delay_ms)
                return page.content()
            finally:
                browser.close()
    except Exception as e:
        raise RenderError(f'Failed to render {url}: {e}') from e


def fetch_rendered_posts(
    username: str,
    config: FetchConfig | None = None,
    render=render_page,
) -> tuple[str, ...]:
    """
    Fetch recent posts by rendering the profile page and scanning its links.

    Args:
        username: Instagram account name
        config: Fetch configuration
        render: Callable (url, config) -> html; defaults to render_page

    Returns:
        Tuple of canonical post URLs (possibly empty)

    Raises:
        RenderError: when rendering fails
    """
    if config is None:
        config = FetchConfig()

    log.info('Starting headless browser to scrape @%s', username)
    profile_url = config.profile_url.format(username=username)
    html = render(profile_url, config)
    return extract_post_urls(html, max_posts=config.max_posts)
