"""
Configuration and constants for post acquisition.
"""

from dataclasses import dataclass


# Hard ceiling on posts kept from any strategy
MAX_POSTS = 6

# Shortcodes outside this length range are unrelated path segments
MIN_SHORTCODE_LEN = 10
MAX_SHORTCODE_LEN = 12

# Canonical post URL; /p/ embeds both posts and reels
POST_URL_TEMPLATE = 'https://www.instagram.com/p/{shortcode}'

# Endpoints
RSS_BRIDGE_URL = (
    'https://rss-bridge.org/bridge01/?action=display&context=Username'
    '&u={username}&bridge=InstagramBridge&format=Json'
)
GRAPH_API_BASE = 'https://graph.facebook.com/v21.0'
MEDIA_FIELDS = 'id,caption,media_type,media_url,permalink,thumbnail_url,timestamp'
PROFILE_URL = 'https://www.instagram.com/{username}/'

# User agents
BOT_USER_AGENT = 'Mozilla/5.0 (compatible; RecentPostsBot/1.0)'
BROWSER_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


@dataclass
class FetchConfig:
    """Configuration for acquisition strategies."""

    # HTTP layer
    connect_timeout: float = 10.0
    request_timeout: float = 30.0
    user_agent: str = BOT_USER_AGENT

    # Render layer
    render_timeout_ms: int = 30000
    settle_delay_ms: int = 2000  # after networkidle, for deferred client rendering
    wait_until: str = 'networkidle'
    headless: bool = True
    stealth: bool = False  # patch page with playwright-stealth before navigating
    browser_user_agent: str = BROWSER_USER_AGENT

    # Endpoints
    feed_url: str = RSS_BRIDGE_URL
    graph_api_base: str = GRAPH_API_BASE
    media_fields: str = MEDIA_FIELDS
    profile_url: str = PROFILE_URL

    # Result bound
    max_posts: int = MAX_POSTS

    @property
    def http_timeout(self) -> tuple[float, float]:
        """(connect, read) tuple in the form requests expects."""
        return (self.connect_timeout, self.request_timeout)
