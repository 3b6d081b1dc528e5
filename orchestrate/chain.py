"""
Fallback chain for recent posts:
RSS Bridge → Graph API → headless render → bundled snapshot

Each strategy attempt is turned into a StrategyOutcome; the chain accepts
the first outcome carrying posts and never lets a strategy failure escape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from postfetch.config import FetchConfig
from postfetch.fetcher import (
    FetchError,
    fetch_feed_posts,
    fetch_media_posts,
    fetch_rendered_posts,
)
from postfetch.snapshot import load_snapshot

from .config import PostsSettings

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

SOURCE_PRIMARY = "primary"      # RSS Bridge
SOURCE_SECONDARY = "secondary"  # Graph API
SOURCE_TERTIARY = "tertiary"    # headless render
SOURCE_FALLBACK = "fallback"
SOURCE_EMPTY = "empty"

STRATEGY_LADDER = [SOURCE_PRIMARY, SOURCE_SECONDARY, SOURCE_TERTIARY]

STRATEGY_LABELS = {
    SOURCE_PRIMARY: "RSS Bridge",
    SOURCE_SECONDARY: "Graph API",
    SOURCE_TERTIARY: "headless browser",
}


@dataclass(frozen=True)
class StrategyOutcome:
    """Result of one strategy attempt."""
    strategy: str
    posts: tuple[str, ...] = ()
    error: str | None = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.skipped and bool(self.posts)


@dataclass(frozen=True)
class ChainResult:
    """Accepted post list and where it came from."""
    posts: tuple[str, ...]
    source: str
    outcomes: tuple[StrategyOutcome, ...] = ()


def attempt_strategy(strategy: str, fn, *args) -> StrategyOutcome:
    """Run one strategy callable and convert its result or failure."""
    try:
        posts = tuple(fn(*args))
    except (FetchError, requests.RequestException) as e:
        return StrategyOutcome(strategy, error=str(e) or type(e).__name__)
    except Exception as e:
        # Startup must complete whatever a strategy does
        return StrategyOutcome(strategy, error=f"{type(e).__name__}: {e}")
    return StrategyOutcome(strategy, posts=posts)


def _log_outcome(outcome: StrategyOutcome) -> None:
    label = STRATEGY_LABELS.get(outcome.strategy, outcome.strategy)
    if outcome.ok:
        log.info("Successfully fetched %d Instagram posts via %s", len(outcome.posts), label)
    elif outcome.skipped:
        log.info("%s credentials not configured, skipping", label)
    elif outcome.error:
        log.warning("%s failed: %s", label, outcome.error)
    else:
        log.info("%s returned no posts", label)


def resolve_posts(
    settings: PostsSettings,
    config: FetchConfig | None = None,
    *,
    fetch_feed=fetch_feed_posts,
    fetch_media=fetch_media_posts,
    fetch_rendered=fetch_rendered_posts,
    load_fallback=load_snapshot,
) -> ChainResult:
    """
    Run the fallback chain once.

    Args:
        settings: Account settings
        config: Fetch configuration
        fetch_feed: (username, config) -> posts
        fetch_media: (account_id, access_token, config) -> posts
        fetch_rendered: (username, config) -> posts
        load_fallback: (snapshot_path) -> posts

    Returns:
        ChainResult with source in primary/secondary/tertiary/fallback/empty
    """
    if config is None:
        config = FetchConfig()

    # Loaded up front so reads have data even when fetching is off
    fallback_posts = tuple(load_fallback(settings.snapshot_path))

    if not settings.enabled:
        log.info("Instagram posts fetcher is disabled, using %d snapshot posts", len(fallback_posts))
        return ChainResult(fallback_posts, SOURCE_FALLBACK)

    outcomes = []
    for strategy in STRATEGY_LADDER:
        if strategy == SOURCE_PRIMARY:
            log.info("Fetching Instagram posts via RSS Bridge...")
            outcome = attempt_strategy(strategy, fetch_feed, settings.username, config)
        elif strategy == SOURCE_SECONDARY:
            if not settings.has_graph_api_credentials:
                outcome = StrategyOutcome(strategy, skipped=True)
            else:
                log.info("Fetching Instagram posts via Graph API")
                outcome = attempt_strategy(
                    strategy, fetch_media,
                    settings.account_id, settings.access_token, config,
                )
        else:
            outcome = attempt_strategy(strategy, fetch_rendered, settings.username, config)

        outcomes.append(outcome)
        _log_outcome(outcome)
        if outcome.ok:
            return ChainResult(outcome.posts, strategy, tuple(outcomes))

    if fallback_posts:
        log.info("Using %d fallback posts from snapshot", len(fallback_posts))
        return ChainResult(fallback_posts, SOURCE_FALLBACK, tuple(outcomes))

    log.warning("No Instagram posts available, post list will be empty")
    return ChainResult((), SOURCE_EMPTY, tuple(outcomes))
