"""
Orchestration modules for the recent-posts chain.

Typical startup:
    from orchestrate import load_settings, initialize, get_current_posts

    initialize(load_settings("config/posts.yaml"))
    posts = get_current_posts()
"""

from .config import (
    PostsSettings,
    load_run_config,
    load_settings,
    load_fetch_config,
    parse_bool,
    DEFAULT_USERNAME,
    ENV_VARS,
)
from .chain import (
    ChainResult,
    StrategyOutcome,
    resolve_posts,
    STRATEGY_LADDER,
    SOURCE_PRIMARY,
    SOURCE_SECONDARY,
    SOURCE_TERTIARY,
    SOURCE_FALLBACK,
    SOURCE_EMPTY,
)
from .store import (
    PostsStore,
    initialize,
    get_current_posts,
    reset_default_store,
)
from .presenter import (
    posts_payload,
    write_posts_json,
)

__all__ = [
    "PostsSettings",
    "load_run_config",
    "load_settings",
    "load_fetch_config",
    "parse_bool",
    "DEFAULT_USERNAME",
    "ENV_VARS",
    "ChainResult",
    "StrategyOutcome",
    "resolve_posts",
    "STRATEGY_LADDER",
    "SOURCE_PRIMARY",
    "SOURCE_SECONDARY",
    "SOURCE_TERTIARY",
    "SOURCE_FALLBACK",
    "SOURCE_EMPTY",
    "PostsStore",
    "initialize",
    "get_current_posts",
    "reset_default_store",
    "posts_payload",
    "write_posts_json",
]
