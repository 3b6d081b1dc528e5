"""
Process-wide holder for the resolved post list.

The chain runs once in initialize(); afterwards the stored tuple is never
replaced, so get_current_posts() is safe from any thread without locking.
"""

from __future__ import annotations

import logging

from postfetch.config import FetchConfig
from postfetch.exclusion import filter_excluded

from .chain import ChainResult, resolve_posts
from .config import PostsSettings

log = logging.getLogger(__name__)


class PostsStore:
    """Write-once store for the accepted ChainResult."""

    def __init__(
        self,
        settings: PostsSettings | None = None,
        config: FetchConfig | None = None,
        resolver=resolve_posts,
    ):
        self.settings = settings or PostsSettings()
        self._config = config or FetchConfig()
        self._resolver = resolver
        self._result: ChainResult | None = None

    @property
    def initialized(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> ChainResult | None:
        return self._result

    @property
    def source(self) -> str | None:
        return self._result.source if self._result else None

    def initialize(self) -> ChainResult:
        """Resolve posts through the chain; later calls reuse the first result."""
        if self._result is not None:
            log.debug("Posts already resolved from %s, not re-running chain", self._result.source)
            return self._result
        self._result = self._resolver(self.settings, self._config)
        return self._result

    def get_current_posts(self) -> tuple[str, ...]:
        """Resolved posts with the current exclusion spec applied."""
        if self._result is None:
            return ()
        return filter_excluded(self._result.posts, self.settings.exclude)


_default_store: PostsStore | None = None


def initialize(
    settings: PostsSettings | None = None,
    config: FetchConfig | None = None,
    resolver=None,
) -> ChainResult:
    """Initialize the process-wide store (first call wins)."""
    global _default_store
    if _default_store is None:
        _default_store = PostsStore(settings, config, resolver=resolver or resolve_posts)
    return _default_store.initialize()


def get_current_posts() -> tuple[str, ...]:
    """Exclusion-filtered posts from the process-wide store."""
    if _default_store is None:
        return ()
    return _default_store.get_current_posts()


def get_default_store() -> PostsStore | None:
    return _default_store


def reset_default_store() -> None:
    """Drop the process-wide store (tests only)."""
    global _default_store
    _default_store = None
