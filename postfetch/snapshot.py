"""
Bundled last-resort snapshot of post URLs.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

log = logging.getLogger(__name__)


DEFAULT_SNAPSHOT_PATH = Path(__file__).resolve().parent / 'data' / 'recent_posts.json'


@lru_cache(maxsize=None)
def _read_snapshot(path: str) -> tuple[str, ...]:
    p = Path(path)
    if not p.exists():
        log.debug('Snapshot file not found: %s', p)
        return ()
    try:
        data = json.loads(p.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        log.debug('Failed to read snapshot %s: %s', p, e)
        return ()
    if not isinstance(data, list):
        log.debug('Snapshot %s is not a JSON array', p)
        return ()
    return tuple(url for url in data if isinstance(url, str) and url)


def load_snapshot(path: str | Path | None = None) -> tuple[str, ...]:
    """
    Load the snapshot list, reading each file at most once per process.

    Args:
        path: Snapshot JSON path (defaults to the bundled resource)

    Returns:
        Tuple of post URLs; empty if the file is missing or invalid
    """
    return _read_snapshot(str(path or DEFAULT_SNAPSHOT_PATH))


def clear_snapshot_cache() -> None:
    """Forget previously loaded snapshots."""
    _read_snapshot.cache_clear()
