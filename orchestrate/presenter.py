"""
Presentation helpers for post output.

Builds the flat post list document consumed by page templates and the
summary printed by scripts/fetch_posts.py.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from .chain import ChainResult


def posts_payload(result: ChainResult, posts) -> dict:
    """Summary of a chain run: accepted source, filtered posts, per-strategy outcomes."""
    return {
        "source": result.source,
        "count": len(posts),
        "posts": list(posts),
        "strategies": [
            {**asdict(o), "posts": len(o.posts)} for o in result.outcomes
        ],
    }


def write_posts_json(posts, path: Path) -> Path:
    """Write posts as a JSON array (the instagram.json document)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(list(posts), f, indent=2)
        f.write("\n")
    return path


__all__ = [
    "posts_payload",
    "write_posts_json",
]
