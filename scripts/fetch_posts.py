#!/usr/bin/env python3
"""
Resolve recent Instagram posts once and print or save them.

Runs the fallback chain (RSS Bridge → Graph API → headless browser →
bundled snapshot), applies the exclusion list, and emits the posts as a
JSON array.

Usage:
    python scripts/fetch_posts.py
    python scripts/fetch_posts.py --config config/posts.yaml --out site/instagram.json
    python scripts/fetch_posts.py --username tc11assb --exclude DKurQ_ktdgw --summary
    INSTAGRAM_ACCESS_TOKEN=... INSTAGRAM_ACCOUNT_ID=... python scripts/fetch_posts.py
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

# Add parent dir to path for postfetch/orchestrate
sys.path.insert(0, str(Path(__file__).parent.parent))

from orchestrate.config import load_fetch_config, load_settings
from orchestrate.presenter import posts_payload, write_posts_json
from orchestrate.store import PostsStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Fetch recent Instagram post URLs')
    parser.add_argument('--config', help='Run config (YAML or JSON)')
    parser.add_argument('--username', help='Instagram account name')
    parser.add_argument('--access-token', help='Graph API access token')
    parser.add_argument('--account-id', help='Instagram business account ID')
    parser.add_argument('--exclude', help='Comma-separated shortcodes or post URLs to drop')
    parser.add_argument('--snapshot', help='Fallback snapshot JSON (default: bundled)')
    parser.add_argument('--disabled', action='store_true',
                        help='Skip live fetching and use the snapshot only')
    parser.add_argument('--out', help='Write posts JSON here instead of stdout')
    parser.add_argument('--summary', action='store_true',
                        help='Print source and per-strategy outcomes with the posts')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--quiet', action='store_true', help='Warnings only')
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    overrides = {
        'username': args.username,
        'access_token': args.access_token,
        'account_id': args.account_id,
        'exclude': args.exclude,
        'snapshot_path': args.snapshot,
        'enabled': False if args.disabled else None,
    }
    try:
        settings = load_settings(args.config, overrides=overrides)
        config = load_fetch_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    store = PostsStore(settings, config)
    result = store.initialize()
    posts = store.get_current_posts()

    if args.summary:
        document = posts_payload(result, posts)
    else:
        document = list(posts)

    if args.out:
        if args.summary:
            out = Path(args.out)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(json.dumps(document, indent=2) + '\n', encoding='utf-8')
        else:
            out = write_posts_json(posts, Path(args.out))
        print(f"Wrote {len(posts)} posts ({result.source}) to {out}", file=sys.stderr)
    else:
        print(json.dumps(document, indent=2))

    return 0


if __name__ == '__main__':
    sys.exit(main())
