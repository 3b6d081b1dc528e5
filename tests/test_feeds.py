"""
Tests for postfetch/feeds.py: RSS Bridge JSON Feed parsing.
"""

import json
import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from postfetch.feeds import as_text, parse_feed_response


def _feed(items) -> str:
    return json.dumps({"version": "https://jsonfeed.org/version/1", "items": items})


def test_items_with_url_fields():
    body = _feed([
        {"url": "https://instagram.com/p/ABC123DEF45/", "title": "First"},
        {"url": "https://instagram.com/p/XYZ789GHI01/", "title": "Second"},
    ])
    assert parse_feed_response(body) == (
        "https://instagram.com/p/ABC123DEF45/",
        "https://instagram.com/p/XYZ789GHI01/",
    )


def test_falls_back_to_id_when_url_missing_or_empty():
    body = _feed([
        {"id": "https://www.instagram.com/p/ABC123DEF45/"},
        {"url": "", "id": "https://www.instagram.com/p/XYZ789GHI01/"},
    ])
    assert parse_feed_response(body) == (
        "https://www.instagram.com/p/ABC123DEF45/",
        "https://www.instagram.com/p/XYZ789GHI01/",
    )


def test_non_post_entries_are_skipped():
    body = _feed([
        {"url": "https://www.instagram.com/tc11assb/"},
        {"url": "https://example.com/p/ABC123DEF45/"},
        {"url": "https://www.instagram.com/p/XYZ789GHI01/"},
        {"title": "no link at all"},
    ])
    assert parse_feed_response(body) == ("https://www.instagram.com/p/XYZ789GHI01/",)


def test_order_preserved_among_accepted_items():
    urls = [f"https://www.instagram.com/p/POST00000{i:02d}/" for i in (3, 1, 2)]
    body = _feed([{"url": u} for u in urls])
    assert parse_feed_response(body) == tuple(urls)


def test_bounded_to_six():
    body = _feed([{"url": f"https://www.instagram.com/p/POST00000{i:02d}/"} for i in range(10)])
    result = parse_feed_response(body)
    assert len(result) == 6
    assert result[0].endswith("POST0000000/")
    assert result[5].endswith("POST0000005/")


def test_bound_counts_accepted_items_only():
    items = [{"url": "https://example.com/other"}] * 5
    items += [{"url": f"https://www.instagram.com/p/POST00000{i:02d}/"} for i in range(3)]
    assert len(parse_feed_response(_feed(items))) == 3


def test_malformed_json_returns_empty():
    assert parse_feed_response("not valid json") == ()
    assert parse_feed_response("") == ()
    assert parse_feed_response(None) == ()


def test_unexpected_shapes_return_empty():
    assert parse_feed_response("{}") == ()
    assert parse_feed_response('{"items": null}') == ()
    assert parse_feed_response('{"items": {"url": "x"}}') == ()
    assert parse_feed_response("[1, 2, 3]") == ()
    assert parse_feed_response("null") == ()


def test_non_object_items_ignored():
    body = _feed(["https://www.instagram.com/p/ABC123DEF45/", None,
                  {"url": "https://www.instagram.com/p/XYZ789GHI01/"}])
    assert parse_feed_response(body) == ("https://www.instagram.com/p/XYZ789GHI01/",)


def test_as_text():
    assert as_text("abc") == "abc"
    assert as_text(12) == "12"
    assert as_text(True) == "true"
    assert as_text(None) == ""
    assert as_text({"a": 1}) == ""
    assert as_text([1]) == ""
