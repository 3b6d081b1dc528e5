"""
Tests for postfetch/extractor.py: shortcode scanning of rendered HTML.
"""

import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from postfetch.extractor import (
    extract_post_urls,
    extract_shortcodes,
    is_valid_shortcode,
)


def test_repeated_shortcode_yields_single_url():
    html = """
    <a href="/p/ABC123DEF45/">post</a>
    <a href="https://www.instagram.com/p/ABC123DEF45/">again</a>
    <div data-href="/p/ABC123DEF45/"></div>
    """
    assert extract_post_urls(html) == ("https://www.instagram.com/p/ABC123DEF45",)


def test_reel_links_are_emitted_as_post_urls():
    html = '<a href="/reel/REEL1234567/">reel</a>'
    urls = extract_post_urls(html)
    assert urls == ("https://www.instagram.com/p/REEL1234567",)
    assert not any("/reel/" in u for u in urls)


def test_same_shortcode_via_post_and_reel_deduplicated():
    html = '<a href="/reel/ABC123DEF45/"></a><a href="/p/ABC123DEF45/"></a>'
    assert extract_post_urls(html) == ("https://www.instagram.com/p/ABC123DEF45",)


def test_post_matches_come_before_reel_matches():
    html = '<a href="/reel/REEL1234567/"></a><a href="/p/POST1234567/"></a>'
    assert extract_shortcodes(html) == ["POST1234567", "REEL1234567"]


def test_discovery_order_within_pattern():
    html = "/p/CCCCCCCCCCC/ /p/AAAAAAAAAAA/ /p/BBBBBBBBBBB/"
    assert extract_shortcodes(html) == ["CCCCCCCCCCC", "AAAAAAAAAAA", "BBBBBBBBBBB"]


def test_length_bounds():
    html = " ".join([
        "/p/SHORT1234/",       # 9
        "/p/TENCHARS10/",      # 10
        "/p/TWELVECHARS1/",    # 12
        "/p/THIRTEENCHARS/",   # 13
    ])
    assert extract_shortcodes(html) == ["TENCHARS10", "TWELVECHARS1"]


def test_maximal_run_is_captured():
    # 16-char run is rejected as a whole, never truncated to a valid length
    assert extract_shortcodes("/p/ABCDEFGHIJKLMNOP/") == []


def test_shortcode_charset_includes_underscore_and_hyphen():
    assert extract_shortcodes("/p/DKurQ_ktd-w/") == ["DKurQ_ktd-w"]


def test_bounded_to_max_posts():
    html = " ".join(f'<a href="/p/ABCDEFGH{i:02d}/"></a>' for i in range(10))
    urls = extract_post_urls(html)
    assert len(urls) == 6
    assert urls[0] == "https://www.instagram.com/p/ABCDEFGH00"
    assert urls[-1] == "https://www.instagram.com/p/ABCDEFGH05"


def test_custom_bound():
    html = " ".join(f"/p/ABCDEFGH{i:02d}/" for i in range(4))
    assert len(extract_post_urls(html, max_posts=2)) == 2


def test_empty_and_malformed_input():
    assert extract_post_urls("") == ()
    assert extract_post_urls(None) == ()
    assert extract_post_urls("<html><body>no links</body>") == ()
    assert extract_post_urls("/p/ /reel/") == ()


def test_is_valid_shortcode():
    assert is_valid_shortcode("A" * 10)
    assert is_valid_shortcode("A" * 12)
    assert not is_valid_shortcode("A" * 9)
    assert not is_valid_shortcode("A" * 13)
