"""
tests/test_search.py
"""
from __future__ import annotations

from utils.data import get_seed_posts
from utils.search import filter_posts, select_post


def _ids(posts):
    return [p.id for p in posts]


def test_empty_query_returns_everything_in_order():
    posts = get_seed_posts()
    assert filter_posts(posts, "") == posts
    assert filter_posts(posts, "   ") == posts
    assert filter_posts(posts, None) == posts


def test_tailwind_matches_only_the_tailwind_post():
    hits = filter_posts(get_seed_posts(), "tailwind")
    assert _ids(hits) == ["tailwind-ile-tasarim-sistemi"]
    assert "Tailwind" in hits[0].tags


def test_query_is_trimmed_and_case_insensitive():
    hits = filter_posts(get_seed_posts(), "  VITE ")
    assert _ids(hits) == ["vite-ile-hizli-gelistirme"]


def test_matches_on_tags_title_and_excerpt():
    posts = get_seed_posts()
    # tag only
    assert _ids(filter_posts(posts, "build tools")) == ["vite-ile-hizli-gelistirme"]
    # title
    assert _ids(filter_posts(posts, "performans ipuçları")) == ["react-performans-ipuclari"]
    # excerpt
    assert _ids(filter_posts(posts, "memoization")) == ["react-performans-ipuclari"]


def test_content_is_not_searched():
    # "Rollup" only appears in the body of the Vite post
    assert filter_posts(get_seed_posts(), "rollup") == []


def test_order_of_source_list_is_kept():
    posts = list(reversed(get_seed_posts()))
    hits = filter_posts(posts, "e")
    assert _ids(hits) == [p.id for p in posts if p in hits]


def test_select_post_defaults_to_first():
    posts = get_seed_posts()
    assert select_post(posts).id == posts[0].id
    assert select_post(posts, "vite-ile-hizli-gelistirme").id == "vite-ile-hizli-gelistirme"
    assert select_post(posts, "missing") is None
    assert select_post([]) is None
