"""
tests/test_models.py
"""
from __future__ import annotations

import datetime as _dt

import pytest
from pydantic import ValidationError

from models import Identity, Post, PostDraft, make_excerpt, parse_tags


def test_make_excerpt_is_first_140_chars_plus_ellipsis():
    body = "x" * 200
    assert make_excerpt(body) == "x" * 140 + "…"
    assert make_excerpt("short") == "short…"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("React, TypeScript ,,", ["React", "TypeScript"]),
        (["  Vite", "", "CSS "], ["Vite", "CSS"]),
        ("", []),
        (None, []),
    ],
)
def test_parse_tags(raw, expected):
    assert parse_tags(raw) == expected


def test_draft_fields_derive_excerpt_from_content():
    draft = PostDraft(title="Hello", tags="a, b", content="y" * 150)
    fields = draft.to_fields()
    assert fields == {
        "title": "Hello",
        "tags": ["a", "b"],
        "excerpt": "y" * 140 + "…",
        "content": "y" * 150,
    }


def test_post_from_document_coerces_loose_fields():
    created = _dt.datetime(2025, 2, 3, 10, 0, tzinfo=_dt.timezone.utc)
    post = Post.from_document("abc", {
        "title": "T",
        "tags": "One,Two",
        "content": "Body",
        "createdAt": created,
        "unknown": "ignored",
    })
    assert post.id == "abc"
    assert post.tags == ["One", "Two"]
    assert post.excerpt == "Body…"
    assert post.date == "2025-02-03"
    assert post.created_at == created


def test_post_document_id_wins_over_stored_id():
    post = Post.from_document("real", {"id": "stale", "title": "T", "content": "C"})
    assert post.id == "real"


@pytest.mark.parametrize(
    "data",
    [
        {"content": "no title"},
        {"title": "no content"},
        {"title": "T", "content": "C", "tags": 42},
        {"title": ["not", "text"], "content": "C"},
    ],
)
def test_malformed_documents_are_rejected(data):
    with pytest.raises(ValidationError):
        Post.from_document("bad", data)


def test_identity_round_trip():
    ident = Identity("uid-1", "me@example.com")
    assert Identity.from_dict(ident.to_dict()) == ident
    assert Identity.from_dict(None) is None
    assert Identity.from_dict({"email": "x@example.com"}) is None
    assert ident.get_id() == "uid-1"
