"""
tests/test_session_tracker.py
"""
from __future__ import annotations

from flask import session
from flask_login import login_user, logout_user

from conftest import ADMIN, VISITOR, grant_admin
from extensions import SERVICES_KEY
from utils.session_tracker import SessionTracker


def _tracker(app) -> SessionTracker:
    return app.extensions[SERVICES_KEY]["tracker"]


def test_sign_in_and_out_update_identity(app):
    tracker = _tracker(app)
    seen = []
    tracker.subscribe(seen.append)

    with app.test_request_context():
        assert tracker.current is None

        login_user(VISITOR)
        assert tracker.current == VISITOR

        logout_user()
        assert tracker.current is None

    assert seen == [VISITOR, None]


def test_authorization_is_reevaluated_on_identity_change(app, memory_store):
    grant_admin(memory_store, ADMIN)

    with app.test_request_context():
        login_user(ADMIN)
        assert session["can_write"] is True

        login_user(VISITOR)
        assert session["can_write"] is False

        logout_user()
        assert session["can_write"] is False


def test_unsubscribe_stops_notifications(app):
    tracker = _tracker(app)
    seen = []
    unsubscribe = tracker.subscribe(seen.append)
    unsubscribe()
    unsubscribe()  # idempotent

    with app.test_request_context():
        login_user(VISITOR)

    assert seen == []


def test_close_releases_the_subscription(app):
    tracker = _tracker(app)
    seen = []
    tracker.subscribe(seen.append)
    tracker.close()
    assert tracker.is_subscribed is False

    with app.test_request_context():
        login_user(VISITOR)
        assert tracker.current is None

    assert seen == []


def test_subscribes_only_once(app):
    tracker = _tracker(app)
    tracker.init_app(app)
    seen = []
    tracker.subscribe(seen.append)

    with app.test_request_context():
        login_user(VISITOR)

    assert seen == [VISITOR]


def test_trackers_only_follow_their_own_app(app):
    from app import create_app
    from conftest import FakeAuthProvider, MemoryDocumentStore

    other = create_app("testing", store=MemoryDocumentStore(), auth_provider=FakeAuthProvider())
    seen = []
    _tracker(app).subscribe(seen.append)
    try:
        with other.test_request_context():
            login_user(VISITOR)
    finally:
        _tracker(other).close()

    assert seen == []
