"""
Session Tracker Module - Follows sign-in / sign-out transitions

The auth routes call flask_login.login_user / logout_user once the
provider has verified the visitor; Flask-Login emits user_logged_in /
user_logged_out and the tracker turns those into identity updates.
"""

import logging
from flask import session
from flask_login import user_logged_in, user_logged_out
from models import Identity

IDENTITY_KEY = 'identity'


class SessionTracker:
    """Holds the current identity and notifies subscribers when it changes"""

    def __init__(self, app=None, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self._subscribers = []
        self._app = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Subscribe to the auth state stream of `app` (only once)"""
        if self._app is not None:
            return
        user_logged_in.connect(self._on_signed_in, app)
        user_logged_out.connect(self._on_signed_out, app)
        self._app = app

    def close(self):
        """Release the signal subscriptions"""
        if self._app is None:
            return
        user_logged_in.disconnect(self._on_signed_in, self._app)
        user_logged_out.disconnect(self._on_signed_out, self._app)
        self._app = None

    @property
    def is_subscribed(self):
        return self._app is not None

    @property
    def current(self):
        return Identity.from_dict(session.get(IDENTITY_KEY))

    def subscribe(self, callback):
        """Call `callback(identity_or_none)` on every transition; returns an unsubscribe function"""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _on_signed_in(self, sender, user=None, **extra):
        identity = Identity(user.id, getattr(user, 'email', None))
        self.logger.info(f"Signed in: {identity.email or identity.id}")
        self._publish(identity)

    def _on_signed_out(self, sender, user=None, **extra):
        self.logger.info("Signed out")
        self._publish(None)

    def _publish(self, identity):
        if identity is None:
            session.pop(IDENTITY_KEY, None)
        else:
            session[IDENTITY_KEY] = identity.to_dict()
        for callback in list(self._subscribers):
            callback(identity)
