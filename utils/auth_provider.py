"""
Auth Provider Module - Boundary to the hosted authentication provider
"""

from typing import Optional
from urllib.parse import urlencode
from models import Identity


class InvalidTokenError(Exception):
    """Raised when the provider rejects an ID token"""

    def __init__(self, message='Invalid sign-in token'):
        super().__init__(message)


class AuthProvider:
    """
    Interface to the identity provider.

    The browser completes the interactive sign-in (pop-up, or the hosted
    redirect page when pop-ups are blocked) and hands the resulting ID
    token to the server, which only verifies it.
    """

    def __init__(self, redirect_url: Optional[str] = None):
        self.redirect_url = redirect_url

    def verify_token(self, id_token: str) -> Identity:
        """Return the identity for a valid ID token, raise InvalidTokenError otherwise"""
        raise NotImplementedError

    def sign_in_url(self, return_to: str) -> Optional[str]:
        """Hosted sign-in page for the redirect fallback, or None if not configured"""
        if not self.redirect_url:
            return None
        separator = '&' if '?' in self.redirect_url else '?'
        return f"{self.redirect_url}{separator}{urlencode({'continue': return_to})}"
