"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required, admin_required
from .data import get_seed_posts, get_default_portfolio_data, load_portfolio_data
from .documents import (
    DocumentStore,
    SQLDocumentStore,
    DocumentStoreError,
    SERVER_TIMESTAMP
)
from .auth_provider import AuthProvider, InvalidTokenError
from .authorization import AdminAuthorization
from .session_tracker import SessionTracker
from .post_store import PostStoreClient
from .composer import PostComposer
from .search import filter_posts, select_post
from .notifications import FlashNotifier

__all__ = [
    # Decorators
    'login_required',
    'admin_required',

    # Data
    'get_seed_posts',
    'get_default_portfolio_data',
    'load_portfolio_data',

    # Document store
    'DocumentStore',
    'SQLDocumentStore',
    'DocumentStoreError',
    'SERVER_TIMESTAMP',

    # Auth
    'AuthProvider',
    'InvalidTokenError',
    'AdminAuthorization',
    'SessionTracker',

    # Blog
    'PostStoreClient',
    'PostComposer',
    'filter_posts',
    'select_post',
    'FlashNotifier'
]
