"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Initialize extensions without binding to app
db = SQLAlchemy()
login_manager = LoginManager()
login_manager.login_view = 'blog.index'
login_manager.login_message = 'Please sign in to access this page.'
login_manager.login_message_category = 'info'

# Key under app.extensions holding the blog services built by create_app
SERVICES_KEY = 'portfolio_blog'


def get_service(name):
    """Return a blog service (store, authorization, posts, tracker, auth_provider)"""
    return current_app.extensions[SERVICES_KEY][name]


__all__ = ['db', 'login_manager', 'get_service', 'SERVICES_KEY']
