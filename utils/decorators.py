"""
Decorators Module - Authentication and authorization decorators
"""

from functools import wraps
from flask import redirect, url_for, flash
from flask_login import current_user


def login_required(f):
    """Decorator to require a signed-in visitor"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('Please sign in to access this page.', 'error')
            return redirect(url_for('blog.index'))
        return f(*args, **kwargs)
    return decorated_function


def admin_required(message='Admin access required.'):
    """Decorator to require an admin grant for the signed-in visitor

    Args:
        message (str): Notice flashed when the visitor is not an admin
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from extensions import get_service

            tracker = get_service('tracker')
            if not get_service('authorization').check(tracker.current):
                flash(message, 'error')
                return redirect(url_for('blog.index'))
            return f(*args, **kwargs)
        return decorated_function
    return decorator
