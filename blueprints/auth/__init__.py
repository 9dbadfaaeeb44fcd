"""
Auth Blueprint - Sign-in and sign-out
Handles: ID token sign-in, redirect sign-in fallback, sign-out
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

from . import routes
