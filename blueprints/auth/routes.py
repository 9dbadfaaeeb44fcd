"""
Auth Routes - Sign-in and sign-out

The browser runs the provider's pop-up sign-in and posts the resulting ID
token here. When no token arrives (pop-up blocked or failed) the visitor is
sent to the provider's hosted sign-in page, which comes back to /auth/callback.
"""

from flask import redirect, url_for, request, flash, current_app
from flask_login import login_user, logout_user, current_user
from extensions import get_service
from utils.auth_provider import InvalidTokenError
from . import auth_bp


def _safe_next(default):
    target = request.values.get('next', '')
    # only same-site relative paths
    if target.startswith('/') and not target.startswith('//'):
        return target
    return default


def _sign_in_with_token(id_token):
    """Verify the token and start the session; returns True on success"""
    try:
        identity = get_service('auth_provider').verify_token(id_token)
    except InvalidTokenError as e:
        current_app.logger.warning(f"Rejected sign-in token: {str(e)}")
        flash('Sign-in failed. Please try again.', 'error')
        return False

    login_user(identity)
    flash(f'Welcome, {identity.email or identity.id}!', 'success')
    return True


@auth_bp.route('/login', methods=['POST'])
def login():
    """Sign in with an ID token from the pop-up flow"""
    next_url = _safe_next(url_for('blog.index'))
    id_token = request.form.get('id_token', '').strip()

    if not id_token:
        # Pop-up path failed: fall back to the hosted redirect flow
        sign_in_url = get_service('auth_provider').sign_in_url(
            url_for('auth.callback', next=next_url, _external=True))
        if sign_in_url:
            return redirect(sign_in_url)
        flash('Sign-in failed. Please try again.', 'error')
        return redirect(next_url)

    _sign_in_with_token(id_token)
    return redirect(next_url)


@auth_bp.route('/callback')
def callback():
    """Return point of the redirect sign-in flow"""
    next_url = _safe_next(url_for('blog.index'))
    id_token = request.args.get('id_token', '').strip()
    if not id_token:
        flash('Sign-in was cancelled.', 'warning')
        return redirect(next_url)

    _sign_in_with_token(id_token)
    return redirect(next_url)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Sign out current visitor"""
    if current_user.is_authenticated:
        logout_user()
        flash('Signed out successfully', 'success')
    return redirect(_safe_next(url_for('blog.index')))
