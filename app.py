"""
Portfolio & Blog - Main Application Entry Point
Application Factory Pattern with blueprints

This module initializes the Flask application with its extensions,
configuration and the blog services (document store, auth provider,
admin authorization, session tracker, post store client). All route
handling is delegated to blueprints.
"""

import os
import logging
from datetime import datetime
import click
from flask import Flask, session, render_template
from config import get_config
from extensions import db, login_manager, SERVICES_KEY
from models import Identity
from utils.data import get_seed_posts
from utils.documents import SQLDocumentStore
from utils.authorization import AdminAuthorization
from utils.session_tracker import SessionTracker, IDENTITY_KEY
from utils.post_store import PostStoreClient
from utils.notifications import FlashNotifier

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.pages import pages_bp
from blueprints.blog import blog_bp


def create_app(config_name=None, store=None, auth_provider=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        store: Document store to use instead of the configured backend (optional)
        auth_provider: Auth provider to use instead of Firebase (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    # Initialize extensions with app
    initialize_extensions(app)

    # Build blog services
    register_services(app, store=store, auth_provider=auth_provider)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


@login_manager.user_loader
def load_user(user_id):
    """Rebuild the identity stored by the session tracker"""
    identity = Identity.from_dict(session.get(IDENTITY_KEY))
    if identity is not None and identity.id == user_id:
        return identity
    return Identity(user_id)


def build_backends(app):
    """Create the configured document store and auth provider"""
    from utils.firebase import get_firebase_app, FirestoreDocumentStore, FirebaseAuthProvider

    backend = app.config.get('DOCUMENT_BACKEND', 'sql')
    if backend not in ('sql', 'firestore'):
        raise ValueError(f"Unknown DOCUMENT_BACKEND: {backend!r}")

    # Sign-in always goes through Firebase; the app is only initialized
    # when credentials or a project are configured
    firebase_app = None
    if backend == 'firestore' or app.config.get('FIREBASE_CREDENTIALS') or app.config.get('FIREBASE_PROJECT_ID'):
        firebase_app = get_firebase_app(
            app.config.get('FIREBASE_CREDENTIALS'),
            app.config.get('FIREBASE_PROJECT_ID'))
    else:
        app.logger.warning("Firebase is not configured; sign-in tokens cannot be verified")
    auth_provider = FirebaseAuthProvider(firebase_app, app.config.get('AUTH_REDIRECT_URL'))

    if backend == 'firestore':
        app.logger.info("✓ Using Cloud Firestore document store")
        return FirestoreDocumentStore(app=firebase_app), auth_provider

    app.logger.info("✓ Using SQL document store")
    return SQLDocumentStore(), auth_provider


def register_services(app, store=None, auth_provider=None):
    """Wire the blog services and keep them on app.extensions"""
    if store is None or auth_provider is None:
        default_store, default_provider = build_backends(app)
        store = store or default_store
        auth_provider = auth_provider or default_provider

    authorization = AdminAuthorization(
        store,
        collection=app.config['ADMINS_COLLECTION'],
        logger=app.logger)
    posts = PostStoreClient(
        store,
        authorization,
        seed_factory=get_seed_posts,
        notifier=FlashNotifier(),
        collection=app.config['POSTS_COLLECTION'],
        limit=app.config['POSTS_LIMIT'],
        excerpt_length=app.config['EXCERPT_LENGTH'],
        logger=app.logger)
    tracker = SessionTracker(app, logger=app.logger)

    def refresh_authorization(identity):
        session['can_write'] = authorization.check(identity)

    tracker.subscribe(refresh_authorization)

    app.extensions[SERVICES_KEY] = {
        'store': store,
        'auth_provider': auth_provider,
        'authorization': authorization,
        'posts': posts,
        'tracker': tracker,
    }


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(blog_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(403)
    def forbidden(e):
        return render_template('403.html'), 403

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        from flask_login import current_user

        return {
            'current_year': datetime.now().year,
            'signed_in_email': getattr(current_user, 'email', None),
            'is_signed_in': current_user.is_authenticated,
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' https://www.gstatic.com https://apis.google.com; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "connect-src 'self' https://*.googleapis.com; "
            "frame-src https://*.firebaseapp.com;"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


def register_commands(app):
    """Out-of-band admin grant management"""

    @app.cli.command('grant-admin')
    @click.argument('user_id')
    def grant_admin(user_id):
        """Allow USER_ID to write blog posts"""
        store = app.extensions[SERVICES_KEY]['store']
        store.set(app.config['ADMINS_COLLECTION'], user_id, {})
        click.echo(f"Granted admin to {user_id}")

    @app.cli.command('revoke-admin')
    @click.argument('user_id')
    def revoke_admin(user_id):
        """Remove USER_ID from the admin allow-list"""
        store = app.extensions[SERVICES_KEY]['store']
        store.delete(app.config['ADMINS_COLLECTION'], user_id)
        click.echo(f"Revoked admin from {user_id}")


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
