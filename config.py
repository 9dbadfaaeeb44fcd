import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database Settings (local document backend)
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Document store: 'sql' keeps posts/admins in the local database,
    # 'firestore' talks to Cloud Firestore through firebase-admin
    DOCUMENT_BACKEND = os.environ.get('DOCUMENT_BACKEND', 'sql')
    FIREBASE_CREDENTIALS = os.environ.get('FIREBASE_CREDENTIALS')  # path to service account JSON
    FIREBASE_PROJECT_ID = os.environ.get('FIREBASE_PROJECT_ID')

    # Hosted sign-in page used when the pop-up flow is unavailable
    AUTH_REDIRECT_URL = os.environ.get('AUTH_REDIRECT_URL')

    # Browser half of the sign-in flow (Firebase web app config, both public)
    FIREBASE_WEB_API_KEY = os.environ.get('FIREBASE_WEB_API_KEY')
    FIREBASE_AUTH_DOMAIN = os.environ.get('FIREBASE_AUTH_DOMAIN')

    # Blog Settings
    POSTS_COLLECTION = 'posts'
    ADMINS_COLLECTION = 'admins'
    POSTS_LIMIT = 50
    EXCERPT_LENGTH = 140
    COMPOSER_DEFAULT_TAGS = 'React,TypeScript'

    # Portfolio Settings
    PORTFOLIO_DATA_FILE = os.environ.get('PORTFOLIO_DATA_FILE')

    # JSON Settings
    JSON_AS_ASCII = False


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    DOCUMENT_BACKEND = os.environ.get('DOCUMENT_BACKEND', 'firestore')


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing invalid pool settings to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    DOCUMENT_BACKEND = 'sql'
    AUTH_REDIRECT_URL = None
    FIREBASE_WEB_API_KEY = 'test-web-api-key'
    FIREBASE_AUTH_DOMAIN = 'portfolio-test.firebaseapp.com'
    PORTFOLIO_DATA_FILE = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
