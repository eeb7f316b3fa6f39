"""
Configuration settings for the blog
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key for the signed session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration (required, checked by create_app)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Hosted authentication provider
    AUTH_DOMAIN = (os.environ.get('AUTH_DOMAIN') or '').rstrip('/')
    AUTH_CLIENT_ID = os.environ.get('AUTH_CLIENT_ID') or ''
    AUTH_CLIENT_SECRET = os.environ.get('AUTH_CLIENT_SECRET') or ''
    AUTH_REDIRECT_URL = os.environ.get('AUTH_REDIRECT_URL') or 'http://localhost:5000/api/auth/callback'
    AUTH_LOGOUT_REDIRECT_URL = os.environ.get('AUTH_LOGOUT_REDIRECT_URL') or 'http://localhost:5000'
    AUTH_TIMEOUT = float(os.environ.get('AUTH_TIMEOUT') or 6)
    
    # Application settings
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    POST_TITLE_MAX_LENGTH = 200


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTH_DOMAIN = 'https://blog.auth.example.com'
    AUTH_CLIENT_ID = 'test-client-id'
    AUTH_CLIENT_SECRET = 'test-client-secret'
    AUTH_REDIRECT_URL = 'http://localhost/api/auth/callback'
    AUTH_LOGOUT_REDIRECT_URL = 'http://localhost'
