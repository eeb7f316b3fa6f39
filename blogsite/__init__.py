"""
Blog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask, render_template

from blogsite.auth.client import HostedAuthClient
from blogsite.config import Config
from blogsite.errors import BlogError, ConfigurationError
from blogsite.extensions import db, login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    
    Raises:
        ConfigurationError: if no database URL is configured
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise ConfigurationError('DATABASE_URL must be set')
    
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    app.extensions['hosted_auth'] = HostedAuthClient.from_config(app.config)
    
    # Register blueprints
    from blogsite.auth import auth_bp
    from blogsite.blog import blog_bp
    
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(blog_bp)
    
    # Navigation state for every template
    @app.context_processor
    def inject_auth_view():
        from blogsite.auth.session import get_user
        from blogsite.services import select_auth_view
        return dict(auth_view=select_auth_view(get_user()))
    
    # User loader for Flask-Login, backed by the provider profile
    @login_manager.user_loader
    def load_user(user_id):
        from blogsite.auth.session import get_user
        from blogsite.models import SessionUser
        profile = get_user()
        if profile and str(profile['id']) == user_id:
            return SessionUser(profile)
        return None
    
    @app.template_filter('post_date')
    def post_date_filter(value):
        return value.strftime('%b %d, %Y') if value else ''
    
    @app.errorhandler(BlogError)
    def handle_blog_error(error):
        logger.warning('%s: %s', type(error).__name__, error)
        return render_template('errors/error.html',
                               status_code=error.status_code,
                               message=error.message), error.status_code
    
    @app.errorhandler(404)
    def handle_not_found(error):
        return render_template('errors/error.html',
                               status_code=404,
                               message='Page not found.'), 404
    
    # Create database tables
    with app.app_context():
        db.create_all()
    
    return app
