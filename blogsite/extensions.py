"""
Flask Extensions

Users are authenticated by the hosted provider; Flask-Login only mirrors
the profile kept in the session so views can use `current_user`.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager backed by the provider session
login_manager = LoginManager()
