"""
Auth Blueprint

Handoffs to the hosted authentication provider.
"""

from flask import Blueprint, current_app

auth_bp = Blueprint('auth', __name__)


def get_auth_client():
    """Return the provider client created by the application factory."""
    return current_app.extensions['hosted_auth']


from blogsite.auth import routes  # noqa: E402,F401
