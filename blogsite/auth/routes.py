"""
Auth Routes

Login, registration and logout are redirects to the hosted provider.
The callback completes the code flow and signs the user in locally.
"""

import logging

from flask import request, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user

from blogsite.auth import auth_bp, get_auth_client
from blogsite.auth.session import (
    store_user, clear_user, issue_state, consume_state, remember_next, pop_next,
)
from blogsite.errors import AuthStateError
from blogsite.models import SessionUser

logger = logging.getLogger(__name__)


@auth_bp.route('/login')
def login():
    """Hand off to the provider's sign-in page"""
    if current_user.is_authenticated:
        return redirect(url_for('blog.index'))
    
    remember_next(request.args.get('next'))
    return redirect(get_auth_client().login_url(issue_state()))


@auth_bp.route('/register')
def register():
    """Hand off to the provider's sign-up page"""
    if current_user.is_authenticated:
        return redirect(url_for('blog.index'))
    
    remember_next(request.args.get('next'))
    return redirect(get_auth_client().register_url(issue_state()))


@auth_bp.route('/callback')
def callback():
    """Provider redirect target after sign-in or sign-up"""
    error = request.args.get('error')
    if error:
        clear_user()
        description = request.args.get('error_description') or error
        logger.warning('Auth provider returned error: %s', description)
        flash(f'Sign-in was not completed: {description}', 'danger')
        return redirect(url_for('blog.index'))
    
    consume_state(request.args.get('state'))
    code = request.args.get('code')
    if not code:
        raise AuthStateError('Callback is missing the authorization code')
    
    client = get_auth_client()
    tokens = client.exchange_code(code)
    profile = client.fetch_profile(tokens['access_token'])
    
    store_user(profile)
    user = SessionUser(profile)
    login_user(user)
    logger.info('User %s signed in', user.get_id())
    flash(f'Welcome, {user.given_name or user.display_name}!', 'success')
    return redirect(pop_next(url_for('blog.index')))


@auth_bp.route('/logout')
def logout():
    """End the local session and hand off to the provider's logout"""
    clear_user()
    logout_user()
    return redirect(get_auth_client().logout_url())
