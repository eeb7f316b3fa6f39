"""
Session Store

The provider's profile lives in the signed Flask session cookie. This is
the server-side session lookup the rest of the app reads from.
"""

import secrets
from urllib.parse import urlsplit, urlunsplit

from flask import request, session

from blogsite.auth.client import PROFILE_FIELDS
from blogsite.errors import AuthStateError

PROFILE_KEY = 'auth_profile'
STATE_KEY = 'auth_state'
NEXT_KEY = 'auth_next'


def get_user():
    """Return the current user's profile, or None when nobody is signed in."""
    profile = session.get(PROFILE_KEY)
    if not profile or not profile.get('id'):
        return None
    return dict(profile)


def store_user(profile):
    session[PROFILE_KEY] = {field: profile.get(field) for field in PROFILE_FIELDS}


def clear_user():
    session.pop(PROFILE_KEY, None)
    session.pop(STATE_KEY, None)
    session.pop(NEXT_KEY, None)


def issue_state():
    state = secrets.token_urlsafe(24)
    session[STATE_KEY] = state
    return state


def consume_state(received):
    """Check the callback state against the issued one; it is single use."""
    expected = session.pop(STATE_KEY, None)
    if not expected or not received or not secrets.compare_digest(expected, received):
        raise AuthStateError('State mismatch on auth callback')


def remember_next(target):
    """Keep a same-site page to return to after the callback."""
    if not target:
        return
    parts = urlsplit(target)
    if parts.netloc and parts.netloc != request.host:
        return
    if not parts.path.startswith('/') or parts.path.startswith('//'):
        return
    session[NEXT_KEY] = urlunsplit(('', '', parts.path, parts.query, ''))


def pop_next(default):
    return session.pop(NEXT_KEY, None) or default
