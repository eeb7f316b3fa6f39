"""
Auth View Selection

Chooses what the navigation bar shows for the current session.
"""


def select_auth_view(user):
    """Select the signed-out or signed-in navigation state.
    
    Args:
        user: profile dict from the session lookup, or None
    
    Returns:
        dict with `authenticated`, `given_name` and the `actions` to render,
        each action naming the auth endpoint it hands off to
    """
    if user is None:
        return {
            'authenticated': False,
            'given_name': None,
            'actions': [
                {'label': 'Sign Up', 'endpoint': 'auth.register', 'style': 'primary'},
                {'label': 'Login', 'endpoint': 'auth.login', 'style': 'outline-secondary'},
            ],
        }
    
    return {
        'authenticated': True,
        'given_name': user.get('given_name') or user.get('email'),
        'actions': [
            {'label': 'Logout', 'endpoint': 'auth.logout', 'style': 'outline-secondary'},
        ],
    }
