"""
Hosted Auth Client

Talks to the hosted authentication provider over its OAuth2 endpoints.
"""

import logging
from urllib.parse import urlencode

import requests

from blogsite.errors import AuthProviderError

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = 'openid profile email offline'
PROFILE_FIELDS = ('id', 'given_name', 'family_name', 'email', 'picture')


class HostedAuthClient:
    """Builds handoff URLs and completes the authorization-code flow."""
    
    def __init__(self, domain, client_id, client_secret, redirect_url,
                 logout_redirect_url, timeout=6, scope=DEFAULT_SCOPE):
        self.domain = domain.rstrip('/')
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_url = redirect_url
        self.logout_redirect_url = logout_redirect_url
        self.timeout = timeout
        self.scope = scope
    
    @classmethod
    def from_config(cls, config):
        return cls(
            domain=config['AUTH_DOMAIN'],
            client_id=config['AUTH_CLIENT_ID'],
            client_secret=config['AUTH_CLIENT_SECRET'],
            redirect_url=config['AUTH_REDIRECT_URL'],
            logout_redirect_url=config['AUTH_LOGOUT_REDIRECT_URL'],
            timeout=config.get('AUTH_TIMEOUT', 6),
        )
    
    def _require_configured(self):
        if not self.domain or not self.client_id:
            logger.error('Auth provider domain or client id is not configured')
            raise AuthProviderError('Auth provider is not configured')
    
    def _authorize_url(self, state, **extra):
        self._require_configured()
        params = {
            'response_type': 'code',
            'client_id': self.client_id,
            'redirect_uri': self.redirect_url,
            'scope': self.scope,
            'state': state,
        }
        params.update(extra)
        return f'{self.domain}/oauth2/auth?{urlencode(params)}'
    
    def login_url(self, state):
        """URL of the provider's sign-in page."""
        return self._authorize_url(state)
    
    def register_url(self, state):
        """URL of the provider's sign-up page."""
        return self._authorize_url(state, prompt='create')
    
    def logout_url(self):
        self._require_configured()
        return f"{self.domain}/logout?{urlencode({'redirect': self.logout_redirect_url})}"
    
    def exchange_code(self, code):
        """Trade an authorization code for the provider's token payload."""
        data = {
            'grant_type': 'authorization_code',
            'code': code,
            'redirect_uri': self.redirect_url,
            'client_id': self.client_id,
            'client_secret': self.client_secret,
        }
        payload = self._request('post', f'{self.domain}/oauth2/token', data=data)
        if not payload.get('access_token'):
            raise AuthProviderError('Token response did not include an access token')
        return payload
    
    def fetch_profile(self, access_token):
        """Fetch the signed-in user's profile.
        
        Returns:
            dict with the keys in PROFILE_FIELDS (missing ones are None)
        """
        headers = {'Authorization': f'Bearer {access_token}'}
        data = self._request('get', f'{self.domain}/oauth2/v2/user_profile', headers=headers)
        
        profile = {field: data.get(field) for field in PROFILE_FIELDS}
        # v2 profiles carry the subject as `sub`
        profile['id'] = profile['id'] or data.get('sub')
        if not profile['id']:
            raise AuthProviderError('User profile did not include an id')
        return profile
    
    def _request(self, method, url, **kwargs):
        logger.debug('Auth provider %s %s', method.upper(), url)
        try:
            resp = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.exception('Auth provider request timed out: %s', url)
            raise AuthProviderError('Auth provider request timed out') from e
        except requests.exceptions.RequestException as e:
            logger.exception('Auth provider request failed: %s', url)
            raise AuthProviderError(str(e)) from e
        
        if resp.status_code != 200:
            logger.warning('Auth provider returned status %s for %s', resp.status_code, url)
            raise AuthProviderError(f'Auth provider error {resp.status_code}')
        
        try:
            return resp.json()
        except ValueError as e:
            raise AuthProviderError('Auth provider returned invalid JSON') from e
