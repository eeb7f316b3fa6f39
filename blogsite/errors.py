"""
Application Errors
"""


class BlogError(Exception):
    """Base class for errors raised by the blog application"""
    status_code = 500
    message = 'Something went wrong.'


class ConfigurationError(BlogError):
    """Required configuration is missing at startup"""


class PostStoreError(BlogError):
    """The post store could not be queried"""
    status_code = 503
    message = 'Posts could not be loaded right now.'


class AuthProviderError(BlogError):
    """The hosted authentication provider failed or was unreachable"""
    status_code = 502
    message = 'The sign-in service is unavailable right now.'


class AuthStateError(BlogError):
    """Callback state does not match the one issued at login"""
    status_code = 400
    message = 'The sign-in request could not be verified.'
