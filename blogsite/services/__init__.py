"""
Services Package

Exports all services for easy importing.
"""

from blogsite.services.auth_view import select_auth_view

__all__ = ['select_auth_view']
