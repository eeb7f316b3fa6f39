"""
Models Package

Exports all models for easy importing.
"""

from blogsite.models.post import BlogPost
from blogsite.models.user import SessionUser

__all__ = ['BlogPost', 'SessionUser']
