"""
Session User

The provider owns user records. This wrapper exposes the stored profile
to Flask-Login and templates; it is never persisted.
"""

from flask_login import UserMixin


class SessionUser(UserMixin):
    """Profile returned by the hosted provider for the signed-in user"""
    
    def __init__(self, profile):
        self.profile = dict(profile)
    
    def get_id(self):
        return str(self.profile['id'])
    
    @property
    def id(self):
        return self.profile['id']
    
    @property
    def given_name(self):
        return self.profile.get('given_name')
    
    @property
    def family_name(self):
        return self.profile.get('family_name')
    
    @property
    def email(self):
        return self.profile.get('email')
    
    @property
    def picture(self):
        return self.profile.get('picture')
    
    @property
    def display_name(self):
        parts = [p for p in (self.given_name, self.family_name) if p]
        return ' '.join(parts) or self.email or self.get_id()
    
    def __repr__(self):
        return f'<SessionUser {self.get_id()}>'
