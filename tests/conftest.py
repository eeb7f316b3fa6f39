import pytest

from blogsite import create_app
from blogsite.config import TestConfig
from blogsite.extensions import db


PROFILE = {
    'id': 'kp_1f2e3d',
    'given_name': 'Ayoub',
    'family_name': 'Benali',
    'email': 'ayoub@example.com',
    'picture': 'https://images.example.com/ayoub.png',
}


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def signed_in(client):
    # Same session state the auth callback leaves behind
    with client.session_transaction() as sess:
        sess['auth_profile'] = dict(PROFILE)
        sess['_user_id'] = PROFILE['id']
    return dict(PROFILE)
