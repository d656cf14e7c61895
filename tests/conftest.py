import pytest

from roomq.factory import create_web_app

from .util import CLIENT_ID, SECRET, TICKET_ISSUER


@pytest.fixture()
def app():
    app = create_web_app({
        'ROOMQ_CLIENT_ID': CLIENT_ID,
        'ROOMQ_JWT_SECRET': SECRET,
        'ROOMQ_TICKET_ISSUER': TICKET_ISSUER,
        'ROOMQ_DEBUG': '1',
    })
    app.config['TESTING'] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
