import os
import tempfile

import pytest

os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['JWT_SECRET'] = 'test-secret'
os.environ['ADMIN_EMAIL'] = 'admin@example.com'
os.environ['ADMIN_PASSWORD'] = 'correct-horse'
os.environ['SITE_TITLE'] = 'Test Portfolio'
os.environ.setdefault('UPLOAD_FOLDER', tempfile.mkdtemp())

from app import app as flask_app  # noqa: E402
from models import db  # noqa: E402

ADMIN_CREDENTIALS = {"email": "admin@example.com", "password": "correct-horse"}


@pytest.fixture
def app(tmp_path):
    flask_app.config.update(TESTING=True, UPLOAD_FOLDER=str(tmp_path / "uploads"))
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    response = client.post('/api/auth/login', json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    return client
