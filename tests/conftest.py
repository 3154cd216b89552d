"""Pytest configuration and shared fixtures for the settings page tests.

The testing config must be selected before app.py is imported, since the
Flask app is configured at import time.
"""

import os

os.environ['FLASK_ENV'] = 'testing'

import pytest

from app import app as flask_app, settings_manager
from models import db


@pytest.fixture
def app():
    """The Flask app with a fresh in-memory database."""
    with flask_app.app_context():
        db.create_all()
    yield flask_app
    with flask_app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def request_ctx(app):
    """A request context for calling the manager directly; g starts empty."""
    with app.test_request_context('/admin/options-general/transifex-stats'):
        yield


@pytest.fixture
def manager():
    """The manager registered on the app."""
    return settings_manager
