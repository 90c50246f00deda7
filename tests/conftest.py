"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from notifications import AbstractNotifier  # noqa: E402


class RecordingNotifier(AbstractNotifier):
    """Keeps every dispatched code in memory so tests can read it back."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def send_verification_code(self, email: str, code: str) -> None:
        self.sent.append((email, code))

    def last_code(self, email: str) -> str:
        codes = [code for sent_to, code in self.sent if sent_to == email]
        assert codes, f"no code was sent to {email}"
        return codes[-1]


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    NOTIFIER_BACKEND = "log"
    CORS_ORIGINS = "*"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)
    application.extensions["notifier"] = RecordingNotifier()

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def notifier(app: Flask) -> RecordingNotifier:
    return app.extensions["notifier"]


@pytest.fixture()
def app_context(app: Flask):
    """Push an application context for tests that call services directly."""

    with app.app_context():
        yield


@pytest.fixture()
def address_payload() -> dict:
    return {
        "cityName": "A",
        "countyName": "B",
        "districtName": "C",
        "addressText": "D",
    }


@pytest.fixture()
def registration_payload(address_payload) -> dict:
    return {
        "email": "alice@x.com",
        "password": "pw123",
        "firstName": "Alice",
        "lastName": "Smith",
        "address": address_payload,
    }
