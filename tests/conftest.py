import os
# Ensure the app factory picks the Testing config & SQLite memory DB
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///:memory:")

import pytest
from campus_tour import create_app
from campus_tour.config import TestingConfig
from campus_tour.errors import IntakeError, NotificationError, PersistenceError
from campus_tour.extensions import db


def make_config(upload_dir, **overrides):
    """TestingConfig with a private upload folder and mail credentials set (sending is suppressed)."""
    attrs = {
        "UPLOAD_FOLDER": str(upload_dir),
        "MAIL_USERNAME": "campus.tour@example.com",
        "MAIL_PASSWORD": "app-token",
        "ADMIN_EMAIL": "admin@example.com",
        "MAIL_SUPPRESS_SEND": True,
        "PASSWORD_POLICY": "hash",
    }
    attrs.update(overrides)
    return type("Config", (TestingConfig,), attrs)


@pytest.fixture(scope="session")
def upload_dir(tmp_path_factory):
    return tmp_path_factory.mktemp("uploads")


@pytest.fixture(scope="session")
def app(upload_dir):
    app = create_app(make_config(upload_dir))
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()

@pytest.fixture()
def client(app):
    return app.test_client()

@pytest.fixture(autouse=True)
def _db_clean(request):
    # Only tests that use the shared app get their tables wiped
    if "app" not in request.fixturenames:
        yield
        return
    app = request.getfixturevalue("app")
    with app.app_context():
        db.session.rollback()
        for tbl in reversed(db.metadata.sorted_tables):
            db.session.execute(tbl.delete())
        db.session.commit()
    yield


class FailingStore:
    """Stands in for an unreachable database."""
    def add_login(self, *args, **kwargs): raise PersistenceError("database unreachable")
    list_logins = add_feedback = list_feedback = add_login

class RecordingNotifier:
    def __init__(self, exc=None): self.calls, self._exc = [], exc
    def notify(self, **payload):
        self.calls.append(payload)
        if self._exc is not None:
            raise self._exc
        return True

class FailingIntake:
    """Upload folder that cannot be written."""
    def save(self, upload): raise IntakeError("disk full")

@pytest.fixture()
def failing_store():
    return FailingStore()

@pytest.fixture()
def failing_intake():
    return FailingIntake()

@pytest.fixture()
def recording_notifier():
    return RecordingNotifier()

@pytest.fixture()
def failing_notifier():
    return RecordingNotifier(exc=NotificationError("smtp said no"))


@pytest.fixture()
def make_app(tmp_path):
    """Factory for one-off apps with substituted collaborators or config."""
    created = []

    def _make(config_overrides=None, **services):
        app = create_app(make_config(tmp_path / "uploads", **(config_overrides or {})), **services)
        with app.app_context():
            db.create_all()
        created.append(app)
        return app

    yield _make
    for app in created:
        with app.app_context():
            db.drop_all()
