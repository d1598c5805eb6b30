import pytest

from app import create_app
from app.extensions import db
from app.utils.auth import create_token


@pytest.fixture()
def app(tmp_path):
    app = create_app("config.TestingConfig")
    app.config["UPLOAD_DIRECTORY"] = str(tmp_path / "uploads")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_headers(app):
    return {"Authorization": f"Bearer {create_token('tester')}"}


@pytest.fixture()
def article_payload():
    return {
        "authorId": 1,
        "title": "Test Article",
        "content": "This is the content of the test article.",
        "publicationDate": "2024-08-13 10:00:00",
        "keywords": ["keyword1", "keyword2"],
        "status": "published",
        "slug": "test-article",
    }
