import pytest
from flask import Flask
from flask.testing import FlaskClient

from practice_api.app import create_app
from practice_api.config import ServerSettings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(ServerSettings(cors_origins=["http://localhost:5173"]))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
