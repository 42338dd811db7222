from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from calculatrice.app import create_app
from calculatrice.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    return create_app(settings)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
