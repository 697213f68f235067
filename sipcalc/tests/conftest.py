from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from sipcalc.app import create_app
from sipcalc.config import Settings


@pytest.fixture()
def app():
    flask_app = create_app(Settings(log_level="DEBUG"))
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
